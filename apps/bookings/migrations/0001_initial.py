# Generated manually for the bookings app

import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('dealers', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Booking',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('booking_date', models.DateField()),
                ('mobile_model', models.CharField(max_length=200)),
                ('booking_price', models.DecimalField(decimal_places=2, max_digits=12, validators=[MinValueValidator(Decimal('0.00'))])),
                ('selling_price', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True, validators=[MinValueValidator(Decimal('0.00'))])),
                ('platform', models.CharField(max_length=100)),
                ('booking_account', models.CharField(blank=True, max_length=200)),
                ('card', models.CharField(help_text='Alias of the card used to pay', max_length=100)),
                ('notes', models.TextField(blank=True)),
                ('dealer', models.CharField(blank=True, max_length=200)),
                ('booking_id', models.CharField(blank=True, help_text='Order id on the platform', max_length=100)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('delivered', 'Delivered'), ('given_to_admin', 'Given to Admin'), ('given_to_dealer', 'Given to Dealer'), ('payment_done', 'Payment Done')], default='pending', max_length=20)),
                ('dealer_amount', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('given_to_admin_at', models.DateTimeField(blank=True, null=True)),
                ('assigned_to_dealer_at', models.DateTimeField(blank=True, null=True)),
                ('dealer_payment_received', models.BooleanField(default=False)),
                ('dealer_payment_date', models.DateTimeField(blank=True, null=True)),
                ('user_payment_given', models.BooleanField(default=False)),
                ('user_payment_date', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('assigned_to_dealer', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='bookings', to='dealers.dealer')),
                ('dealer_batch', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='bookings', to='dealers.dealerbatch')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='bookings', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'bookings',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['user', 'booking_date'], name='bookings_user_id_2d7c4b_idx'),
                    models.Index(fields=['status'], name='bookings_status_61f0aa_idx'),
                    models.Index(fields=['booking_date'], name='bookings_booking_9e3b52_idx'),
                ],
            },
        ),
    ]
