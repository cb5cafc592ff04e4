"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data
    python manage.py create_sample_data --clear

This creates:
- 3 users (admin, alice, bob)
- Cards and platforms for the regular users
- Bookings in every lifecycle stage
- 2 dealers, one batch partly paid and one settled
- Wallet entries produced by those settlements and payouts
"""

from datetime import date, timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User, UserRole
from apps.bookings.models import Booking, BookingStatus
from apps.bookings.services import create_booking, mark_user_paid, update_booking_status
from apps.cards.models import Card, CardType
from apps.dealers.models import BatchSequence, Dealer, DealerBatch
from apps.dealers.services import BatchSettlementService
from apps.platforms.models import Platform
from apps.wallet.models import Wallet


class Command(BaseCommand):
    help = 'Create sample data for testing the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        self.create_cards_and_platforms(users)
        bookings = self.create_bookings(users)
        self.create_dealer_batches(users, bookings)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin / admin123 (admin)')
        self.stdout.write('  alice / password123')
        self.stdout.write('  bob / password123')

    def clear_data(self):
        """Clear all booking data and the sample users."""
        Wallet.objects.all().delete()
        Booking.objects.all().delete()
        DealerBatch.objects.all().delete()
        BatchSequence.objects.all().delete()
        Dealer.objects.all().delete()
        Card.objects.all().delete()
        Platform.objects.all().delete()
        User.objects.filter(username__in=['admin', 'alice', 'bob']).delete()

    def create_users(self):
        self.stdout.write('  Creating users...')

        admin, _ = User.objects.get_or_create(
            username='admin',
            defaults={'role': UserRole.ADMIN, 'is_staff': True, 'is_superuser': True},
        )
        admin.set_password('admin123')
        admin.save()

        users = {'admin': admin}
        for username in ('alice', 'bob'):
            user, _ = User.objects.get_or_create(username=username)
            user.set_password('password123')
            user.save()
            users[username] = user
        return users

    def create_cards_and_platforms(self, users):
        self.stdout.write('  Creating cards and platforms...')

        for username in ('alice', 'bob'):
            user = users[username]
            Card.objects.get_or_create(
                user=user,
                alias=f'{username.title()} Credit',
                defaults={
                    'bank_name': 'HDFC',
                    'last_four': '4242',
                    'card_type': CardType.CREDIT,
                    'limit': Decimal('200000'),
                    'available_limit': Decimal('200000'),
                },
            )
            Platform.objects.get_or_create(
                user=user,
                name='Amazon',
                defaults={'account_alias': f'{username}@amazon'},
            )

    def create_bookings(self, users):
        """Six bookings per user, walked through the lifecycle by position."""
        self.stdout.write('  Creating bookings...')

        models = [
            ('iPhone 15', Decimal('69900')),
            ('Pixel 8', Decimal('58999')),
            ('Galaxy S24', Decimal('74999')),
            ('OnePlus 12', Decimal('64999')),
            ('iPhone 15 Pro', Decimal('127900')),
            ('Nothing Phone 2', Decimal('36999')),
        ]
        stages = [
            [],
            [BookingStatus.DELIVERED],
            [BookingStatus.DELIVERED, BookingStatus.GIVEN_TO_ADMIN],
            [BookingStatus.DELIVERED, BookingStatus.GIVEN_TO_ADMIN],
            [BookingStatus.DELIVERED, BookingStatus.GIVEN_TO_ADMIN],
            [BookingStatus.DELIVERED, BookingStatus.GIVEN_TO_ADMIN],
        ]

        bookings = {}
        for username in ('alice', 'bob'):
            user = users[username]
            created = []
            for i, ((model, price), path) in enumerate(zip(models, stages)):
                booking = create_booking(
                    user=user,
                    booking_date=date.today() - timedelta(days=30 - i),
                    mobile_model=model,
                    booking_price=price,
                    platform='Amazon',
                    card=f'{username.title()} Credit',
                )
                for next_status in path:
                    update_booking_status(booking_id=booking.id, user=user, status=next_status)
                created.append(booking)
            bookings[username] = created
        return bookings

    def create_dealer_batches(self, users, bookings):
        self.stdout.write('  Creating dealers and batches...')

        metro = Dealer.objects.create(name='Metro Mobiles', phone='+91 98000 00001')
        city = Dealer.objects.create(name='City Phones', phone='+91 98000 00002')

        # alice's handed-over phones go to Metro and are settled in full
        settled = {b.id: b.booking_price + Decimal('1500') for b in bookings['alice'][2:4]}
        batch = BatchSettlementService.create_batch(dealer_id=metro.id, booking_amounts=settled)
        BatchSettlementService.add_payment(batch_id=batch.id, amount=sum(settled.values()), notes='Bank transfer')
        for booking_id in settled:
            mark_user_paid(booking_id=booking_id)

        # bob's go to City, only part paid so far
        partial = {b.id: b.booking_price + Decimal('1000') for b in bookings['bob'][2:5]}
        batch = BatchSettlementService.create_batch(dealer_id=city.id, booking_amounts=partial)
        BatchSettlementService.add_payment(batch_id=batch.id, amount=Decimal('50000'), notes='Advance')
