"""
Management command to recompute running totals from their source records.

Dealer totals, batch remaining/status and the admin wallet balance are all
maintained incrementally. This command recomputes each of them from the
underlying rows (batches, payments, wallet transactions), reports any
drift, and fixes it unless ``--dry-run`` is given.

Usage:
    python manage.py reconcile_ledgers
    python manage.py reconcile_ledgers --dry-run
"""

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.db.models import Sum

from apps.bookings.models import Booking
from apps.dealers.models import Dealer, DealerBatch, DealerBatchPayment
from apps.wallet.services import compute_ledger_balance, lock_admin_wallet

ZERO = Decimal('0.00')


class Command(BaseCommand):
    help = 'Recompute dealer, batch and wallet totals and fix any drift'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Report drift without making changes',
        )

    def handle(self, *args, **options):
        dry_run = options['dry_run']

        with transaction.atomic():
            drift = 0
            drift += self._reconcile_batches(dry_run)
            drift += self._reconcile_dealers(dry_run)
            drift += self._reconcile_wallet(dry_run)

        if drift == 0:
            self.stdout.write(self.style.SUCCESS('All ledgers are consistent.'))
        elif dry_run:
            self.stdout.write(
                self.style.WARNING(f'\n--dry-run mode: {drift} record(s) out of sync, no changes made.')
            )
        else:
            self.stdout.write(self.style.SUCCESS(f'\nFixed {drift} record(s).'))

    def _reconcile_batches(self, dry_run):
        fixed = 0
        for batch in DealerBatch.objects.select_for_update():
            before = (batch.paid_amount, batch.remaining_amount, batch.status)
            batch.paid_amount = batch.payments.aggregate(total=Sum('amount'))['total'] or ZERO
            batch.refresh_settlement()
            after = (batch.paid_amount, batch.remaining_amount, batch.status)
            if before == after:
                continue

            fixed += 1
            self.stdout.write(f'  - batch {batch.batch_id}: {before} -> {after}')
            if not dry_run:
                batch.save(update_fields=['paid_amount', 'remaining_amount', 'status', 'updated_at'])
        return fixed

    def _reconcile_dealers(self, dry_run):
        fixed = 0
        for dealer in Dealer.objects.select_for_update():
            expected = (
                Booking.objects.filter(dealer_batch__dealer=dealer).count(),
                dealer.batches.aggregate(total=Sum('total_amount'))['total'] or ZERO,
                DealerBatchPayment.objects.filter(
                    batch__dealer=dealer
                ).aggregate(total=Sum('amount'))['total'] or ZERO,
            )
            current = (dealer.total_mobiles, dealer.total_amount, dealer.paid_amount)
            if current == expected:
                continue

            fixed += 1
            self.stdout.write(f'  - dealer {dealer.name}: {current} -> {expected}')
            if not dry_run:
                dealer.total_mobiles, dealer.total_amount, dealer.paid_amount = expected
                dealer.save(update_fields=['total_mobiles', 'total_amount', 'paid_amount', 'updated_at'])
        return fixed

    def _reconcile_wallet(self, dry_run):
        wallet = lock_admin_wallet()
        expected = compute_ledger_balance(wallet)
        if wallet.balance == expected:
            return 0

        self.stdout.write(f'  - wallet {wallet.name}: {wallet.balance} -> {expected}')
        if not dry_run:
            wallet.balance = expected
            wallet.save(update_fields=['balance', 'updated_at'])
        return 1
