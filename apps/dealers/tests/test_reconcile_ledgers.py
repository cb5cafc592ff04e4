import pytest
from decimal import Decimal
from io import StringIO
from unittest.mock import Mock, patch
from django.core.management import call_command
from apps.dealers.models import BatchStatus, Dealer, DealerBatch
from apps.dealers.services import BatchSettlementService
from apps.wallet.models import Wallet
from apps.wallet.services import get_admin_wallet


def _run(*args):
    out = StringIO()
    call_command('reconcile_ledgers', *args, stdout=out)
    return out.getvalue()


@pytest.mark.django_db
class TestReconcileLedgers:

    def test_consistent_ledgers(self, batch):
        BatchSettlementService.add_payment(batch.id, 120)

        assert 'All ledgers are consistent.' in _run()

    def test_fixes_drift(self, batch, dealer):
        BatchSettlementService.add_payment(batch.id, 120)
        DealerBatch.objects.filter(id=batch.id).update(
            paid_amount=Decimal('0.00'), status=BatchStatus.PENDING_PAYMENT
        )
        Dealer.objects.filter(id=dealer.id).update(total_mobiles=9)
        Wallet.objects.filter(id=get_admin_wallet().id).update(balance=Decimal('1.00'))

        output = _run()

        assert 'Fixed 3 record(s).' in output
        batch.refresh_from_db()
        dealer.refresh_from_db()
        assert batch.paid_amount == Decimal('120.00')
        assert batch.status == BatchStatus.PARTIALLY_PAID
        assert dealer.total_mobiles == 2
        assert get_admin_wallet().balance == Decimal('120.00')

    def test_dry_run_changes_nothing(self, batch, dealer):
        Dealer.objects.filter(id=dealer.id).update(total_mobiles=9)

        output = _run('--dry-run')

        assert 'no changes made' in output
        dealer.refresh_from_db()
        assert dealer.total_mobiles == 9

    def test_wallet_locked_before_ledger_is_summed(self, batch):
        from apps.wallet import services as wallet_services
        module = 'apps.dealers.management.commands.reconcile_ledgers'
        calls = Mock()
        with patch(f'{module}.lock_admin_wallet', wraps=wallet_services.lock_admin_wallet) as lock, \
                patch(f'{module}.compute_ledger_balance', wraps=wallet_services.compute_ledger_balance) as total:
            calls.attach_mock(lock, 'lock_admin_wallet')
            calls.attach_mock(total, 'compute_ledger_balance')
            _run()

        assert [c[0] for c in calls.mock_calls] == ['lock_admin_wallet', 'compute_ledger_balance']
