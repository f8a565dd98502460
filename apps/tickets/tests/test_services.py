import pytest
from datetime import date
from decimal import Decimal
from apps.payments.models import Payment
from apps.tickets.services import TicketAnalytics, paid_ticket_ids
from apps.tickets.exceptions import InvalidDateRangeError


# =============================================================================
# Profit Summary
# =============================================================================

@pytest.mark.django_db
class TestProfitSummary:

    def test_empty_ledger(self):
        result = TicketAnalytics.profit_summary()

        assert result['train'] == 0
        assert result['bus'] == 0
        assert result['flight'] == 0
        assert result['total'] == 0
        assert result['total_tickets'] == 0

    def test_groups_profit_by_type(self, make_ticket):
        make_ticket(type='train', profit=Decimal('120.50'))
        make_ticket(type='train', profit=Decimal('79.50'))
        make_ticket(type='bus', profit=Decimal('45'))
        make_ticket(type='flight', profit=Decimal('600'))

        result = TicketAnalytics.profit_summary()

        assert result['train'] == Decimal('200.00')
        assert result['bus'] == Decimal('45')
        assert result['flight'] == Decimal('600')
        assert result['total'] == Decimal('845.00')
        assert result['total_tickets'] == 4

    def test_per_type_profits_add_up_to_total(self, make_ticket):
        profits = ['10.10', '-5.25', '333.33', '0.01', '99.99', '47']
        types = ['train', 'bus', 'flight', 'bus', 'flight', 'train']
        for kind, profit in zip(types, profits):
            make_ticket(type=kind, profit=Decimal(profit))

        result = TicketAnalytics.profit_summary()

        assert result['train'] + result['bus'] + result['flight'] == result['total']
        assert result['total'] == sum(Decimal(p) for p in profits)


# =============================================================================
# Account Overview
# =============================================================================

@pytest.mark.django_db
class TestAccountOverview:

    def test_paid_ticket_ids_collects_every_reference(self, make_ticket):
        first = make_ticket()
        second = make_ticket()
        Payment.objects.create(date=date(2025, 1, 20), amount=Decimal('100'), period='p', tickets=[str(first.id)])
        Payment.objects.create(date=date(2025, 1, 21), amount=Decimal('50'), period='partial', is_partial=True)

        assert paid_ticket_ids() == {str(first.id)}
        assert str(second.id) not in paid_ticket_ids()

    def test_only_open_tickets_count(self, make_ticket):
        paid = make_ticket(amount=Decimal('500'))
        make_ticket(amount=Decimal('700'), refund=Decimal('100'))
        Payment.objects.create(date=date(2025, 1, 20), amount=Decimal('100'), period='p', tickets=[str(paid.id)])

        result = TicketAnalytics.account_overview()

        assert len(result['accounts']) == 1
        row = result['accounts'][0]
        assert row['account'] == 'Sharma Travels'
        assert row['amount'] == Decimal('700')
        assert row['refund'] == Decimal('100')
        assert row['due'] == Decimal('600')
        assert row['count'] == 1

    def test_partial_payments_reduce_due(self, make_ticket):
        make_ticket(amount=Decimal('1000'))
        Payment.objects.create(
            date=date(2025, 1, 15), amount=Decimal('300'), period='advance',
            account='Sharma Travels', is_partial=True,
        )

        row = TicketAnalytics.account_overview()['accounts'][0]

        assert row['partial'] == Decimal('300')
        assert row['due'] == Decimal('700')

    def test_due_never_negative(self, make_ticket):
        make_ticket(amount=Decimal('200'))
        Payment.objects.create(
            date=date(2025, 1, 15), amount=Decimal('500'), period='advance',
            account='Sharma Travels', is_partial=True,
        )

        row = TicketAnalytics.account_overview()['accounts'][0]

        assert row['due'] == 0

    def test_paid_out_account_keeps_partial_row(self, make_ticket):
        settled = make_ticket(account='Acme', amount=Decimal('800'))
        Payment.objects.create(
            date=date(2025, 1, 20), amount=Decimal('80'), period='settled',
            account='Acme', tickets=[str(settled.id)],
        )
        Payment.objects.create(
            date=date(2025, 1, 21), amount=Decimal('500'), period='advance',
            account='Acme', is_partial=True,
        )
        make_ticket(account='Other', amount=Decimal('300'))

        result = TicketAnalytics.account_overview()

        assert [row['account'] for row in result['accounts']] == ['Acme', 'Other']
        acme = result['accounts'][0]
        assert acme['amount'] == 0
        assert acme['partial'] == Decimal('500')
        assert acme['due'] == 0
        assert acme['count'] == 0
        assert result['totals']['partial'] == Decimal('500')
        assert result['totals']['due'] == Decimal('300')
        assert result['totals']['count'] == 1

    def test_window_applies_to_tickets_and_partials(self, make_ticket):
        make_ticket(amount=Decimal('1000'), booking_date=date(2025, 1, 10))
        make_ticket(amount=Decimal('400'), booking_date=date(2025, 3, 1))
        Payment.objects.create(
            date=date(2025, 1, 12), amount=Decimal('100'), period='in window',
            account='Sharma Travels', is_partial=True,
        )
        Payment.objects.create(
            date=date(2025, 2, 12), amount=Decimal('900'), period='outside',
            account='Sharma Travels', is_partial=True,
        )

        result = TicketAnalytics.account_overview(date_from=date(2025, 1, 1), date_to=date(2025, 1, 31))
        row = result['accounts'][0]

        assert row['amount'] == Decimal('1000')
        assert row['partial'] == Decimal('100')
        assert row['due'] == Decimal('900')

    def test_totals_sum_accounts(self, make_ticket):
        make_ticket(account='A', amount=Decimal('100'), profit=Decimal('10'))
        make_ticket(account='B', amount=Decimal('200'), profit=Decimal('20'))

        result = TicketAnalytics.account_overview()

        assert [row['account'] for row in result['accounts']] == ['A', 'B']
        assert result['totals']['amount'] == Decimal('300')
        assert result['totals']['profit'] == Decimal('30')
        assert result['totals']['count'] == 2

    def test_invalid_range(self):
        with pytest.raises(InvalidDateRangeError):
            TicketAnalytics.account_overview(date_from=date(2025, 2, 1), date_to=date(2025, 1, 1))
