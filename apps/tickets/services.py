"""
Ticket aggregation services.

Read-only rollups over the ticket ledger: profit by ticket type and the
per-account overview of open (not yet paid) tickets. Both return plain
dicts of ``Decimal`` values that the views hand straight to ``Response``.
"""

import logging
from datetime import date
from decimal import Decimal

from django.db.models import Sum, Count, DecimalField, Value
from django.db.models.functions import Coalesce

from apps.payments.models import Payment
from .exceptions import InvalidDateRangeError
from .models import Ticket, TicketType

logger = logging.getLogger(__name__)

ZERO = Decimal('0')


def _money_sum(field):
    return Coalesce(Sum(field), Value(ZERO), output_field=DecimalField(max_digits=14, decimal_places=2))


def paid_ticket_ids():
    """Return the set of ticket id strings referenced by any payment."""
    ids = set()
    for refs in Payment.objects.values_list('tickets', flat=True):
        if refs:
            ids.update(str(ref) for ref in refs)
    return ids


class TicketAnalytics:
    """
    Aggregations over tickets and payments.

    Methods:
        profit_summary: Profit grouped by ticket type.
        account_overview: Dues per account over open tickets.
    """

    @staticmethod
    def profit_summary(queryset=None):
        """
        Sum profit per ticket type.

        Args:
            queryset: Optional ticket queryset to summarise (defaults to all).

        Returns:
            dict: ``train``, ``bus``, ``flight``, ``total`` and
            ``total_tickets``. The per-type values always add up to
            ``total``; types with no tickets report 0.
        """
        if queryset is None:
            queryset = Ticket.objects.all()

        result = {choice: ZERO for choice in TicketType.values}
        rows = (
            queryset.order_by()
            .values('type')
            .annotate(total_profit=_money_sum('profit'))
        )
        for row in rows:
            result[row['type']] = row['total_profit']

        result['total'] = sum((result[choice] for choice in TicketType.values), ZERO)
        result['total_tickets'] = queryset.count()
        return result

    @staticmethod
    def account_overview(date_from: date = None, date_to: date = None):
        """
        Outstanding position per account.

        Only open tickets count, meaning tickets no payment references.
        ``partial`` sums the account's partial payments dated inside the
        same window; an account with partials but no open tickets still
        gets a row with zero amounts. ``due = max(0, amount - refund - partial)``.

        Args:
            date_from: Inclusive booking date lower bound.
            date_to: Inclusive booking date upper bound.

        Returns:
            dict: ``accounts`` (list sorted by account name) and ``totals``.

        Raises:
            InvalidDateRangeError: If date_from is after date_to.
        """
        if date_from and date_to and date_from > date_to:
            raise InvalidDateRangeError("date_from must not be after date_to")

        tickets = Ticket.objects.exclude(id__in=paid_ticket_ids())
        partials = Payment.objects.filter(is_partial=True)
        if date_from:
            tickets = tickets.filter(booking_date__gte=date_from)
            partials = partials.filter(date__gte=date_from)
        if date_to:
            tickets = tickets.filter(booking_date__lte=date_to)
            partials = partials.filter(date__lte=date_to)

        partial_by_account = {
            row['account']: row['paid']
            for row in partials.order_by().values('account').annotate(paid=_money_sum('amount'))
        }

        rows = (
            tickets.order_by()
            .values('account')
            .annotate(
                amount=_money_sum('amount'),
                fare=_money_sum('fare'),
                refund=_money_sum('refund'),
                profit=_money_sum('profit'),
                count=Count('id'),
            )
            .order_by('account')
        )

        by_account = {}
        for row in rows:
            partial = partial_by_account.get(row['account'], ZERO)
            by_account[row['account']] = {
                'account': row['account'],
                'amount': row['amount'],
                'fare': row['fare'],
                'refund': row['refund'],
                'partial': partial,
                'due': max(ZERO, row['amount'] - row['refund'] - partial),
                'profit': row['profit'],
                'count': row['count'],
            }

        # Paid-out accounts still show their partial payments
        for account, partial in partial_by_account.items():
            if account not in by_account:
                by_account[account] = {
                    'account': account,
                    'amount': ZERO,
                    'fare': ZERO,
                    'refund': ZERO,
                    'partial': partial,
                    'due': ZERO,
                    'profit': ZERO,
                    'count': 0,
                }

        accounts = [by_account[name] for name in sorted(by_account)]
        totals = {key: ZERO for key in ('amount', 'fare', 'refund', 'partial', 'due', 'profit')}
        totals['count'] = 0
        for entry in accounts:
            for key in totals:
                totals[key] += entry[key]

        return {'accounts': accounts, 'totals': totals}
