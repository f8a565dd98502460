"""
Payment services.

Functions:
    mark_tickets_paid: Settle a set of tickets with a single payment.
    clear_partial_payments: Drop every partial payment of one account.
"""

import logging
from datetime import date
from decimal import Decimal

from django.db import transaction
from django.utils import timezone

from apps.tickets.models import Ticket
from .exceptions import NoTicketsSelectedError, UnknownTicketsError
from .models import Payment

logger = logging.getLogger(__name__)


@transaction.atomic
def mark_tickets_paid(*, ticket_ids: list, paid_on: date = None) -> Payment:
    """
    Create one payment that settles every given ticket.

    Args:
        ticket_ids: Ids of the tickets to settle (duplicates are ignored)
        paid_on: Payment date, defaults to today

    Returns:
        The new Payment. Its amount is the sum of the tickets' profits and
        its ``tickets`` list references all of them.

    Raises:
        NoTicketsSelectedError: If ticket_ids is empty
        UnknownTicketsError: If any id does not match a ticket
    """
    ids = list(dict.fromkeys(str(ticket_id) for ticket_id in ticket_ids))
    if not ids:
        raise NoTicketsSelectedError("Select at least one ticket")

    tickets = list(Ticket.objects.filter(id__in=ids))
    found = {str(ticket.id) for ticket in tickets}
    missing = [ticket_id for ticket_id in ids if ticket_id not in found]
    if missing:
        logger.warning(f"Mark paid rejected, unknown tickets: {missing}")
        raise UnknownTicketsError(missing)

    if len(tickets) == 1:
        period = f"Payment for ticket {tickets[0].pnr}"
    else:
        period = f"Bulk payment for {len(tickets)} tickets"

    accounts = {ticket.account for ticket in tickets}

    payment = Payment.objects.create(
        date=paid_on or timezone.localdate(),
        amount=sum((ticket.profit for ticket in tickets), Decimal('0')),
        period=period,
        account=accounts.pop() if len(accounts) == 1 else '',
        tickets=ids,
        is_partial=False,
    )

    logger.info(f"Payment {payment.id} settles {len(ids)} ticket(s) for {payment.amount}")
    return payment


@transaction.atomic
def clear_partial_payments(*, account: str) -> dict:
    """
    Delete all partial payments recorded for an account.

    Used when the account's remaining open tickets are settled in full.

    Returns:
        dict with ``message``, ``deleted`` (count) and ``amount`` (sum).
    """
    partials = Payment.objects.select_for_update().filter(account=account, is_partial=True)
    rows = list(partials)

    if not rows:
        return {'message': 'No partial payments to delete', 'deleted': 0, 'amount': Decimal('0')}

    total = sum((payment.amount for payment in rows), Decimal('0'))
    Payment.objects.filter(id__in=[payment.id for payment in rows]).delete()

    logger.info(f"Cleared {len(rows)} partial payment(s) totalling {total} for account '{account}'")
    return {'message': 'Partial payments cleared', 'deleted': len(rows), 'amount': total}
