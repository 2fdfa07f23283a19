"""
Polling Trigger and dashboard aggregates.

Decides from a snapshot whether the consumer should keep refreshing,
and derives the per-child and overall outstanding totals shown on the
parent dashboard.
"""

import dataclasses
from typing import Iterable, Optional, Sequence

from fee_engine.domain.entities import ChildSummary, PaymentRecord

from .display import resolve_display_amount
from .status import classify


def is_open(payment: PaymentRecord) -> bool:
    """Whether a payment is still pending or active."""
    return classify(payment.status).state.is_open


def should_poll(
    children: Iterable[ChildSummary],
    payments: Iterable[PaymentRecord],
) -> bool:
    """
    Decide whether the payment views should keep refreshing.

    Args:
        children: Children listed on the dashboard
        payments: Payments in the current snapshot

    Returns:
        True if any child has a pending amount above zero or any
        payment is pending or active
    """
    if any((child.pending_amount or 0) > 0 for child in children):
        return True
    return any(is_open(payment) for payment in payments)


def total_outstanding(payments: Iterable[PaymentRecord]) -> int:
    """Sum of the displayed amounts of all open payments."""
    return sum(
        resolve_display_amount(payment).amount
        for payment in payments
        if is_open(payment)
    )


def with_pending_amount(
    child: ChildSummary,
    payments: Iterable[PaymentRecord],
) -> ChildSummary:
    """Copy of a child with pending_amount recomputed from its payments."""
    return dataclasses.replace(child, pending_amount=total_outstanding(payments))


def reselect(
    selected: PaymentRecord,
    payments: Sequence[PaymentRecord],
) -> PaymentRecord:
    """
    Find the refreshed version of the payment currently on screen.

    A record matches when its id is the same and either its payment
    type or its description is unchanged.

    Args:
        selected: Record shown before the refresh
        payments: Payments from the new snapshot

    Returns:
        The matching record from the new snapshot, or the previously
        selected record when none matches
    """
    match: Optional[PaymentRecord] = next(
        (
            payment
            for payment in payments
            if payment.id == selected.id
            and (
                payment.payment_type == selected.payment_type
                or payment.description == selected.description
            )
        ),
        None,
    )
    return match if match is not None else selected
