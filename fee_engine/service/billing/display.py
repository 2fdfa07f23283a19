"""
Payment Display Resolver.

Decides which single amount a payer sees for a payment record, used
by the registration success card, the invoice modal and the payment
detail view alike.

Precedence, first match wins:
    1. Installment with a remaining balance below the full amount
       → remaining balance (partial)
    2. Installment with a down payment below the full amount and no
       remaining balance reported → down payment (partial)
    3. Subscription → full amount; a down payment is never shown
    4. Anything else → full amount
"""

from typing import Optional

from fee_engine.domain.entities import (
    AmountSource,
    DisplayAmount,
    PaymentRecord,
    PlanType,
)


def _installment_progress(record: PaymentRecord) -> Optional[float]:
    if record.payment_type != PlanType.INSTALLMENT:
        return None
    if not record.number_of_payments or record.number_of_payments <= 0:
        return None
    completed = record.completed_payments or 0
    return min(1.0, max(0.0, completed / record.number_of_payments))


def resolve_display_amount(record: PaymentRecord) -> DisplayAmount:
    """
    Resolve the amount to show for a payment record.

    Args:
        record: Payment snapshot from the backend

    Returns:
        DisplayAmount with the figure, whether it is partial, whether
        installment progress has started, and the completed fraction
    """
    progress_started = (record.completed_payments or 0) > 0
    progress = _installment_progress(record)

    if record.payment_type == PlanType.INSTALLMENT:
        if record.remaining_amount is not None:
            if record.remaining_amount < record.amount:
                return DisplayAmount(
                    amount=record.remaining_amount,
                    is_partial=True,
                    progress_started=progress_started,
                    installment_progress=progress,
                    source=AmountSource.REMAINING_BALANCE,
                )
        elif record.down_payment is not None and record.down_payment < record.amount:
            return DisplayAmount(
                amount=record.down_payment,
                is_partial=True,
                progress_started=progress_started,
                installment_progress=progress,
                source=AmountSource.DOWN_PAYMENT,
            )

    # Subscriptions and single payments always show the full amount
    return DisplayAmount(
        amount=record.amount,
        is_partial=False,
        progress_started=progress_started,
        installment_progress=progress,
        source=AmountSource.AMOUNT,
    )


def amount_label(display: DisplayAmount) -> str:
    """
    Caption for a resolved amount.

    A remaining balance is captioned "Down Payment" until the first
    scheduled payment completes.
    """
    if display.source == AmountSource.REMAINING_BALANCE:
        return "Remaining Balance" if display.progress_started else "Down Payment"
    if display.source == AmountSource.DOWN_PAYMENT:
        return "Down Payment"
    return "Amount"


def plan_label(plan_type: PlanType) -> str:
    if plan_type == PlanType.INSTALLMENT:
        return "Installment Plan"
    if plan_type == PlanType.SUBSCRIPTION:
        return "Subscription Plan"
    return "Full Payment"
