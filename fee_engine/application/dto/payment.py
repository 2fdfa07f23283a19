"""Data transfer objects for payment presentation."""

from dataclasses import dataclass
from typing import Optional

from fee_engine.domain.entities import PaymentRecord, PaymentState, PlanType
from fee_engine.service.billing import (
    amount_label,
    classify,
    format_naira,
    plan_label,
    resolve_display_amount,
)


@dataclass(frozen=True)
class PaymentView:
    """Everything a payment card or modal displays for one record."""

    payment_id: str
    plan_label: str
    status: PaymentState
    status_label: str
    status_badge: str
    amount: int
    amount_text: str
    amount_label: str
    is_partial: bool
    installment_progress: Optional[float]
    progress_text: Optional[str]
    show_virtual_account: bool
    show_transfer_reminder: bool
    can_cancel_subscription: bool

    @classmethod
    def from_entity(cls, record: PaymentRecord) -> "PaymentView":
        display = resolve_display_amount(record)
        status = classify(record.status)
        is_recurring = record.payment_type in (PlanType.INSTALLMENT, PlanType.SUBSCRIPTION)

        progress_text = None
        if display.installment_progress is not None:
            progress_text = (
                f"Payment {record.completed_payments or 0} of {record.number_of_payments}"
            )

        return cls(
            payment_id=record.id,
            plan_label=plan_label(record.payment_type),
            status=status.state,
            status_label=status.label,
            status_badge=status.badge,
            amount=display.amount,
            amount_text=format_naira(display.amount),
            amount_label=amount_label(display),
            is_partial=display.is_partial,
            installment_progress=display.installment_progress,
            progress_text=progress_text,
            show_virtual_account=(
                status.state == PaymentState.PENDING and record.virtual_account is not None
            ),
            show_transfer_reminder=(
                is_recurring
                and status.state == PaymentState.PENDING
                and bool(record.customer_account_number)
            ),
            can_cancel_subscription=(
                record.payment_type == PlanType.SUBSCRIPTION
                and status.state == PaymentState.ACTIVE
            ),
        )
