"""Payment record entities as reported by the payment backend."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Tuple

from .plan import PlanType


class PaymentState(str, Enum):
    """Semantic payment states used for presentation."""

    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    SUCCESSFUL = "SUCCESSFUL"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"
    UNKNOWN = "UNKNOWN"

    @property
    def is_open(self) -> bool:
        """Still awaiting money (pending transfer or running schedule)."""
        return self in (PaymentState.PENDING, PaymentState.ACTIVE)


class AmountSource(str, Enum):
    """Which record field a displayed amount was taken from."""

    AMOUNT = "amount"
    REMAINING_BALANCE = "remaining_amount"
    DOWN_PAYMENT = "down_payment"


@dataclass(frozen=True)
class VirtualAccount:
    """Backend-issued collection account for a pending payment."""

    number: str
    bank_name: Optional[str] = None
    account_name: Optional[str] = None
    expiry_date: Optional[str] = None


@dataclass(frozen=True)
class PaymentRecord:
    """
    Snapshot of a payment as returned by the backend.

    Optional fields are None when the backend omitted them. Absent
    and zero mean different things to the display rules.

    Attributes:
        id: Backend identifier
        description: Free-text description of what is being paid
        amount: Full obligation in naira
        payment_type: Plan the payment belongs to
        status: Raw backend status string
        down_payment: Initial partial amount for installment plans
        remaining_amount: Balance left on an installment plan
        completed_payments: Scheduled payments already collected
        number_of_payments: Scheduled payments in the plan
        customer_account_number: Parent's linked bank account
        virtual_account: Collection account, if one was issued
        category: Backend fee category (e.g. SCHOOL_FEES)
    """

    id: str
    amount: int
    payment_type: PlanType
    status: str
    description: str = ""
    down_payment: Optional[int] = None
    remaining_amount: Optional[int] = None
    completed_payments: Optional[int] = None
    number_of_payments: Optional[int] = None
    customer_account_number: Optional[str] = None
    virtual_account: Optional[VirtualAccount] = None
    category: Optional[str] = None


@dataclass(frozen=True)
class StatusClassification:
    """Presentation state for a raw status string."""

    state: PaymentState
    label: str
    badge: str


@dataclass(frozen=True)
class DisplayAmount:
    """
    The single amount a payer should be shown for a payment.

    Attributes:
        amount: Figure to display
        is_partial: True for a down payment or remaining balance
        progress_started: True once at least one scheduled payment completed
        installment_progress: Completed fraction (0-1) for installment plans
        source: Record field the amount was taken from
    """

    amount: int
    is_partial: bool
    progress_started: bool
    installment_progress: Optional[float] = None
    source: AmountSource = AmountSource.AMOUNT


@dataclass(frozen=True)
class ChildSummary:
    """A registered student as listed on the parent dashboard."""

    id: str
    name: str = ""
    pending_amount: Optional[int] = None


@dataclass(frozen=True)
class PaymentSnapshot:
    """Children and payments captured by a single fetch."""

    children: Tuple[ChildSummary, ...] = ()
    payments: Tuple[PaymentRecord, ...] = ()
    fetched_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
