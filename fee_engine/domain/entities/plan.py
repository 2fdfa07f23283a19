"""Payment plan domain entities."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class Frequency(str, Enum):
    """How often an installment falls due."""

    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"

    @classmethod
    def parse(cls, value: Any) -> Optional["Frequency"]:
        """Return the matching frequency (any casing), or None if unrecognized."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


class PlanType(str, Enum):
    """Fee payment plan chosen by the parent."""

    SINGLE = "SINGLE_PAYMENT"  # Pay in full
    INSTALLMENT = "INSTALLMENT"  # Down payment + fixed number of payments
    SUBSCRIPTION = "SUBSCRIPTION"  # Recurring monthly auto-debit

    @classmethod
    def parse(cls, value: Any) -> Optional["PlanType"]:
        """
        Return the plan type for a raw value, or None if unrecognized.

        The backend and the portal spell single payments several ways;
        SINGLE, SINGLE_PAYMENT and ONE_TIME all map to SINGLE.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        normalized = value.strip().upper()
        if normalized in ("SINGLE", "SINGLE_PAYMENT", "ONE_TIME"):
            return cls.SINGLE
        try:
            return cls(normalized)
        except ValueError:
            return None


@dataclass(frozen=True)
class InstallmentResult:
    """
    Preview of an installment plan for a given total fee.

    Attributes:
        down_payment: Amount collected before the schedule begins
        remaining_amount: total_fee - down_payment
        number_of_payments: Number of scheduled payments after the down payment
        amount_per_payment: Ceiling of remaining_amount / number_of_payments
        frequency: Weekly or monthly schedule
    """

    down_payment: int
    remaining_amount: int
    number_of_payments: int
    amount_per_payment: int
    frequency: Frequency

    @property
    def total_fee(self) -> int:
        return self.down_payment + self.remaining_amount

    @property
    def final_payment(self) -> int:
        """
        Amount of the last scheduled payment once ceiling overshoot is removed.

        Small balances spread over many periods are covered before the
        schedule ends; the trailing periods are then zero, never negative.
        """
        covered = self.amount_per_payment * (self.number_of_payments - 1)
        return max(0, self.remaining_amount - covered)


@dataclass(frozen=True)
class BankSelection:
    """Bank account the parent authorizes for recurring debits."""

    bank_code: str
    account_number: str


@dataclass(frozen=True)
class InstallmentSelection:
    """Raw installment choices as entered by the user."""

    frequency: Any = None
    count: Optional[int] = None


@dataclass(frozen=True)
class ValidationError:
    """A single violated plan selection rule, reported back to the user."""

    field: str
    message: str


@dataclass(frozen=True)
class NormalizedPlanRequest:
    """
    Plan selection ready to forward to the payment backend.

    Fields that do not apply to the plan type are None, never
    empty strings or zero.
    """

    plan_type: PlanType
    frequency: Optional[Frequency] = None
    number_of_payments: Optional[int] = None
    bank_code: Optional[str] = None
    account_number: Optional[str] = None


@dataclass(frozen=True)
class PlanSelectionResult:
    """Outcome of validating a plan selection."""

    request: Optional[NormalizedPlanRequest] = None
    errors: List[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def error_for(self, field_name: str) -> Optional[str]:
        """First error message for a field, if any."""
        for error in self.errors:
            if error.field == field_name:
                return error.message
        return None
