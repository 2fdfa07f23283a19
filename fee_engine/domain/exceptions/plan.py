"""Payment plan contract exceptions."""

from typing import Any

from .base import DomainException


class PlanContractViolation(DomainException):
    """
    Raised when a caller breaks the engine's input contract.

    These are programming errors, distinct from the validation
    errors returned for bad user input.
    """

    def __init__(self, message: str, code: str = "PLAN_CONTRACT_VIOLATION"):
        super().__init__(message=message, code=code)


class UnknownPlanTypeException(PlanContractViolation):
    """Raised when a plan type outside SINGLE/INSTALLMENT/SUBSCRIPTION is given."""

    def __init__(self, plan_type: Any):
        super().__init__(
            message=f"Unknown plan type: {plan_type!r}",
            code="UNKNOWN_PLAN_TYPE",
        )
        self.plan_type = plan_type


class InvalidFrequencyException(PlanContractViolation):
    """Raised when the installment calculator receives an unknown frequency."""

    def __init__(self, frequency: Any):
        super().__init__(
            message=f"Unknown installment frequency: {frequency!r}",
            code="INVALID_FREQUENCY",
        )
        self.frequency = frequency


class InvalidInstallmentConfigException(PlanContractViolation):
    """Raised when installment parameters are outside their allowed range."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_INSTALLMENT_CONFIG",
        )
