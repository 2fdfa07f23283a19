"""Domain Exceptions - Business rule violations and contract errors."""

from .base import DomainException
from .fee import UnpricedGradeException
from .plan import (
    PlanContractViolation,
    UnknownPlanTypeException,
    InvalidFrequencyException,
    InvalidInstallmentConfigException,
)
from .snapshot import SnapshotFetchException

__all__ = [
    "DomainException",
    "UnpricedGradeException",
    "PlanContractViolation",
    "UnknownPlanTypeException",
    "InvalidFrequencyException",
    "InvalidInstallmentConfigException",
    "SnapshotFetchException",
]
