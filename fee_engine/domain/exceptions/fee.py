"""Fee schedule domain exceptions."""

from .base import DomainException


class UnpricedGradeException(DomainException):
    """Raised when a class grade has no entry in the fee schedule."""

    def __init__(self, grade: str):
        super().__init__(
            message=f"No fee configured for class grade: {grade}",
            code="UNPRICED_GRADE",
        )
        self.grade = grade
