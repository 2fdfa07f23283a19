"""Payment-related Pydantic schemas for backend responses."""

from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from fee_engine.domain.entities import (
    ChildSummary,
    PaymentRecord,
    PaymentSnapshot,
    PlanType,
    VirtualAccount,
)
from fee_engine.domain.exceptions import SnapshotFetchException


def _parse_payment_type(raw: Optional[str]) -> PlanType:
    """
    Map a backend payment type onto a plan type.

    Unrecognized or missing types are treated as single payments.
    """
    parsed = PlanType.parse(raw)
    if parsed is not None:
        return parsed
    normalized = (raw or "").upper()
    if "INSTALLMENT" in normalized:
        return PlanType.INSTALLMENT
    if "SUBSCRIPTION" in normalized:
        return PlanType.SUBSCRIPTION
    return PlanType.SINGLE


class _BackendSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class VirtualAccountSchema(_BackendSchema):
    """Nested virtual account object."""

    number: str = Field(
        ...,
        validation_alias="accountNumber",
        description="Virtual account number to transfer into",
    )
    bank_name: Optional[str] = None
    account_name: Optional[str] = None
    expiry_date: Optional[str] = None

    def to_entity(self) -> VirtualAccount:
        return VirtualAccount(
            number=self.number,
            bank_name=self.bank_name,
            account_name=self.account_name,
            expiry_date=self.expiry_date,
        )


class PaymentRecordSchema(_BackendSchema):
    """
    Schema for a payment record returned by the backend.

    Virtual account details arrive either nested under virtualAccount
    or flat on the record, either plain (accountNumber, bankName, ...)
    or prefixed (virtualAccountNumber, virtualAccountBankName, ...).
    Installment counts come as numberOfPayments or numberOfInstallments.
    """

    id: str = Field(..., description="Payment identifier")
    description: str = Field(default="", description="What is being paid for")
    amount: int = Field(..., description="Full obligation in naira", examples=[1000])
    payment_type: Optional[str] = Field(default=None, examples=["INSTALLMENT"])
    status: str = Field(default="", examples=["PENDING"])
    down_payment: Optional[int] = None
    remaining_amount: Optional[int] = None
    completed_payments: Optional[int] = None
    number_of_payments: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices(
            "numberOfPayments", "numberOfInstallments", "number_of_payments"
        ),
    )
    customer_account_number: Optional[str] = None
    category: Optional[str] = None

    virtual_account: Optional[VirtualAccountSchema] = None
    virtual_account_number: Optional[str] = None
    account_number: Optional[str] = None
    bank_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("bankName", "virtualAccountBankName", "bank_name"),
    )
    account_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("accountName", "virtualAccountName", "account_name"),
    )
    expiry_date: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "expiryDate", "virtualAccountExpiryDate", "expiry_date"
        ),
    )

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        """Backends send numeric ids; keep them as strings."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("description", "status", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    def _virtual_account(self) -> Optional[VirtualAccount]:
        if self.virtual_account is not None:
            return self.virtual_account.to_entity()
        number = self.virtual_account_number or self.account_number
        if not number:
            return None
        return VirtualAccount(
            number=number,
            bank_name=self.bank_name,
            account_name=self.account_name,
            expiry_date=self.expiry_date,
        )

    def to_entity(self) -> PaymentRecord:
        return PaymentRecord(
            id=self.id,
            description=self.description,
            amount=self.amount,
            payment_type=_parse_payment_type(self.payment_type),
            status=self.status,
            down_payment=self.down_payment,
            remaining_amount=self.remaining_amount,
            completed_payments=self.completed_payments,
            number_of_payments=self.number_of_payments,
            customer_account_number=self.customer_account_number,
            virtual_account=self._virtual_account(),
            category=self.category,
        )


class ChildSummarySchema(_BackendSchema):
    """Schema for a student listed under a parent."""

    id: str
    first_name: Optional[str] = None
    surname: Optional[str] = None
    pending_amount: Optional[int] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    def to_entity(self) -> ChildSummary:
        name = " ".join(part for part in (self.first_name, self.surname) if part)
        return ChildSummary(id=self.id, name=name, pending_amount=self.pending_amount)


_payments_adapter = TypeAdapter(List[PaymentRecordSchema])
_children_adapter = TypeAdapter(List[ChildSummarySchema])


def payments_from_api(data: Any) -> List[PaymentRecord]:
    """Parse a backend payment list into entities."""
    return [schema.to_entity() for schema in _payments_adapter.validate_python(data)]


def snapshot_from_api(children: Any, payments: Any) -> PaymentSnapshot:
    """
    Build a snapshot from one round of backend responses.

    Raises:
        SnapshotFetchException: If either payload is malformed
    """
    try:
        child_entities = [
            schema.to_entity() for schema in _children_adapter.validate_python(children)
        ]
        payment_entities = payments_from_api(payments)
    except PydanticValidationError as e:
        raise SnapshotFetchException(f"Malformed payment data: {e.error_count()} errors")

    return PaymentSnapshot(
        children=tuple(child_entities),
        payments=tuple(payment_entities),
    )
