"""Plan request Pydantic schemas sent to the payment backend."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from fee_engine.domain.entities import NormalizedPlanRequest


class PlanRequestSchema(BaseModel):
    """
    Plan fields of the student registration request.

    Fields that do not apply to the plan are left out of the payload
    entirely rather than sent as null.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "paymentType": "INSTALLMENT",
                    "frequency": "WEEKLY",
                    "numberOfPayments": 12,
                    "bankCode": "058",
                    "bankAccountNumber": "0123456789",
                    "amount": 1000,
                }
            ]
        },
    )

    payment_type: str = Field(
        ...,
        alias="paymentType",
        description="SINGLE_PAYMENT, INSTALLMENT or SUBSCRIPTION",
    )
    frequency: Optional[str] = Field(
        default=None,
        description="WEEKLY or MONTHLY; always MONTHLY for subscriptions",
    )
    number_of_payments: Optional[int] = Field(
        default=None,
        alias="numberOfPayments",
        ge=1,
        description="Installment count, installment plans only",
    )
    bank_code: Optional[str] = Field(default=None, alias="bankCode")
    bank_account_number: Optional[str] = Field(
        default=None,
        alias="bankAccountNumber",
        min_length=10,
        max_length=10,
    )
    amount: Optional[int] = Field(
        default=None,
        ge=0,
        description="Total fee for the class grade",
    )

    @classmethod
    def from_entity(
        cls,
        request: NormalizedPlanRequest,
        amount: Optional[int] = None,
    ) -> "PlanRequestSchema":
        return cls(
            payment_type=request.plan_type.value,
            frequency=request.frequency.value if request.frequency else None,
            number_of_payments=request.number_of_payments,
            bank_code=request.bank_code,
            bank_account_number=request.account_number,
            amount=amount,
        )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class SwitchPlanRequestSchema(BaseModel):
    """Body of a request to move an existing student to another plan."""

    model_config = ConfigDict(populate_by_name=True)

    new_payment_type: str = Field(..., alias="newPaymentType")
    frequency: Optional[str] = None
    number_of_installments: Optional[int] = Field(
        default=None,
        alias="numberOfInstallments",
        ge=1,
    )
    bank_code: Optional[str] = Field(default=None, alias="bankCode")
    bank_account_number: Optional[str] = Field(
        default=None,
        alias="bankAccountNumber",
        min_length=10,
        max_length=10,
    )

    @classmethod
    def from_entity(cls, request: NormalizedPlanRequest) -> "SwitchPlanRequestSchema":
        return cls(
            new_payment_type=request.plan_type.value,
            frequency=request.frequency.value if request.frequency else None,
            number_of_installments=request.number_of_payments,
            bank_code=request.bank_code,
            bank_account_number=request.account_number,
        )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
