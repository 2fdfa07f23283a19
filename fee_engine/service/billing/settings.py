"""
Billing Settings for the school fee engine.

This module contains the configurable parameters for fee lookup and
installment plans. They can be adjusted via environment variables
when the school changes its fees or installment policy.

Environment variables use the FEES_ prefix:
    FEES_DOWN_PAYMENT_PERCENT=25
    FEES_WEEKLY_MAX_PAYMENTS=10
    FEES_FEE_SCHEDULE_JSON='{"JSS1": 150000, "SS3": 180000}'

Usage:
    from fee_engine.service.billing.settings import billing_settings

    # Use default settings (loaded from env)
    percent = billing_settings.down_payment_percent

    # Or create custom settings for testing
    custom = BillingSettings(down_payment_percent=50)
"""

import json
from functools import lru_cache
from typing import Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BillingSettings(BaseSettings):
    """
    Configurable parameters for fee and installment computation.

    All settings can be overridden via environment variables with FEES_ prefix.
    All monetary values are whole naira.
    """

    model_config = SettingsConfigDict(
        env_prefix="FEES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Installment Plan ===
    down_payment_percent: int = Field(
        default=20,
        ge=0,
        le=100,
        description="Share of the total fee collected up front on installment plans",
    )
    weekly_max_payments: int = Field(
        default=12,
        ge=1,
        description="Default and maximum number of weekly installments",
    )
    monthly_max_payments: int = Field(
        default=3,
        ge=1,
        description="Default and maximum number of monthly installments",
    )

    # === Fee Schedule ===
    fee_schedule_json: str = Field(
        default='{"JSS1": 1000, "JSS2": 1000, "JSS3": 1000, "SS1": 1000, "SS2": 1000, "SS3": 1000}',
        description="Total fee per class grade as a JSON object: {grade: fee}",
    )

    # === Display ===
    currency_symbol: str = Field(
        default="₦",
        description="Symbol prefixed to formatted amounts",
    )

    @field_validator("fee_schedule_json")
    @classmethod
    def validate_schedule_json(cls, v: str) -> str:
        """Validate that the schedule is a JSON object of non-negative integer fees."""
        try:
            schedule = json.loads(v)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")
        if not isinstance(schedule, dict):
            raise ValueError("Fee schedule must be a JSON object")
        for grade, fee in schedule.items():
            if not grade.strip():
                raise ValueError("Grade codes cannot be blank")
            if isinstance(fee, bool) or not isinstance(fee, int):
                raise ValueError(f"Fee for {grade} must be an integer")
            if fee < 0:
                raise ValueError(f"Fee for {grade} cannot be negative: {fee}")
        return v

    @property
    def fee_schedule(self) -> Dict[str, int]:
        """Total fee per class grade, in configured order."""
        return json.loads(self.fee_schedule_json)


@lru_cache
def get_billing_settings() -> BillingSettings:
    """Get cached billing settings instance."""
    return BillingSettings()


billing_settings = get_billing_settings()
