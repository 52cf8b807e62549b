"""Configuration management using Pydantic Settings"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from inbank_gateway.domain.models import CreditSegment


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Loan bounds
    minimum_loan_amount: int = Field(2000, gt=0)
    maximum_loan_amount: int = 10000
    minimum_loan_period: int = Field(12, gt=0)  # months
    maximum_loan_period: int = 60  # months

    # Credit modifiers per segment (Debt is always 0)
    segment_1_credit_modifier: int = Field(100, gt=0)
    segment_2_credit_modifier: int = Field(300, gt=0)
    segment_3_credit_modifier: int = Field(1000, gt=0)

    # Amount search step, also the rounding increment of approved amounts
    loan_amount_step: int = Field(100, gt=0)

    # Applicant age window (inclusive)
    minimum_age: int = 18
    maximum_age: int = 80

    # Service
    service_name: str = "inbank-gateway"
    log_level: str = "INFO"

    @model_validator(mode="after")
    def check_bounds(self) -> "Settings":
        if self.minimum_loan_amount > self.maximum_loan_amount:
            raise ValueError("minimum_loan_amount must not exceed maximum_loan_amount")
        if self.minimum_loan_period > self.maximum_loan_period:
            raise ValueError("minimum_loan_period must not exceed maximum_loan_period")
        if self.minimum_age > self.maximum_age:
            raise ValueError("minimum_age must not exceed maximum_age")
        return self

    def credit_modifier(self, segment: CreditSegment) -> int:
        """Credit modifier configured for a segment"""
        modifiers = {
            CreditSegment.DEBT: 0,
            CreditSegment.SEGMENT_1: self.segment_1_credit_modifier,
            CreditSegment.SEGMENT_2: self.segment_2_credit_modifier,
            CreditSegment.SEGMENT_3: self.segment_3_credit_modifier,
        }
        return modifiers[segment]


settings = Settings()
