"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional


class DecisionRequest(BaseModel):
    """Request body for POST /loan/decision"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    personal_code: str = Field(..., min_length=1, description="Estonian personal ID code")
    loan_amount: int = Field(..., description="Requested loan amount in euros")
    loan_period: int = Field(..., description="Requested loan period in months")


class DecisionResponse(BaseModel):
    """Response for POST /loan/decision"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    loan_amount: Optional[int] = None
    loan_period: Optional[int] = None
    error_message: Optional[str] = None
