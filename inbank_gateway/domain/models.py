"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from inbank_gateway.domain.exceptions import DomainException


@dataclass(frozen=True)
class LoanRequest:
    """Loan application as submitted by the customer"""

    personal_code: str
    loan_amount: int
    loan_period: int  # months


class CreditSegment(str, Enum):
    """Applicant class derived from the last four digits of the personal code"""

    DEBT = "debt"
    SEGMENT_1 = "segment_1"
    SEGMENT_2 = "segment_2"
    SEGMENT_3 = "segment_3"


@dataclass(frozen=True)
class Decision:
    """
    Output of the decision engine.

    Either an approved amount together with a period, or an error message.
    Never both, never neither.
    """

    loan_amount: Optional[int] = None
    loan_period: Optional[int] = None
    error_message: Optional[str] = None
    error_code: Optional[str] = None

    def __post_init__(self) -> None:
        has_offer = self.loan_amount is not None and self.loan_period is not None
        partial_offer = (self.loan_amount is None) != (self.loan_period is None)
        has_error = self.error_message is not None

        if partial_offer:
            raise ValueError("Decision needs both loan amount and loan period")
        if has_offer == has_error:
            raise ValueError("Decision must carry either an offer or an error, not both")

    @classmethod
    def approved(cls, loan_amount: int, loan_period: int) -> "Decision":
        return cls(loan_amount=loan_amount, loan_period=loan_period)

    @classmethod
    def rejected(cls, error: DomainException) -> "Decision":
        return cls(error_message=error.message, error_code=error.code)

    @property
    def is_approved(self) -> bool:
        return self.error_message is None
