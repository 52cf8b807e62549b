"""Loan decision engine - core business logic for loan offers"""

import logging
import math
from datetime import date
from fractions import Fraction
from typing import Callable

from inbank_gateway.config import Settings, settings as default_settings
from inbank_gateway.domain.exceptions import (
    DecisionEngineError,
    InvalidAgeError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
    NoValidLoanError,
)
from inbank_gateway.domain.models import Decision, LoanRequest
from inbank_gateway.domain.personal_code import (
    calculate_age,
    get_credit_segment,
    is_valid_personal_code,
    normalize_personal_code,
)

logger = logging.getLogger(__name__)


def credit_score(credit_modifier: int, loan_period: int, loan_amount: int) -> Fraction:
    """
    Credit score of a loan: credit_modifier * loan_period / loan_amount.

    A score of 1 or more means the amount is approvable for that period.
    Kept as an exact fraction so threshold comparisons are not subject to
    floating point drift.
    """
    return Fraction(credit_modifier * loan_period, loan_amount)


def highest_valid_loan_amount(
    credit_modifier: int,
    loan_period: int,
    loan_amount: int,
    step: int = 100,
    minimum_amount: int = 0,
) -> int:
    """
    Find the largest approvable amount for a fixed period.

    Starting from the requested amount:
    - score == 1: the requested amount is the ceiling
    - score > 1:  step the amount up until the score is no longer above 1
    - score < 1:  step the amount down until the score reaches 1

    The result is floor(modifier * period / score / step) * step, i.e. the
    amount where the walk crossed the threshold, rounded down to a whole step.

    Stepping down below minimum_amount gives up and returns 0; the caller is
    expected to retry with a longer period.
    """
    score = credit_score(credit_modifier, loan_period, loan_amount)

    if score > 1:
        while score > 1:
            loan_amount += step
            score = credit_score(credit_modifier, loan_period, loan_amount)
    elif score < 1:
        while score < 1:
            loan_amount -= step
            if loan_amount <= 0 or loan_amount < minimum_amount:
                return 0
            score = credit_score(credit_modifier, loan_period, loan_amount)

    return math.floor(credit_modifier * loan_period / score / step) * step


class DecisionEngine:
    """
    Calculates the approved loan amount and period for a customer.

    The loan amount is bounded by the customer's credit modifier, which is
    determined by the last four digits of their personal ID code. The modifier
    is resolved per call and passed along explicitly, so a single engine can
    serve concurrent requests.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        validator: Callable[[str], bool] = is_valid_personal_code,
        today: Callable[[], date] = date.today,
    ):
        self.settings = settings or default_settings
        self.validator = validator
        self.today = today

    def decide(self, personal_code: str, loan_amount: int, loan_period: int) -> Decision:
        """
        Make a loan decision without raising on business outcomes.

        Returns an approved Decision, or a rejected one carrying the reason.
        """
        try:
            return self.calculate_approved_loan(personal_code, loan_amount, loan_period)
        except DecisionEngineError as e:
            logger.info("Loan rejected", extra={"reason": e.code})
            return Decision.rejected(e)

    def decide_request(self, request: LoanRequest) -> Decision:
        return self.decide(request.personal_code, request.loan_amount, request.loan_period)

    def calculate_approved_loan(self, personal_code: str, loan_amount: int, loan_period: int) -> Decision:
        """
        Find the maximum loan amount and the shortest period it can be granted for.

        Starting at the requested period, the period is extended one month at a
        time until the highest valid amount reaches the minimum loan amount. The
        offered amount never exceeds the maximum loan amount.

        Raises:
            InvalidPersonalCodeError: Personal ID code is invalid
            InvalidAgeError: Customer is outside the allowed age range
            InvalidLoanAmountError: Requested amount is out of bounds
            InvalidLoanPeriodError: Requested period is out of bounds
            NoValidLoanError: No approvable amount up to the maximum period
        """
        personal_code = normalize_personal_code(personal_code)
        self.verify_inputs(personal_code, loan_amount, loan_period)

        credit_modifier = self.get_credit_modifier(personal_code)
        if credit_modifier == 0:
            raise NoValidLoanError()

        for period in range(loan_period, self.settings.maximum_loan_period + 1):
            highest_amount = highest_valid_loan_amount(
                credit_modifier,
                period,
                loan_amount,
                step=self.settings.loan_amount_step,
                minimum_amount=self.settings.minimum_loan_amount,
            )
            if highest_amount >= self.settings.minimum_loan_amount:
                return Decision.approved(
                    min(self.settings.maximum_loan_amount, highest_amount),
                    period,
                )
            logger.debug("No valid amount for period", extra={"loan_period": period})

        raise NoValidLoanError()

    def verify_inputs(self, personal_code: str, loan_amount: int, loan_period: int) -> None:
        """
        Check inputs against business rules, in order:
        personal code, age, loan amount, loan period.
        """
        personal_code = normalize_personal_code(personal_code)

        if not self.validator(personal_code):
            raise InvalidPersonalCodeError()

        age = calculate_age(personal_code, self.today())
        if age < self.settings.minimum_age or age > self.settings.maximum_age:
            raise InvalidAgeError()

        if loan_amount < self.settings.minimum_loan_amount or loan_amount > self.settings.maximum_loan_amount:
            raise InvalidLoanAmountError()

        if loan_period < self.settings.minimum_loan_period or loan_period > self.settings.maximum_loan_period:
            raise InvalidLoanPeriodError()

    def get_credit_modifier(self, personal_code: str) -> int:
        """Credit modifier of the customer's segment (0 for debtors)"""
        segment = get_credit_segment(normalize_personal_code(personal_code))
        return self.settings.credit_modifier(segment)
