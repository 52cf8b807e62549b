"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    code = "domain_error"
    default_message = "Domain error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class DecisionEngineError(DomainException):
    """Business outcome that ends a decision without an offer"""

    pass


class InvalidPersonalCodeError(DecisionEngineError):
    """Personal ID code is malformed or fails the checksum"""

    code = "invalid_personal_code"
    default_message = "Invalid personal ID code!"


class InvalidAgeError(DecisionEngineError):
    """Applicant age is outside the allowed range"""

    code = "invalid_age"
    default_message = "You are not approved for a loan due to age."


class InvalidLoanAmountError(DecisionEngineError):
    """Requested amount is outside the configured bounds"""

    code = "invalid_loan_amount"
    default_message = "Invalid loan amount!"


class InvalidLoanPeriodError(DecisionEngineError):
    """Requested period is outside the configured bounds"""

    code = "invalid_loan_period"
    default_message = "Invalid loan period!"


class NoValidLoanError(DecisionEngineError):
    """No approvable amount exists for any allowed period"""

    code = "no_valid_loan"
    default_message = "No valid loan found!"
