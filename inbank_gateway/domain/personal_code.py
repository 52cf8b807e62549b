"""Estonian personal ID code (isikukood) parsing: birth date, age and credit segment"""

from datetime import date

from stdnum.ee import ik

from inbank_gateway.domain.exceptions import InvalidPersonalCodeError
from inbank_gateway.domain.models import CreditSegment
from inbank_gateway.utils.date_utils import full_years_between


def normalize_personal_code(personal_code: str) -> str:
    """Strip the whitespace the checksum validator tolerates, so parsing sees the same digits"""
    return ik.compact(personal_code)


def is_valid_personal_code(personal_code: str) -> bool:
    """Format and checksum check for an Estonian personal ID code"""
    return ik.is_valid(personal_code)


def extract_birth_date(personal_code: str) -> date:
    """
    Read the birth date encoded in a personal ID code.

    Layout: GYYMMDDSSSC
    - G: century/gender digit (3, 4 -> 1900s, anything else -> 2000s)
    - YYMMDD: birth date
    - SSS + C: sequence number and check digit

    Raises:
        InvalidPersonalCodeError: If the digits do not form a calendar date
    """
    try:
        century = int(personal_code[0])
        year = int(personal_code[1:3])
        month = int(personal_code[3:5])
        day = int(personal_code[5:7])
        base_year = 1900 if century in (3, 4) else 2000
        return date(base_year + year, month, day)
    except (ValueError, IndexError) as e:
        raise InvalidPersonalCodeError() from e


def calculate_age(personal_code: str, today: date) -> int:
    """Customer's age in whole years on the given day"""
    return full_years_between(extract_birth_date(personal_code), today)


def get_credit_segment(personal_code: str) -> CreditSegment:
    """
    Map the last four digits of a personal ID code to a credit segment.

    Debt      - 0000...2499
    Segment 1 - 2500...4999
    Segment 2 - 5000...7499
    Segment 3 - 7500...9999
    """
    try:
        segment = int(personal_code[-4:])
    except ValueError as e:
        raise InvalidPersonalCodeError() from e

    if segment < 2500:
        return CreditSegment.DEBT
    elif segment < 5000:
        return CreditSegment.SEGMENT_1
    elif segment < 7500:
        return CreditSegment.SEGMENT_2
    return CreditSegment.SEGMENT_3
