"""POST /loan/decision - loan decision endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from inbank_gateway.api.v1.schemas import DecisionRequest, DecisionResponse
from inbank_gateway.api.dependencies import get_decision_engine, get_request_id
from inbank_gateway.domain.decision_engine import DecisionEngine
from inbank_gateway.domain.exceptions import (
    InvalidAgeError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
    NoValidLoanError,
)
from inbank_gateway.infrastructure.observability.metrics import record_decision
from inbank_gateway.infrastructure.observability.logging import log_decision

router = APIRouter()

# HTTP status per rejection reason
ERROR_STATUS_CODES = {
    InvalidPersonalCodeError.code: 400,
    InvalidAgeError.code: 400,
    InvalidLoanAmountError.code: 400,
    InvalidLoanPeriodError.code: 400,
    NoValidLoanError.code: 404,
}

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


@router.post("/decision", response_model=DecisionResponse)
async def request_decision(
    request_body: DecisionRequest,
    request: Request,
    engine: DecisionEngine = Depends(get_decision_engine),
):
    """
    Decide the maximum loan amount and period for a customer.

    Flow:
    1. Validate personal code, age, amount and period
    2. Resolve the customer's credit modifier
    3. Search the highest valid amount, extending the period if needed
    4. Return the offer, or the reason no offer can be made
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        decision = engine.decide(
            request_body.personal_code,
            request_body.loan_amount,
            request_body.loan_period,
        )
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        return JSONResponse(
            status_code=500,
            content=DecisionResponse(error_message=UNEXPECTED_ERROR_MESSAGE).model_dump(by_alias=True),
        )

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_decision(decision, request_body.loan_period)
    log_decision(request_id, request_body.personal_code, decision, duration_ms, request_body.loan_period)

    response = DecisionResponse(
        loan_amount=decision.loan_amount,
        loan_period=decision.loan_period,
        error_message=decision.error_message,
    )

    if decision.is_approved:
        return response

    return JSONResponse(
        status_code=ERROR_STATUS_CODES.get(decision.error_code, 500),
        content=response.model_dump(by_alias=True),
    )
