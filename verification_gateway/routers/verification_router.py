import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..application.services import VerificationService
from ..dependencies import get_verification_service, parse_payload, read_payload
from ..schemas import (
    CheckCodeRequest, CheckCodeResponse, ErrorResponse, SendCodeRequest, SendCodeResponse,
)
from ..application.services.verification_service import INVALID_CODE_MESSAGE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["Verification"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or malformed input"},
    500: {"model": ErrorResponse, "description": "Verification provider failure"},
}


@router.post("/send-code", response_model=SendCodeResponse, responses=ERROR_RESPONSES)
def send_code(
    payload: Dict[str, Any] = Depends(read_payload),
    service: VerificationService = Depends(get_verification_service),
):
    """Send an SMS verification code to the given phone number."""
    request = parse_payload(SendCodeRequest, payload)
    status = service.send_code(request.phone)
    return SendCodeResponse(success=True, status=status)


@router.post(
    "/check-code",
    response_model=CheckCodeResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
def check_code(
    payload: Dict[str, Any] = Depends(read_payload),
    service: VerificationService = Depends(get_verification_service),
):
    """Check a submitted code.

    A wrong code is a normal outcome: it answers 200 with ``success: false``.
    """
    request = parse_payload(CheckCodeRequest, payload)
    outcome = service.check_code(request.phone, request.code)
    if outcome.approved:
        return CheckCodeResponse(success=True)
    return CheckCodeResponse(success=False, error=INVALID_CODE_MESSAGE)
