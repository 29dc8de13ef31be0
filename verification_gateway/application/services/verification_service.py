import logging
from dataclasses import dataclass
from typing import Optional

from ...exceptions import InvalidRequestError, VerificationProviderError
from ..ports.verification_provider import VerificationProvider
from ..ports.audit_logger import AuditLogger
from ...schemas.verification.verification import VerificationStatus

logger = logging.getLogger(__name__)

APPROVED = VerificationStatus.APPROVED.value
INVALID_CODE_MESSAGE = "Invalid code"


@dataclass
class CheckOutcome:
    approved: bool
    status: str


@dataclass
class VerificationService:
    provider: VerificationProvider
    audit_logger: Optional[AuditLogger] = None
    channel: str = "sms"

    def send_code(self, phone: Optional[str]) -> str:
        """Start a verification and return the provider status (usually "pending")"""
        phone = (phone or "").strip()
        if not phone:
            raise InvalidRequestError("Phone number is required")

        try:
            status = self.provider.start(phone, channel=self.channel)
        except VerificationProviderError as e:
            logger.error(f"Error sending SMS: {e.message}")
            self._audit("send_code", phone, False, {"error": e.message})
            raise

        logger.info(f"Code sent via {self.channel}, status: {status}")
        self._audit("send_code", phone, True, {"status": status})
        return status

    def check_code(self, phone: Optional[str], code: Optional[str]) -> CheckOutcome:
        phone = (phone or "").strip()
        code = (code or "").strip()
        if not phone or not code:
            raise InvalidRequestError("Phone and code are required")

        try:
            status = self.provider.check(phone, code)
        except VerificationProviderError as e:
            logger.error(f"Error verifying code: {e.message}")
            self._audit("check_code", phone, False, {"error": e.message})
            raise

        approved = status == APPROVED
        if approved:
            logger.info("Code verified successfully")
        else:
            logger.info(f"Invalid code submitted, provider status: {status}")
        self._audit("check_code", phone, approved, {"status": status})
        return CheckOutcome(approved=approved, status=status)

    def _audit(self, action: str, phone: str, success: bool, details: dict) -> None:
        if self.audit_logger is not None:
            self.audit_logger.log(action, phone, success=success, details=details)
