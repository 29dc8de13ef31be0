import logging
from typing import Optional

from requests import RequestException
from twilio.base.exceptions import TwilioException, TwilioRestException
from twilio.http.http_client import TwilioHttpClient
from twilio.rest import Client

from ...config import Settings
from ...exceptions import VerificationProviderError
from ...application.ports.verification_provider import VerificationProvider

logger = logging.getLogger(__name__)


class TwilioVerifyProvider(VerificationProvider):
    """Twilio Verify adapter. Every SDK or transport failure surfaces as VerificationProviderError."""

    def __init__(self, account_sid: str, auth_token: str, verify_sid: str, client: Optional[Client] = None, timeout: Optional[float] = None):
        if not verify_sid:
            raise RuntimeError("Twilio Verify Service SID not configured")
        if client is None:
            client = Client(account_sid, auth_token, http_client=TwilioHttpClient(timeout=timeout))
        self.client = client
        self.verify_sid = verify_sid

    @classmethod
    def from_settings(cls, settings: Settings) -> "TwilioVerifyProvider":
        return cls(
            settings.TWILIO_ACCOUNT_SID,
            settings.TWILIO_AUTH_TOKEN,
            settings.TWILIO_VERIFY_SERVICE_SID,
            timeout=settings.TWILIO_HTTP_TIMEOUT,
        )

    def _service(self):
        return self.client.verify.services(self.verify_sid)

    def start(self, phone: str, channel: str = "sms") -> str:
        try:
            verification = self._service().verifications.create(to=phone, channel=channel)
        except TwilioRestException as e:
            logger.error(f"Twilio rejected verification start ({e.status}, code {e.code}): {e.msg}")
            raise VerificationProviderError(e.msg or str(e)) from e
        except (TwilioException, RequestException) as e:
            logger.error(f"Twilio verification start failed: {e}")
            raise VerificationProviderError(str(e)) from e
        return verification.status

    def check(self, phone: str, code: str) -> str:
        try:
            check = self._service().verification_checks.create(to=phone, code=code)
        except TwilioRestException as e:
            logger.error(f"Twilio rejected verification check ({e.status}, code {e.code}): {e.msg}")
            raise VerificationProviderError(e.msg or str(e)) from e
        except (TwilioException, RequestException) as e:
            logger.error(f"Twilio verification check failed: {e}")
            raise VerificationProviderError(str(e)) from e
        return check.status
