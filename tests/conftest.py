import pytest
from fastapi.testclient import TestClient

from verification_gateway.config import Settings
from verification_gateway.exceptions import VerificationProviderError
from verification_gateway.main import create_app
from verification_gateway.application.ports.verification_provider import VerificationProvider


class FakeProvider(VerificationProvider):
    def __init__(self, start_status="pending", check_status="approved", error=None):
        self.start_status = start_status
        self.check_status = check_status
        self.error = error
        self.started = []
        self.checked = []

    def start(self, phone: str, channel: str = "sms") -> str:
        self.started.append((phone, channel))
        if self.error:
            raise self.error
        return self.start_status

    def check(self, phone: str, code: str) -> str:
        self.checked.append((phone, code))
        if self.error:
            raise self.error
        return self.check_status


class RecordingAudit:
    def __init__(self):
        self.entries = []

    def log(self, action, phone, success=True, request_id=None, details=None):
        self.entries.append({"action": action, "phone": phone, "success": success, "details": details or {}})


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        TWILIO_ACCOUNT_SID="ACtest",
        TWILIO_AUTH_TOKEN="test-token",
        TWILIO_VERIFY_SERVICE_SID="VAtest",
        PRICES_FILE=str(tmp_path / "prices.json"),
    )


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def audit():
    return RecordingAudit()


@pytest.fixture
def client(settings, provider, audit):
    app = create_app(settings, verification_provider=provider, audit_logger=audit)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def provider_error():
    return VerificationProviderError("Invalid parameter `To`: 12345")
