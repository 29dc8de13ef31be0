import logging

import pytest

from verification_gateway import main as main_module
from verification_gateway.config import Settings, load_settings

REQUIRED = ("TWILIO_ACCOUNT_SID", "TWILIO_AUTH_TOKEN", "TWILIO_VERIFY_SERVICE_SID")


@pytest.fixture
def twilio_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.setenv("TWILIO_ACCOUNT_SID", "ACtest")
    monkeypatch.setenv("TWILIO_AUTH_TOKEN", "test-token")
    monkeypatch.setenv("TWILIO_VERIFY_SERVICE_SID", "VAtest")
    return monkeypatch


def test_settings_defaults(twilio_env):
    s = load_settings(_env_file=None)
    assert s.PORT == 3000
    assert s.VERIFICATION_CHANNEL == "sms"
    assert s.PRICES_FILE.endswith("prices.json")
    assert s.allowed_origins_list == ["*"]


def test_port_from_environment(twilio_env):
    twilio_env.setenv("PORT", "8080")
    assert load_settings(_env_file=None).PORT == 8080


@pytest.mark.parametrize("missing", REQUIRED)
def test_missing_required_value_exits(twilio_env, caplog, missing):
    twilio_env.delenv(missing)
    with caplog.at_level(logging.CRITICAL):
        with pytest.raises(SystemExit) as exc:
            load_settings(_env_file=None)
    assert exc.value.code == 1
    assert f"{missing} is not defined" in caplog.text


def test_empty_required_value_exits(twilio_env):
    twilio_env.setenv("TWILIO_AUTH_TOKEN", "")
    with pytest.raises(SystemExit):
        load_settings(_env_file=None)


def test_settings_read_dotenv_file(monkeypatch, tmp_path):
    for name in REQUIRED:
        monkeypatch.delenv(name, raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text(
        "TWILIO_ACCOUNT_SID=ACfile\nTWILIO_AUTH_TOKEN=tok\nTWILIO_VERIFY_SERVICE_SID=VAfile\n",
        encoding="utf-8",
    )
    s = Settings(_env_file=str(env_file))
    assert s.TWILIO_VERIFY_SERVICE_SID == "VAfile"


def test_main_exits_before_binding_when_config_missing(twilio_env):
    twilio_env.delenv("TWILIO_VERIFY_SERVICE_SID")
    calls = []
    twilio_env.setattr(main_module, "load_dotenv", lambda: None)
    twilio_env.setattr(main_module.uvicorn, "run", lambda *a, **kw: calls.append((a, kw)))
    with pytest.raises(SystemExit) as exc:
        main_module.main()
    assert exc.value.code == 1
    assert calls == []


def test_main_serves_on_configured_port(twilio_env):
    twilio_env.setenv("PORT", "4321")
    calls = []
    twilio_env.setattr(main_module, "load_dotenv", lambda: None)
    twilio_env.setattr(main_module.uvicorn, "run", lambda app, **kw: calls.append(kw))
    main_module.main()
    assert calls == [{"host": "0.0.0.0", "port": 4321, "log_level": "info"}]
