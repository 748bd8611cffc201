import pytest
from pydantic import ValidationError

from presence.config import Settings


def test_defaults():
    settings = Settings.from_env({})
    assert settings.port == 3000
    assert settings.host == "0.0.0.0"
    assert settings.public_dir == "public"
    assert settings.outbox_size == 256


def test_reads_environment():
    settings = Settings.from_env({"PORT": "8080", "PUBLIC_DIR": "/srv/client", "OUTBOX_SIZE": "16", "UNRELATED": "x"})
    assert settings.port == 8080
    assert settings.public_dir == "/srv/client"
    assert settings.outbox_size == 16


def test_empty_values_fall_back_to_defaults():
    assert Settings.from_env({"PORT": ""}).port == 3000


@pytest.mark.parametrize("env", [{"PORT": "not-a-port"}, {"PORT": "70000"}, {"OUTBOX_SIZE": "0"}])
def test_invalid_values_rejected(env):
    with pytest.raises(ValidationError):
        Settings.from_env(env)


def test_log_level_is_case_insensitive():
    assert Settings.from_env({"LOG_LEVEL": "debug"}).log_level == "DEBUG"
    assert Settings.from_env({}).log_level == "INFO"


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings.from_env({"LOG_LEVEL": "verbose"})
