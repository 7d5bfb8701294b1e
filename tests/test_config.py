"""Config tests"""
import pytest

from speech_batch.config import Config
from speech_batch.constants import (
    ENV_DESTINATION_CONTAINER_URL,
    ENV_SPEECH_ENDPOINT,
    ENV_SPEECH_KEY,
)
from speech_batch.errors import ConfigurationError

REQUIRED = {
    "SPEECH__Endpoint": "https://test-speech-endpoint.cognitiveservices.azure.com",
    "SPEECH__Key": "test-speech-key",
    "TRANSCRIPT__DestinationContainerUrl": "https://test-storage.blob.core.windows.net/transcripts",
}


@pytest.fixture
def no_dotenv(monkeypatch):
    monkeypatch.setattr("speech_batch.config.load_dotenv", lambda **_: None)


def test_config_from_env_success(monkeypatch, no_dotenv):
    """Happy-path: all required env vars present."""
    for name, value in REQUIRED.items():
        monkeypatch.setenv(name, value)

    config = Config.from_env()

    assert config.speech_endpoint == REQUIRED["SPEECH__Endpoint"]
    assert config.speech_key == "test-speech-key"
    assert config.destination_container_url == REQUIRED["TRANSCRIPT__DestinationContainerUrl"]


@pytest.mark.parametrize(
    "missing", [ENV_SPEECH_ENDPOINT, ENV_SPEECH_KEY, ENV_DESTINATION_CONTAINER_URL]
)
def test_config_missing_setting_names_the_key(monkeypatch, no_dotenv, missing):
    for name, value in REQUIRED.items():
        monkeypatch.setenv(name, value)
    monkeypatch.delenv(missing)

    with pytest.raises(ConfigurationError, match=missing) as exc_info:
        Config.from_env()

    assert exc_info.value.key == missing


@pytest.mark.parametrize(
    "missing", [ENV_SPEECH_ENDPOINT, ENV_SPEECH_KEY, ENV_DESTINATION_CONTAINER_URL]
)
def test_config_from_mapping_rejects_none_and_empty(missing):
    for blank in (None, ""):
        source = {**REQUIRED, missing: blank}
        with pytest.raises(ConfigurationError, match=missing):
            Config.from_mapping(source)


def test_config_reports_first_missing_key():
    with pytest.raises(ConfigurationError, match=ENV_SPEECH_ENDPOINT):
        Config.from_mapping({})


def test_config_does_not_validate_url_format():
    """Malformed values are accepted here; they fail later when a request is built."""
    config = Config.from_mapping({**REQUIRED, "SPEECH__Endpoint": "not a url"})

    assert config.speech_endpoint == "not a url"


def test_config_defaults():
    config = Config.from_mapping(REQUIRED)

    assert config.log_level == "INFO"
    assert config.timeout_seconds == 30.0


def test_config_optional_settings_from_mapping():
    config = Config.from_mapping(
        {**REQUIRED, "LOG_LEVEL": "DEBUG", "SPEECH__TimeoutSeconds": "12.5"}
    )

    assert config.log_level == "DEBUG"
    assert config.timeout_seconds == 12.5


def test_config_default_timeout_is_float():
    assert isinstance(Config.from_mapping(REQUIRED).timeout_seconds, float)
    assert isinstance(
        Config(speech_endpoint="e", speech_key="k", destination_container_url="d").timeout_seconds,
        float,
    )


def test_config_non_numeric_timeout_names_the_key():
    with pytest.raises(ConfigurationError, match="SPEECH__TimeoutSeconds") as exc_info:
        Config.from_mapping({**REQUIRED, "SPEECH__TimeoutSeconds": "soon"})

    assert exc_info.value.key == "SPEECH__TimeoutSeconds"


def test_config_missing_required_reported_before_bad_timeout():
    with pytest.raises(ConfigurationError, match="SPEECH__Key"):
        Config.from_mapping(
            {
                "SPEECH__Endpoint": REQUIRED["SPEECH__Endpoint"],
                "TRANSCRIPT__DestinationContainerUrl": REQUIRED["TRANSCRIPT__DestinationContainerUrl"],
                "SPEECH__TimeoutSeconds": "soon",
            }
        )


def test_transcriptions_base_strips_trailing_slash():
    config = Config.from_mapping({**REQUIRED, "SPEECH__Endpoint": "https://speech.example.com//"})

    assert config.transcriptions_base == "https://speech.example.com"


def test_config_immutable():
    """Frozen dataclass: attribute assignment must fail."""
    config = Config.from_mapping(REQUIRED)

    with pytest.raises(Exception):
        config.speech_key = "other"
