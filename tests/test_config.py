import pydantic
import pytest

from gcloud_ops.config import PollingConfig, SpeechToTextArgs, load_config
from gcloud_ops.domain import AuthKind, SecretEncoding


def test_defaults():
    config = load_config()
    assert config.endpoints.speech_root == "https://speech.googleapis.com/v1"
    assert config.polling.max_wait_ms == 30 * 60 * 1000
    assert config.polling.interval_ms == 10 * 1000


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GCLOUD_SPEECH_ROOT", "http://localhost:9000/v1")
    monkeypatch.setenv("GCLOUD_MAX_POLL_MINUTES", "2")
    monkeypatch.setenv("GCLOUD_POLL_INTERVAL_SECONDS", "0.5")

    config = load_config()

    assert config.endpoints.speech_root == "http://localhost:9000/v1"
    assert config.polling == PollingConfig(max_wait_minutes=2, interval_seconds=0.5)
    assert config.polling.interval_ms == 500


def test_auth_args_resolve_credential():
    args = SpeechToTextArgs(
        auth_type=AuthKind.OAUTH_TOKEN,
        auth_string="746f6b656e",
        auth_encoding=SecretEncoding.HEX,
        quota_project="proj",
    )
    credential = args.to_credential()
    assert credential.secret == "token"
    assert credential.quota_project == "proj"


def test_unknown_speech_model_is_rejected():
    with pytest.raises(pydantic.ValidationError):
        SpeechToTextArgs(model="whisper")


def test_args_are_immutable():
    args = SpeechToTextArgs()
    with pytest.raises(pydantic.ValidationError):
        args.language_code = "fr-FR"
