import pytest
from pydantic import ValidationError

from promptfit.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("PROMPTFIT_MAX_LENGTH", raising=False)
    monkeypatch.delenv("PROMPTFIT_EXTRACTOR", raising=False)
    settings = Settings(_env_file=None)
    assert settings.max_length == 16_000
    assert settings.extractor == "none"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PROMPTFIT_MAX_LENGTH", "500")
    monkeypatch.setenv("PROMPTFIT_EXTRACTOR", " Boundary ")
    settings = Settings(_env_file=None)
    assert settings.max_length == 500
    assert settings.extractor == "boundary"


def test_unknown_extractor_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, extractor="smart")
