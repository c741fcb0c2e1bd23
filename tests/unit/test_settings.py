import pytest

from maniswap.config import Settings
from maniswap.domain.models import SwapFormula


@pytest.mark.unit
def test_defaults_keep_literal_permissive_engine(monkeypatch):
    monkeypatch.delenv("STRICT_VALIDATION", raising=False)
    monkeypatch.delenv("SWAP_FORMULA", raising=False)

    settings = Settings(_env_file=None)

    assert settings.STRICT_VALIDATION is False
    assert settings.SWAP_FORMULA == SwapFormula.LITERAL


@pytest.mark.unit
def test_env_overrides(monkeypatch):
    monkeypatch.setenv("STRICT_VALIDATION", "true")
    monkeypatch.setenv("SWAP_FORMULA", "invariant")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = Settings(_env_file=None)

    assert settings.STRICT_VALIDATION is True
    assert settings.SWAP_FORMULA == SwapFormula.INVARIANT
    assert settings.LOG_LEVEL == "DEBUG"
