"""Unit tests for environment-driven configuration."""

import pytest

from core.models.query import CaseSensitivity
from core.utils.constants import ENV_DEFAULT_CASE_SENSITIVITY
from core.utils.settings import get_default_case_sensitivity


class TestDefaultCaseSensitivity:
    def test_defaults_to_sensitive(self, monkeypatch) -> None:
        monkeypatch.delenv(ENV_DEFAULT_CASE_SENSITIVITY, raising=False)

        assert get_default_case_sensitivity() is CaseSensitivity.SENSITIVE

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("insensitive", CaseSensitivity.INSENSITIVE),
            ("  Insensitive ", CaseSensitivity.INSENSITIVE),
            ("sensitive", CaseSensitivity.SENSITIVE),
        ],
    )
    def test_reads_environment(self, monkeypatch, value, expected) -> None:
        monkeypatch.setenv(ENV_DEFAULT_CASE_SENSITIVITY, value)

        assert get_default_case_sensitivity() is expected

    def test_unknown_value_falls_back_to_sensitive(self, monkeypatch) -> None:
        monkeypatch.setenv(ENV_DEFAULT_CASE_SENSITIVITY, "sometimes")

        assert get_default_case_sensitivity() is CaseSensitivity.SENSITIVE
