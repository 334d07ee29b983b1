# tests\shared\test_config.py
import pytest
from pydantic import ValidationError

from lexilabel.shared.config import AppEnv, Settings


class TestSettings:
    def test_defaults(self, test_settings):
        assert test_settings.APP_NAME == "lexilabel"
        assert test_settings.DEFAULT_LOCALE == "en_US"
        assert test_settings.LABEL_SET_NAME == "base"
        assert test_settings.MISSING_LABEL_PREFIX == "__MISSING LABEL__ "
        assert test_settings.LOG_FALLBACK_STRINGS is False
        assert test_settings.FAIL_ON_DANGLING_ALIAS is False
        assert test_settings.FAIL_ON_INVALID_TEMPLATE is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LEXILABEL_DEFAULT_LOCALE", "de_DE")
        monkeypatch.setenv("LEXILABEL_LOG_FALLBACK_STRINGS", "true")
        monkeypatch.setenv("LEXILABEL_APP_ENV", "production")

        configured = Settings(_env_file=None)
        assert configured.DEFAULT_LOCALE == "de_DE"
        assert configured.LOG_FALLBACK_STRINGS is True
        assert configured.APP_ENV is AppEnv.PRODUCTION

    def test_unprefixed_variables_ignored(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_LOCALE", "fr_FR")
        assert Settings(_env_file=None).DEFAULT_LOCALE == "en_US"

    def test_invalid_value_rejected(self, monkeypatch):
        monkeypatch.setenv("LEXILABEL_APP_ENV", "staging")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
