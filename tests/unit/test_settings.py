"""
Unit tests for application settings.
"""

import pytest
from pydantic import ValidationError

from src.config.settings import Settings
from src.domain.digest import DEFAULT_DIGEST_SALT


class TestSettings:
    """Tests for Settings defaults and validation."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DIGEST_SALT", raising=False)
        monkeypatch.delenv("REPOSITORY_BACKEND", raising=False)

        settings = Settings(_env_file=None)

        assert settings.repository_backend == "postgres"
        assert settings.digest_salt == DEFAULT_DIGEST_SALT
        assert settings.pool_min_size <= settings.pool_max_size

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REPOSITORY_BACKEND", "memory")
        monkeypatch.setenv("DIGEST_SALT", "$2b$04$accountcoredigestsaltu")

        settings = Settings(_env_file=None)

        assert settings.repository_backend == "memory"
        assert settings.digest_salt == "$2b$04$accountcoredigestsaltu"

    @pytest.mark.parametrize("salt", ["plain-salt", "$2b$10$short", "$2b$xx$accountcoredigestsaltu"])
    def test_malformed_digest_salt_rejected(self, salt: str) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, digest_salt=salt)

    def test_unknown_backend_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, repository_backend="sqlite")
