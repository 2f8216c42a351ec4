"""Tests for environment-dependent paths."""

from app.core.config import BASE_DIR, Settings


def test_production_paths():
    settings = Settings(app_env="production")
    assert not settings.is_test
    assert settings.data_path == BASE_DIR / "data"
    assert settings.users_path == BASE_DIR / "users.yml"


def test_test_paths():
    settings = Settings(app_env="test")
    assert settings.is_test
    assert settings.data_path == BASE_DIR / "tests" / "data"
    assert settings.users_path == BASE_DIR / "tests" / "users.yml"


def test_overrides(tmp_path):
    settings = Settings(app_env="test", test_data_dir=tmp_path)
    assert settings.data_path == tmp_path
