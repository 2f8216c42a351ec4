from pathlib import Path

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    app_env: str = "production"

    # Каталоги документов для рабочего и тестового окружения
    data_dir: Path = BASE_DIR / "data"
    test_data_dir: Path = BASE_DIR / "tests" / "data"

    # YAML-файл с учетными данными (username: password)
    users_file: Path = BASE_DIR / "users.yml"
    test_users_file: Path = BASE_DIR / "tests" / "users.yml"

    session_secret: str = "secret"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def is_test(self) -> bool:
        return self.app_env == "test"

    @property
    def data_path(self) -> Path:
        """Каталог документов с учетом окружения"""
        return self.test_data_dir if self.is_test else self.data_dir

    @property
    def users_path(self) -> Path:
        """Файл учетных данных с учетом окружения"""
        return self.test_users_file if self.is_test else self.users_file


settings = Settings()
