# hospital_api/core/config.py
from urllib.parse import quote_plus
from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict
from typing import Optional, List
from functools import lru_cache

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra='ignore')

    # Application Settings
    APP_NAME: str = "Hospital Management System API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    DOCS_ENABLED: bool = True

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = 4000

    # MongoDB Settings
    MONGODB_URI: Optional[str] = None
    DB_USER: str = ""
    DB_PASS: str = ""
    DB_HOST: str = ""
    DB_APP_NAME: str = "Cluster0"
    DB_NAME: str = "hospitalDB"
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = 5000

    # CORS Settings (comma-separated strings to avoid JSON parsing in env)
    ALLOWED_ORIGINS: str = "*"
    ALLOWED_METHODS: str = "GET,POST,PUT,DELETE,OPTIONS"
    ALLOWED_HEADERS: str = "*"

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # API behaviour
    LATEST_DOCTORS_LIMIT: int = Field(default=6, ge=1)
    TOKEN_PREFIX: str = "token-"

    def _split_csv(self, value: str) -> List[str]:
        if value is None:
            return []
        value = value.strip()
        if value == "":
            return []
        return [item.strip() for item in value.split(",")]

    @property
    def allowed_origins_list(self) -> List[str]:
        return self._split_csv(self.ALLOWED_ORIGINS)

    @property
    def allowed_methods_list(self) -> List[str]:
        return self._split_csv(self.ALLOWED_METHODS)

    @property
    def allowed_headers_list(self) -> List[str]:
        return self._split_csv(self.ALLOWED_HEADERS)

    @property
    def mongodb_uri(self) -> str:
        """Full URI wins; otherwise build an Atlas SRV URI from the credential parts."""
        if self.MONGODB_URI:
            return self.MONGODB_URI
        if self.DB_USER and self.DB_HOST:
            return (
                f"mongodb+srv://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASS)}"
                f"@{self.DB_HOST}/?appName={self.DB_APP_NAME}"
            )
        return "mongodb://localhost:27017"

@lru_cache()
def get_settings() -> Settings:
    return Settings()

settings: Settings = get_settings()
