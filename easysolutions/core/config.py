from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional
from urllib.parse import quote_plus


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB - either a full URI or the Atlas credentials it is composed from
    mongodb_url: Optional[str] = None
    db_username: Optional[str] = None
    db_password: Optional[str] = None
    db_cluster: str = "easysolutions01.kion0l5.mongodb.net"
    db_app_name: str = "easysolutions01"
    db_name: str = "contactForm"

    # Mail relay (Gmail by default)
    email_user: Optional[str] = None
    email_pass: Optional[str] = None
    receiver_email: Optional[str] = None
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    smtp_use_tls: bool = True
    company_name: str = "Easy Solution LTD"

    # Server
    port: int = 5000
    app_env: str = "production"
    log_level: str = "INFO"

    # CORS settings
    allowed_origins: list[str] = ["*"]

    @property
    def effective_mongo_uri(self) -> str:
        """Get the effective MongoDB URI from available sources"""
        if self.mongodb_url:
            return self.mongodb_url
        if not (self.db_username and self.db_password):
            raise ValueError(
                "MongoDB URI not configured! Set MONGODB_URL or DB_USERNAME/DB_PASSWORD."
            )
        return (
            f"mongodb+srv://{quote_plus(self.db_username)}:{quote_plus(self.db_password)}"
            f"@{self.db_cluster}/?appName={self.db_app_name}"
        )

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() == "development"


@lru_cache
def get_settings():
    return Settings()
