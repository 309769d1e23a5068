from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # App Info
    app_name: str = "One Touch API"
    version: str = "1.0.0"
    debug: bool = False
    environment: str = "production"
    log_level: str = "INFO"

    # Database
    database_url: Optional[str] = None
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = ""
    db_name: str = "onetouch"
    db_ssl: Optional[bool] = None  # None: SSL for every host except localhost

    # CORS
    allowed_origins: List[str] = ["*"]

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def sqlalchemy_url(self) -> str:
        """Explicit DATABASE_URL, otherwise built from the DB_* variables"""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def use_ssl(self) -> bool:
        if self.db_ssl is not None:
            return self.db_ssl
        return self.db_host not in ("localhost", "127.0.0.1")

settings = Settings()
