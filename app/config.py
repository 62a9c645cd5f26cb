from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be configured via .env file or environment variables.
    """

    # Application
    APP_NAME: str = "User Auth API"
    APP_VERSION: str = "0.1.0"
    APP_PORT: int = 8080
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./app.db"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_AUTO_CREATE: bool = True

    # JWT Authentication
    JWT_SECRET: str = "change-me"
    JWT_ISSUER: str = "user-auth-api"
    TOKEN_EXPIRE_MINUTES: int = 60

    # Google OAuth (disabled unless client id and secret are set)
    GOOGLE_CLIENT_ID: str = ""
    GOOGLE_CLIENT_SECRET: str = ""
    GOOGLE_REDIRECT_URL: str = "http://localhost:8080/api/v1/auth/google/callback"
    GOOGLE_HTTP_TIMEOUT: float = 10.0

    # CORS
    ALLOWED_ORIGINS: str = "*"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @property
    def allowed_origins_list(self) -> list[str]:
        """Parse ALLOWED_ORIGINS from comma-separated string"""
        if not self.ALLOWED_ORIGINS:
            return []
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

    @property
    def google_oauth_enabled(self) -> bool:
        return bool(self.GOOGLE_CLIENT_ID and self.GOOGLE_CLIENT_SECRET)


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency returning the configured settings instance."""
    return settings
