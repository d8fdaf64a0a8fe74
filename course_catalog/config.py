from pydantic_settings import BaseSettings
from pydantic import Field

class Settings(BaseSettings):
    app_name: str = "Course Catalog API"
    app_env: str = Field("dev", alias="APP_ENV")
    secret_key: str = Field("change-me", alias="JWT_SECRET_KEY")
    access_token_expire_minutes: int = Field(60 * 24 * 10, alias="ACCESS_TOKEN_EXPIRE_MINUTES")
    auth_cookie_name: str = Field("jwt", alias="AUTH_COOKIE_NAME")
    cookie_secure: bool = Field(False, alias="COOKIE_SECURE")
    database_url: str = Field("sqlite:///./course_catalog.db", alias="DATABASE_URL")

    cors_origins: list[str] = Field(["*"], alias="CORS_ORIGINS")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(4000, alias="PORT")

    class Config:
        env_file = ".env"
        extra = "ignore"
        populate_by_name = True

def validate_runtime_config(settings: Settings) -> None:
    if settings.app_env.lower() == "production" and settings.secret_key == "change-me":
        raise RuntimeError("JWT_SECRET_KEY must be set in production.")
