from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, AliasChoices


class Settings(BaseSettings):
    app_name: str = "fleet-drivers-api"
    environment: str = Field(default="dev", validation_alias=AliasChoices("ENVIRONMENT", "environment"))
    log_level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL", "log_level"))

    database_url: str = Field(
        default="sqlite+aiosqlite:///./app.db",
        validation_alias=AliasChoices("DATABASE_URL", "database_url"),
    )
    auto_create_tables: bool = Field(
        default=True, validation_alias=AliasChoices("AUTO_CREATE_TABLES", "auto_create_tables")
    )

    # single dev origin of the UI process
    cors_origins: str = Field(
        default="http://localhost:5173", validation_alias=AliasChoices("CORS_ORIGINS", "cors_origins")
    )

    upload_dir: str = Field(default="uploads", validation_alias=AliasChoices("UPLOAD_DIR", "upload_dir"))
    max_photo_bytes: int = Field(
        default=5 * 1024 * 1024, validation_alias=AliasChoices("MAX_PHOTO_BYTES", "max_photo_bytes")
    )
    max_cnh_pdf_bytes: int = Field(
        default=10 * 1024 * 1024, validation_alias=AliasChoices("MAX_CNH_PDF_BYTES", "max_cnh_pdf_bytes")
    )

    # used by the UI process only
    api_base_url: str = Field(
        default="http://localhost:8000", validation_alias=AliasChoices("API_BASE_URL", "api_base_url")
    )
    api_public_url: str = Field(
        default="http://localhost:8000", validation_alias=AliasChoices("API_PUBLIC_URL", "api_public_url")
    )
    ui_cache_ttl_seconds: float = Field(
        default=5.0, validation_alias=AliasChoices("UI_CACHE_TTL_SECONDS", "ui_cache_ttl_seconds")
    )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
