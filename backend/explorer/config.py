from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from EXPLORER_* environment variables."""

    app_name: str = "Ledger Explorer"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # CORS — comma-separated origins (e.g. "https://explorer.yourdomain.com")
    cors_allow_origins: str = "http://localhost:3000"
    cors_allow_origin_regex: str = ""

    # Object records
    std_lib_prefix: str = "0x2::"
    owner_address_length: int = 20
    surface_unresolved: bool = False

    model_config = {
        "env_prefix": "EXPLORER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def docs_enabled(self) -> bool:
        """Interactive API docs are served in debug mode, never in production."""
        return self.debug and not self.is_production


settings = Settings()
