from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Warehouse Inventory"
    app_env: str = "development"
    log_level: str | None = Field(default=None, alias="LOG_LEVEL")

    # Seeding
    seed_on_startup: bool = Field(default=True, alias="SEED_ON_STARTUP")
    grocery_shelf_life_months: tuple[int, int, int] = Field(
        default=(12, 6, 18), alias="GROCERY_SHELF_LIFE_MONTHS",
    )  # Rice, Palm Oil, Canned Beans

    # Optional file sink for the final stock report
    report_path: str | None = Field(default=None, alias="REPORT_PATH")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
        "extra": "ignore",
    }

    @property
    def resolved_log_level(self) -> str:
        """Explicit LOG_LEVEL wins; otherwise DEBUG in development, INFO elsewhere."""
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.app_env == "development" else "INFO"

settings = Settings()
