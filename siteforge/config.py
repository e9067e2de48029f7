"""Configuration loaded from environment (.env) and defaults."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Locate the project root .env file, independent of CWD
_THIS_DIR = Path(__file__).resolve().parent          # siteforge/
_PROJECT_ROOT = _THIS_DIR.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Gemini (generateContent REST endpoint)
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash-preview-09-2025"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    provider_timeout_seconds: float = 120.0

    # Backoff for provider calls: delay = base * 2**attempt
    provider_retries: int = 3
    provider_base_delay_seconds: float = 1.0

    # Overall budget for one job's six generations; None disables
    job_deadline_seconds: float | None = 300.0

    # Razorpay
    razorpay_key_id: str | None = None
    razorpay_key_secret: str | None = None
    razorpay_base_url: str = "https://api.razorpay.com/v1"
    payment_currency: str = "INR"
    advance_amount: int = 199
    final_amount: int = 3999

    # Admin panel shared secret
    admin_password: str = "admin123"

    # Seed the order store with the demo orders on startup
    seed_demo_orders: bool = True

    # CORS origins (comma-separated). Defaults to localhost dev.
    cors_origins: str = "http://localhost:3000,http://localhost:5173,http://127.0.0.1:5173"
    cors_origin_regex: str | None = None

    # Server port
    port: int = 3001

    # Where `siteforge generate` writes mockups
    siteforge_output_dir: str = "./output"

    @property
    def output_dir(self) -> Path:
        """Output directory as Path, relative paths resolved against the project root."""
        p = Path(self.siteforge_output_dir)
        if not p.is_absolute():
            return (_PROJECT_ROOT / p).resolve()
        return p.resolve()

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def gemini_endpoint(self) -> str:
        return f"{self.gemini_base_url.rstrip('/')}/models/{self.gemini_model}:generateContent"


def get_settings() -> Settings:
    return Settings()
