"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Centralised settings — no hardcoded tunables anywhere else."""

    # App
    app_env: str = Field("development")
    log_level: str = Field("INFO")
    allowed_origins: str = Field("http://localhost:3000,http://localhost:5173")

    # OCR (Tesseract via pytesseract)
    tesseract_cmd: Optional[str] = Field(None)
    ocr_language: str = Field("eng")
    ocr_timeout_seconds: float = Field(30.0)
    # Below either threshold the OCR text is treated as insufficient signal
    ocr_min_confidence: float = Field(60.0)
    ocr_min_text_length: int = Field(20)
    max_upload_bytes: int = Field(8 * 1024 * 1024)

    # Visual colour heuristic: only used when OCR is insufficient
    visual_analysis_enabled: bool = Field(True)

    # External food databases (best-effort enrichment)
    enrichment_enabled: bool = Field(False)
    enrichment_timeout_seconds: float = Field(8.0)
    enrichment_cache_ttl: int = Field(3600)
    fdc_api_key: str = Field("DEMO_KEY")
    fdc_api_base: str = Field("https://api.nal.usda.gov/fdc/v1")
    openfoodfacts_base: str = Field("https://world.openfoodfacts.org")
    openfda_base: str = Field("https://api.fda.gov")

    # Session-scoped preference store
    preferences_session_ttl: int = Field(86400)
    preferences_max_sessions: int = Field(10_000)

    # Derived
    @property
    def allowed_origins_list(self) -> list[str]:
        """Return ALLOWED_ORIGINS as a list."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()


settings = get_settings()
