#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent

# Values copied from .env.example that were never filled in
PLACEHOLDER_MARKER = "your_"


class Settings(BaseSettings):
    """Application settings"""

    # ========== Vendor API Keys ==========
    # A missing key only marks the vendor as unconfigured
    gemini_api_key: str = ""
    groq_api_key: str = ""
    deepseek_api_key: str = ""
    mistral_api_key: str = ""
    openrouter_api_key: str = ""
    huggingface_api_key: str = ""

    # ========== HTTP ==========
    request_timeout: float = 120.0  # seconds per vendor call
    probe_timeout: float = 15.0  # seconds for availability probes

    # ========== Retry / Fallback ==========
    max_attempts_per_vendor: int = 2
    retry_backoff_seconds: float = 1.0

    # HuggingFace returns 503 while a cold model is loading
    huggingface_loading_retries: int = 3
    huggingface_loading_delay: float = 5.0

    # ========== OpenRouter attribution ==========
    openrouter_site_url: str = "https://vibe-creation-studio.app"
    openrouter_site_name: str = "Vibe Creation Studio"

    # ========== Logging ==========
    log_level: str = "INFO"
    log_file: Optional[str] = None

    class Config:
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    def api_key_for(self, vendor: str) -> str:
        """Return the configured key for a vendor, or "" when unset or a placeholder."""
        key = (getattr(self, f"{vendor}_api_key", "") or "").strip()
        if not key or PLACEHOLDER_MARKER in key:
            return ""
        return key

    def configured_vendors(self) -> list:
        """Vendors that have a usable credential."""
        vendors = ["gemini", "groq", "deepseek", "mistral", "openrouter", "huggingface"]
        return [v for v in vendors if self.api_key_for(v)]

    def print_config(self):
        """Print configuration summary"""
        print("\n" + "=" * 70)
        print("CONFIGURATION")
        print("=" * 70)
        print(f"Configured vendors: {', '.join(self.configured_vendors()) or 'none'}")
        print(f"Attempts/vendor:    {self.max_attempts_per_vendor}")
        print(f"Retry backoff:      {self.retry_backoff_seconds}s")
        print(f"Request timeout:    {self.request_timeout}s")
        print(f"Log level:          {self.log_level}")
        print("=" * 70 + "\n")


def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return settings


# Global settings instance
settings = Settings()
