"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    asciiart_env: str = "development"
    asciiart_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Glyph rasterization
    glyph_size: int = 16
    glyph_font_path: str = ""

    # Shell defaults
    default_resolution: int = 2
    default_charset: str = "0123456789"

    # HTML output
    html_output_path: str = "out.html"
    html_font: str = "Courier New"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
