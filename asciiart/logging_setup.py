"""Root logger configuration shared by the API and the CLI."""

from __future__ import annotations

import logging

from asciiart.config import Settings


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.asciiart_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
