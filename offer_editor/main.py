"""Session entry point: logging setup and the top-level error boundary."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from offer_editor.config import Settings, get_settings
from offer_editor.services.offer_update import UpdateResult, update_offer
from offer_editor.services.prompt import Prompt

logger = structlog.get_logger()


def configure_logging(level: str = "WARNING") -> None:
    """Configure structured logging to stderr, leaving stdout to the prompts."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


async def run(prompt: Prompt, settings: Optional[Settings] = None) -> Optional[UpdateResult]:
    """Run one update session. Any failure is reported and ends the session."""
    settings = settings or get_settings()
    try:
        return await update_offer(
            prompt,
            offers_path=settings.offers_file,
            payouts_path=settings.payouts_file,
            strict_numbers=settings.strict_numbers,
        )
    except Exception as e:
        message = getattr(e, "message", None) or str(e)
        logger.error("Offer update failed", error=message, exc_info=True)
        print(f"Error: {message}", file=sys.stderr)
        return None
