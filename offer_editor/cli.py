"""Command-line entry point for the interactive offer editor."""

import argparse
import asyncio
from pathlib import Path

import structlog

from offer_editor.config import get_settings
from offer_editor.main import configure_logging, run
from offer_editor.services.prompt import TerminalPrompt

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Interactively update an offer and its payout schedule.",
    )
    parser.add_argument(
        "--offers-file",
        type=Path,
        default=None,
        help="Offer catalog JSON (default: data/offers.json)",
    )
    parser.add_argument(
        "--payouts-file",
        type=Path,
        default=None,
        help="Payout schedule JSON (default: data/offerPayouts.json)",
    )
    parser.add_argument(
        "--strict-numbers",
        action="store_true",
        default=None,
        help="Reject non-numeric amounts instead of storing NaN",
    )
    parser.add_argument("--log-level", type=str, default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {
        "offers_file": args.offers_file,
        "payouts_file": args.payouts_file,
        "strict_numbers": args.strict_numbers,
        "log_level": args.log_level.upper() if args.log_level else None,
    }
    settings = get_settings().model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )

    configure_logging(settings.log_level)

    try:
        asyncio.run(run(TerminalPrompt(), settings))
    except KeyboardInterrupt:
        logger.info("Session cancelled")
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
