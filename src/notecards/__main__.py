from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from notecards.common.ids import now_ms
from notecards.common.logging_config import setup_logging
from notecards.config_models import RunConfig, load_run_config
from notecards.parsing import parse_flashcards
from notecards.scheduling import ConfidenceRating, ContractViolation, calculate_next_review, initialize_metadata

logger = logging.getLogger(__name__)


def parse_ratings(raw: str) -> List[ConfidenceRating]:
    """Turn ``again,good,3`` into ratings. Names are case-insensitive, digits are 0-3."""
    ratings = []
    for token in (t.strip() for t in raw.split(",")):
        if not token:
            continue
        try:
            ratings.append(ConfidenceRating(int(token)) if token.isdigit() else ConfidenceRating[token.upper()])
        except (KeyError, ValueError):
            raise SystemExit(f"Unknown rating: {token!r} (use again, hard, good, easy or 0-3)")
    return ratings


def run_parse(note_path: Path, cfg: RunConfig) -> list[dict]:
    if not note_path.exists() or not note_path.is_file():
        raise SystemExit(f"note does not exist or is not a file: {note_path}")

    cards = parse_flashcards(note_path.read_text(encoding="utf-8"), cfg.parser, source_file=str(note_path))
    logger.info(f"Parsed {len(cards)} flashcards", extra={"note": str(note_path)})
    return [c.model_dump() for c in cards]


def run_schedule(card_id: str, ratings: List[ConfidenceRating], cfg: RunConfig, now: Optional[int] = None) -> list[dict]:
    """Replay ``ratings`` for one card, each on the day the card falls due."""
    now = now_ms() if now is None else now
    metadata = initialize_metadata(card_id, ease_factor=cfg.scheduler.default_ease_factor, now=now)

    steps = []
    for rating in ratings:
        try:
            metadata = calculate_next_review(metadata, rating, 0, cfg.scheduler, now=now)
        except ContractViolation as e:
            raise SystemExit(str(e))
        steps.append(metadata.model_dump(mode="json", exclude={"review_history"}))
        now = metadata.due_date
    return steps


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Parse flashcards from notes and replay review schedules")
    parser.add_argument(
        "--command",
        required=True,
        choices=["parse", "schedule"],
        help="parse: print flashcards found in --note; schedule: replay --ratings for --card-id",
    )
    parser.add_argument("--note", required=False, help="Markdown note to parse")
    parser.add_argument("--card-id", required=False, default="fc-demo", help="Card id for the schedule command")
    parser.add_argument(
        "--ratings",
        required=False,
        default="good,good,good",
        help="Comma separated ratings for the schedule command (e.g. again,good,easy)",
    )
    parser.add_argument(
        "--config",
        required=False,
        default=None,
        help="Path to YAML config (built-in defaults when omitted)",
    )
    parser.add_argument(
        "--log-level",
        required=False,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level, overrides log_level from the config. Use DEBUG to see every scheduling decision.",
    )
    args = parser.parse_args(argv)

    cfg = load_run_config(Path(args.config) if args.config else None)
    # stdout carries the JSON result
    setup_logging(args.log_level or cfg.log_level, stream=sys.stderr)

    if args.command == "parse":
        if not args.note:
            parser.error("--note is required for the parse command")
        result = run_parse(Path(args.note), cfg)
    else:
        result = run_schedule(args.card_id, parse_ratings(args.ratings), cfg)

    print(json.dumps(result, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
