from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path

from flashgen.core.config import settings
from flashgen.core.logging import setup_logging
from flashgen.modules.flashcards.main import FlashcardsGenerator
from flashgen.modules.flashcards.scaler import is_blank, scale, word_count
from flashgen.modules.flashcards.transport import GeminiTransport


def _load_text(args: argparse.Namespace) -> str:
    if args.text and args.text_file:
        raise SystemExit("Provide either --text or --text-file, not both")
    if args.text_file:
        return Path(args.text_file).read_text(encoding="utf-8")
    if args.text:
        return args.text
    raise SystemExit("--text or --text-file is required")


def _add_text_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--text", "-t", help="Source material (text)")
    p.add_argument("--text-file", help="Path to a file containing the source material")


async def _generate(text: str) -> dict:
    transport = GeminiTransport.from_settings(settings.gemini)
    try:
        svc = FlashcardsGenerator(transport, deck_settings=settings.deck)
        view = await svc.generate(text)
        return FlashcardsGenerator.to_jsonable(view)
    finally:
        await transport.aclose()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="flashgen", description="Turn notes into a flashcard deck"
    )
    parser.add_argument("--log-level", default=None, help="Logging level")
    sub = parser.add_subparsers(dest="cmd", required=True)

    g = sub.add_parser("generate", help="Generate a deck from source text")
    _add_text_args(g)

    s = sub.add_parser("scale", help="Show how many cards a text would produce")
    _add_text_args(s)

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    text = _load_text(args)
    if is_blank(text):
        raise SystemExit("Source text is empty")

    if args.cmd == "scale":
        cfg = settings.deck
        target = scale(
            text,
            words_per_card=cfg.words_per_card,
            min_cards=cfg.min_cards,
            max_cards=cfg.max_cards,
        )
        result = {"word_count": word_count(text), "target_count": target}
        print(json.dumps(result, indent=2))
        return 0
    if args.cmd == "generate":
        result = asyncio.run(_generate(text))
        print(json.dumps(result, indent=2))
        return 1 if result.get("error") else 0

    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
