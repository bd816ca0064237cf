#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from baseforms.core.config import load_settings
from baseforms.core.logging import configure_logging
from baseforms.nlp.language import FixedLanguageDetector
from baseforms.services.lemmatizer_client import build_lemmatizer_client
from baseforms.services.use_cases.base_forms import BaseFormsHooks


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Append Finnish base forms to text the way the indexer hook does."
    )
    parser.add_argument("text", nargs="?", help="Text to augment. Read from stdin when omitted.")
    parser.add_argument(
        "--language",
        default=None,
        help="Language reported for the document (defaults to the configured language).",
    )
    parser.add_argument("--document-id", default="cli", help="Document identifier passed to the hook.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    args = parse_args(argv)
    settings = load_settings()
    text = args.text if args.text is not None else sys.stdin.read()

    client = build_lemmatizer_client(settings)
    hooks = BaseFormsHooks(
        client,
        FixedLanguageDetector(args.language or settings.language),
        language=settings.language,
        deadline_seconds=settings.deadline_seconds,
    )
    try:
        augmented = hooks.augment_content(text, args.document_id)
    finally:
        if client is not None:
            client.close()

    print(
        json.dumps(
            {
                "content": augmented,
                "augmented": augmented.strip() != text.strip(),
            },
            ensure_ascii=False,
        )
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
