from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

import pydantic
from dotenv import load_dotenv

from wenet_common.app import DocumentKind, merge_documents
from wenet_common.config import (
    ConfigurationError,
    MergeConfig,
    configure_logging,
    get_merge_config,
    parse_empty_list_policy,
)
from wenet_common.domain.validation import ValidationError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Merge a partial update document into a stored profile or community"
    )
    parser.add_argument(
        "kind",
        choices=[kind.value for kind in DocumentKind],
        help="Type of document to merge",
    )
    parser.add_argument("stored", type=Path, help="JSON file with the stored document")
    parser.add_argument("patch", type=Path, help="JSON file with the partial update")
    parser.add_argument(
        "--empty-lists",
        type=str,
        default=None,
        help="What an empty list in the patch means: keep (default) or clear",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _load_document(path: Path) -> dict[str, object]:
    with path.open(encoding="utf-8") as handle:
        document = json.load(handle)
    if not isinstance(document, dict):
        raise ValueError(f"{path} does not contain a JSON object")
    return document  # pyright: ignore[reportUnknownVariableType]


def main(argv: Sequence[str] | None = None) -> None:
    parsed_args = _parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        merge_config = (
            MergeConfig(empty_list_policy=parse_empty_list_policy(parsed_args.empty_lists))
            if parsed_args.empty_lists is not None
            else get_merge_config()
        )
        stored = _load_document(parsed_args.stored)
        patch = _load_document(parsed_args.patch)
    except (ConfigurationError, OSError, ValueError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        merged = merge_documents(
            stored,
            patch,
            kind=DocumentKind(parsed_args.kind),
            merge_config=merge_config,
        )
    except ValidationError as error:
        log.warning("Merge rejected: %s", error)
        print(json.dumps(error.as_payload()), file=sys.stderr)  # noqa: T201
        sys.exit(2)
    except (ConfigurationError, pydantic.ValidationError):
        log.exception("Invalid input")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during merge")
        sys.exit(1)

    print(json.dumps(merged, indent=2))  # noqa: T201


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
