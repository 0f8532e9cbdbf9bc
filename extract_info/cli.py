"""Command line interface for scanning a page for contact details."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .config import ConfigurationError, load_configuration
from .errors import ScanError
from .factory import SOURCE_TYPES, build_scan_service
from .io import write_bundle
from .ui.presenter import describe_failed_response, describe_scan_error

LOGGER = logging.getLogger(__name__)


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Extract emails, phone numbers, and social links from a web page",
    )
    parser.add_argument("target", nargs="?", help="URL of the page, or path to a saved HTML file")
    parser.add_argument(
        "--source",
        choices=sorted(SOURCE_TYPES),
        default=None,
        help="How to load the page (defaults to html for local files, otherwise the configured source)",
    )
    parser.add_argument("--config", help="Path to a scanner configuration file (YAML or JSON)")
    parser.add_argument(
        "--base-url",
        help="Address the saved HTML page was served from, used to resolve relative links",
    )
    parser.add_argument("--output", help="Also write the results to a .json, .csv, .tsv or .xlsx file")
    parser.add_argument(
        "--no-headless",
        dest="headless",
        action="store_false",
        help="Show the browser window while loading the page",
    )
    parser.set_defaults(headless=True)
    parser.add_argument("--gui", action="store_true", help="Open the results panel instead of printing JSON")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (e.g. DEBUG, INFO, WARNING)",
    )
    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def _is_local_file(target: Optional[str]) -> bool:
    if not target:
        return False
    if target.startswith("file://"):
        return True
    if "://" in target:
        return False
    return Path(target).expanduser().is_file()


def apply_overrides(config: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """Merge command line options into the ``source`` configuration section."""

    merged = dict(config)
    source = dict(merged.get("source") or {})
    options = dict(source.get("options") or {})

    source_type = args.source
    if source_type is None and not source.get("type") and not source.get("class") and _is_local_file(args.target):
        source_type = "html"
    if source_type is not None and source_type != source.get("type"):
        source = {"type": source_type}
        options = {}

    effective_type = source.get("type")
    if args.base_url:
        if effective_type != "html":
            LOGGER.warning("--base-url only applies to the html source; ignoring it")
        else:
            options["base_url"] = args.base_url
    if not args.headless and effective_type in {"playwright", "selenium"}:
        options["headless"] = False

    if options:
        source["options"] = options
    if source:
        merged["source"] = source
    return merged


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = load_configuration(args.config) if args.config else {}
    except ConfigurationError as exc:
        logging.basicConfig(level=logging.INFO)
        LOGGER.error("%s", exc)
        return 2

    log_level = args.log_level or config.get("log_level") or "INFO"
    logging.basicConfig(level=getattr(logging, str(log_level).upper(), logging.INFO))

    config = apply_overrides(config, args)
    try:
        service = build_scan_service(config)
    except ConfigurationError as exc:
        LOGGER.error("%s", exc)
        return 2

    if args.gui:
        from .ui.app import main as gui_main

        gui_main(target=args.target or "", service=service)
        return 0

    try:
        response = service.scan_page(args.target)
    except ScanError as exc:
        LOGGER.debug("Scan failed", exc_info=True)
        print(describe_scan_error(exc), file=sys.stderr)
        return 1
    except Exception as exc:
        LOGGER.debug("Unexpected error while scanning %s", args.target, exc_info=True)
        print(describe_scan_error(exc), file=sys.stderr)
        return 1
    finally:
        service.close()

    print(json.dumps(response.to_payload(), ensure_ascii=False, indent=2))
    if not response.success or response.data is None:
        print(describe_failed_response(response), file=sys.stderr)
        return 1

    if args.output:
        output_path = write_bundle(args.output, response.data)
        LOGGER.info("Results written to %s", output_path.resolve())
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
