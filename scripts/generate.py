#!/usr/bin/env python3
"""
CLI: Generate one VFX blueprint from one scene description.
Usage:
  python scripts/generate.py "A rainy night chase, drone shot, tense mood"
  python scripts/generate.py "Your description" --format text
  python scripts/generate.py --sample
  python scripts/generate.py "Your description" --remote --api-base http://127.0.0.1:8080
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import json
import logging

from blueprint.config import get_log_level, load_config
from blueprint.interpretation import ValidationError
from blueprint.pipeline import generate_plan
from blueprint.stages import SAMPLE_DETAILS, render_report
from blueprint.workflow_utils import configure_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate a production blueprint from a scene description (local keyword rules, no model)."
    )
    parser.add_argument(
        "details",
        type=str,
        nargs="?",
        default=None,
        help="Free-text scene description (location, mood, effects, time of day, camera style).",
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Use the built-in sample scene (rain-soaked Mumbai alley) when no description is given.",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=("json", "text"),
        default="json",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: config/default.yaml).",
    )
    parser.add_argument(
        "--remote",
        action="store_true",
        help="Ask a running blueprint service instead of generating locally (JSON output only).",
    )
    parser.add_argument(
        "--api-base",
        default=None,
        help="Service URL for --remote (default: api_base from config, env API_BASE).",
    )
    args = parser.parse_args(argv)
    if args.details is None:
        if not args.sample:
            parser.error("a scene description is required (or pass --sample)")
        args.details = SAMPLE_DETAILS

    config = load_config(args.config)
    configure_logging(get_log_level(config))

    if args.remote:
        from blueprint.api_client import APIError, request_plan

        api_base = args.api_base or config.get("api_base", "")
        try:
            plan_dict = request_plan(api_base, args.details)
        except APIError as e:
            print(str(e), file=sys.stderr)
            return 2 if e.status_code == 422 else 1
        print(json.dumps(plan_dict, ensure_ascii=False, indent=2))
        return 0

    try:
        plan = generate_plan(args.details, config=config)
    except ValidationError as e:
        print(e.message, file=sys.stderr)
        return 2

    if args.format == "text":
        print(render_report(plan), end="")
    else:
        print(json.dumps(plan.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
