#!/usr/bin/env python3
"""
FPL cache builder CLI

Fetches public Fantasy Premier League data and writes a single JSON snapshot
(data/cache.json by default) for the static site to read. Meant to be run
on a schedule; exits non-zero if the snapshot could not be produced.

Usage:
    python fetch_fpl.py
    python fetch_fpl.py --team-id 123456
    FPL_TEAM_ID=123456 python fetch_fpl.py --output web/data/cache.json
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from fplcache import PipelineConfig, RemoteError, get_config, run_pipeline
from fplcache.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fetch FPL data and write the site cache")
    parser.add_argument(
        "--team-id", "-t",
        default=None,
        help="FPL entry id to include squad picks for (overrides FPL_TEAM_ID)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output path for the snapshot JSON (overrides FPL_OUTPUT_PATH)",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="FPL API root (overrides FPL_BASE_URL)",
    )
    parser.add_argument(
        "--timeout-ms",
        type=int,
        default=None,
        help="Per-request timeout in milliseconds (overrides FPL_REQUEST_TIMEOUT_MS)",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Also write a timestamped log file to this directory",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output, including every request URL",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> PipelineConfig:
    """Environment config with any command-line flags applied on top."""
    config = get_config()
    overrides = {
        'user_id': args.team_id,
        'output_path': args.output,
        'base_url': args.base_url,
        'request_timeout_ms': args.timeout_ms,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if not overrides:
        return config
    return PipelineConfig(**{**config.model_dump(), **overrides})


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logger = setup_logging(log_dir=args.log_dir, level=level)

    try:
        config = config_from_args(args)
    except (ValueError, ValidationError) as e:
        logger.error(f'Invalid configuration: {e}')
        return 1

    try:
        run_pipeline(config)
    except RemoteError as e:
        logger.error(f'Fatal error: {e}')
        return 1
    except ValidationError as e:
        logger.error(f'Fatal error: unexpected API response: {e}')
        return 1
    except OSError as e:
        logger.error(f'Fatal error: could not write snapshot: {e}')
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
