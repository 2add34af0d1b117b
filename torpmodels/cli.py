"""
torpmodels CLI - inspect, fetch and clear cached models.

Usage:
    torpmodels list
    torpmodels status
    torpmodels fetch ep
    torpmodels fetch goals --stat --force
    torpmodels clear --type stat
"""

from __future__ import annotations

import argparse
import os
import sys

from dotenv import load_dotenv

from .api import (
    CLEAR_SCOPES,
    check_cache_status,
    clear_cache,
    list_available_models,
    load_core_model,
    load_stat_model,
)
from .config import Settings, get_settings, settings_to_dict, setup_logging
from .models import ModelCache, TorpModelsError


def cmd_list(args: argparse.Namespace, settings: Settings) -> int:
    """Execute the list command."""
    models = list_available_models()

    print("Core models:")
    for name, description in models["core_models"].items():
        print(f"  {name:<10} {description}")
    print()

    print(f"Stat models ({len(models['stat_models'])}):")
    for name in models["stat_models"]:
        print(f"  {name}")

    return 0


def cmd_status(args: argparse.Namespace, settings: Settings) -> int:
    """Execute the status command."""
    rows = check_cache_status(settings=settings)

    print(f"Cache directory: {settings.models_dir}")
    print()
    print(f"  {'MODEL':<45} {'TYPE':<5} {'CACHED':<7} SIZE (MB)")
    for row in rows:
        size = f"{row.size_mb:.2f}" if row.size_mb is not None else "-"
        cached = "yes" if row.cached else "no"
        print(f"  {row.model:<45} {row.category:<5} {cached:<7} {size}")

    total_bytes = ModelCache(settings.models_dir).get_total_size_bytes(suffix=".rds")
    total_mb = total_bytes / 1024**2
    print()
    print(f"Total: {total_mb:.2f} MB")
    return 0


def cmd_fetch(args: argparse.Namespace, settings: Settings) -> int:
    """Execute the fetch command."""
    load = load_stat_model if args.stat else load_core_model
    load(args.name, force_refresh=args.force, settings=settings)
    print(f"✓ {args.name} is cached and readable.")
    return 0


def cmd_clear(args: argparse.Namespace, settings: Settings) -> int:
    """Execute the clear command."""
    removed = clear_cache(args.type, settings=settings)
    print(f"Cleared {removed} cached model file(s).")
    return 0


COMMANDS = {
    "list": cmd_list,
    "status": cmd_status,
    "fetch": cmd_fetch,
    "clear": cmd_clear,
}


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="torpmodels",
        description="torpmodels - pre-trained AFL analytics models",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--cache-dir",
        dest="cache_dir",
        default=None,
        metavar="PATH",
        help="Cache directory (default: TORPMODELS_CACHE_DIR or the user cache dir)",
    )

    parser.add_argument(
        "--repo",
        default=None,
        metavar="OWNER/NAME",
        help="Release repository (default: TORPMODELS_REPO or peteowen1/torpmodels)",
    )

    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=os.environ.get("LOG_LEVEL", "INFO").upper(),
        help="Logging level (default: LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        help="Command to execute",
    )

    subparsers.add_parser("list", help="List available models")
    subparsers.add_parser("status", help="Show which models are cached")

    fetch_parser = subparsers.add_parser(
        "fetch",
        help="Download a model into the cache",
        description="Load a model, downloading it if it is not cached.",
    )
    fetch_parser.add_argument("name", help="Model name, e.g. ep or goals")
    fetch_parser.add_argument(
        "--stat",
        action="store_true",
        help="Treat NAME as a stat model",
    )
    fetch_parser.add_argument(
        "--force",
        action="store_true",
        help="Download even if a cached copy exists",
    )

    clear_parser = subparsers.add_parser("clear", help="Remove cached models")
    clear_parser.add_argument(
        "--type",
        choices=CLEAR_SCOPES,
        default="all",
        help="Which models to remove (default: all)",
    )

    return parser.parse_args(args)


def main(args: list[str] | None = None) -> int:
    """CLI entry point."""
    load_dotenv()
    config = parse_args(args)
    setup_logging(config.log_level)

    try:
        settings = get_settings().with_overrides(
            cache_dir=config.cache_dir, repo=config.repo
        )
        if config.log_level == "DEBUG":
            print(f"Settings: {settings_to_dict(settings)}", file=sys.stderr)
        return COMMANDS[config.command](config, settings)

    except TorpModelsError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
