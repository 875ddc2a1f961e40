"""CLI entry point for the showcase generator."""

import argparse
import logging
import sys
from pathlib import Path

from showcase.config import load_config
from showcase.errors import DataShapeError
from showcase.loader import load_career_timeline_file, load_master_data, load_timeline_file
from showcase.page import CAREER_TIMELINE_FILE, MASTER_DATA_FILE, TIMELINE_FILE, generate_site
from showcase.sync import sync_data


def _check(data_dir: Path) -> int:
    """Validate staged documents. Returns a process exit code."""
    try:
        view_model = load_master_data(data_dir / MASTER_DATA_FILE)
        events = load_timeline_file(data_dir / TIMELINE_FILE)
        career_path = data_dir / CAREER_TIMELINE_FILE
        career = load_career_timeline_file(career_path) if career_path.exists() else None
    except FileNotFoundError as e:
        print(f"Missing input: {e.filename}")
        return 1
    except OSError as e:
        print(f"Unreadable input: {e.filename}: {e.strerror}")
        return 1
    except DataShapeError as e:
        print(f"Invalid data at {e.path or '<root>'}: {e.message}")
        for path, msg in e.errors[1:]:
            print(f"  {path}: {msg}")
        return 1

    cli = view_model.technical_achievements.b2b_cli
    print(f"{MASTER_DATA_FILE}: {view_model.summary.current_role} @ {view_model.summary.company}")
    print(f"  {len(view_model.metrics)} metric categories, {cli.lines_of_code:,} lines of code")
    print(f"{TIMELINE_FILE}: {len(events)} events")
    if career is not None:
        print(f"{CAREER_TIMELINE_FILE}: {len(career.companies)} companies")
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Career showcase generator")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml")
    sub = parser.add_subparsers(dest="command")

    # sync command
    sync_parser = sub.add_parser("sync", help="Copy data files from the experience repo into data/")
    sync_parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sync_parser.add_argument(
        "source_dir",
        nargs="?",
        help="Experience repo path. Defaults to $EXPERIENCE_REPO_PATH, then config.",
    )

    # build command
    build_parser = sub.add_parser("build", help="Render the single-page site")
    build_parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    build_parser.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Output HTML path (default: output_path from config)",
    )

    # check command
    check_parser = sub.add_parser("check", help="Validate staged data files")
    check_parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "sync":
        result = sync_data(config, args.source_dir)
        print(result)
        if not result.ok:
            print("Some files failed to sync:")
            for warning in result.warnings:
                print(f"  - {warning}")
        sys.exit(result.exit_code)

    elif args.command == "build":
        path = generate_site(config, args.output)
        print(f"Output: {path}")

    elif args.command == "check":
        sys.exit(_check(config.resolved_data_dir))

    else:
        parser.print_help()


if __name__ == "__main__":
    main()
