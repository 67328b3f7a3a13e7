"""CLI entrypoint for readmegen."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .licenses import UnknownLicenseError
from .logging import configure_logging
from .orchestrator import Orchestrator
from .prompts import PromptAborted
from .writer import ReadmeWriteError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readmegen",
        description="Answer a few questions about your project and get a README.md.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Directory to write the README into (defaults to current directory).",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint: prompt, render and write the README."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    target = Path(args.path).expanduser()
    if not target.is_dir():
        parser.exit(1, f"Target directory not found: {target}\n")

    try:
        config = load_config(target)
    except ConfigError as exc:
        parser.exit(1, f"Invalid configuration: {exc}\n")
    if config.log_file is not None:
        try:
            configure_logging(verbose=bool(args.verbose), log_file=config.log_file)
        except OSError as exc:
            parser.exit(1, f"Invalid configuration: cannot open log_file: {exc}\n")

    orchestrator = Orchestrator()
    try:
        outcome = orchestrator.run(str(target), config=config)
    except PromptAborted as exc:
        parser.exit(1, f"\n{exc}\n")
    except ReadmeWriteError as exc:
        parser.exit(1, f"{exc}\n")
    except UnknownLicenseError as exc:
        parser.exit(1, f"readmegen failed: {exc.args[0]}\n")
    except Exception as exc:  # pragma: no cover - defensive guard
        parser.exit(1, f"readmegen failed: {exc}\nRun with --verbose for more details.\n")

    print(f"Successfully wrote to {_relativize(outcome.path)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
