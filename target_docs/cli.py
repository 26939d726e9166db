"""CLI entrypoints for target-docs commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .errors import StaleOutputError, TargetDocsError
from .generator import Generator, Mode
from .logging import configure_logging


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if suppress_default else False,
        help="Increase log verbosity for troubleshooting.",
    )


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    _add_verbose_option(parser, suppress_default=True)
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Project root containing .target-docs.yml (defaults to current directory).",
    )
    parser.add_argument(
        "--targets-file",
        type=Path,
        default=None,
        help="Read target names from this file instead of asking rustc.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="target-docs",
        description="Generate per-target documentation pages from target info files.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only print warnings and errors from the log.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Render target pages into the output directory.",
    )
    _add_common_options(generate_parser)
    generate_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Override the configured output directory.",
    )
    generate_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the changes as a diff without writing anything.",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Fail if the generated pages are out of date.",
    )
    _add_common_options(check_parser)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Parse target info files and report pattern matches.",
    )
    _add_common_options(validate_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for target-docs commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file
    )
    generator = Generator()

    if args.command == "generate":
        dry_run = bool(getattr(args, "dry_run", False))
        try:
            outcome = generator.run(
                args.path,
                mode=Mode.DRY_RUN if dry_run else Mode.WRITE,
                output_dir=args.output,
                targets_file=args.targets_file,
            )
        except TargetDocsError as exc:
            parser.exit(1, f"target-docs generate failed: {exc}\nRun with --verbose for more details.\n")
        if dry_run:
            print(outcome.diff or "Generated pages already up to date (dry-run)")
        else:
            count = len(outcome.changed) + len(outcome.removed)
            print(
                f"Generated {outcome.target_count} target pages in {_relativize(outcome.output_dir)} "
                f"({count} files changed, {outcome.stubbed_sections} sections stubbed)"
            )
    elif args.command == "check":
        try:
            generator.run(args.path, mode=Mode.CHECK, targets_file=args.targets_file)
        except StaleOutputError as exc:
            parser.exit(1, f"{exc}\n")
        except TargetDocsError as exc:
            parser.exit(1, f"target-docs check failed: {exc}\n")
        print("Generated pages are up to date")
    elif args.command == "validate":
        try:
            report = generator.validate(args.path, targets_file=args.targets_file)
        except TargetDocsError as exc:
            parser.exit(1, f"target-docs validate failed: {exc}\n")
        print(f"{len(report.infos)} target info files are valid")
        for pattern, count in report.match_counts.items():
            print(f"  {pattern}: {count} target(s)")
        if report.unmatched_patterns:
            parser.exit(
                1, f"Patterns matching no target: {', '.join(report.unmatched_patterns)}\n"
            )
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
