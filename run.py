"""Command-line entry point for linting markdown lessons."""

import argparse
import json
import logging
import sys

from src.config import load_config
from src.errors import GlossaryError
from src.models.report import ValidationReport
from src.pipeline import BatchResult, LessonLinter
from src.validation.glossary import load_glossary

EXIT_CLEAN = 0
EXIT_GAPS = 1
EXIT_FAILED = 2


def _format_text(result: BatchResult) -> str:
    if result.report is None:
        return f"{result.source_path}: ERROR {result.error}"

    report: ValidationReport = result.report
    if report.is_clean:
        return f"{report.source_path}: OK"

    lines = [f"{report.source_path}: {report.title}"]
    if report.undefined:
        lines.append("  undefined elements: " + ", ".join(report.undefined))
    if report.undemonstrated:
        lines.append("  missing demonstrations: " + ", ".join(report.undemonstrated))
    return "\n".join(lines)


def _exit_code(results: list[BatchResult]) -> int:
    if any(not result.ok for result in results):
        return EXIT_FAILED
    if any(result.report is not None and not result.report.is_clean for result in results):
        return EXIT_GAPS
    return EXIT_CLEAN


def main(argv: list[str] | None = None) -> int:
    """Lint the given lessons and print a report."""
    parser = argparse.ArgumentParser(description="Check HTML element references in markdown lessons")
    parser.add_argument("paths", nargs="+", help="Lesson files to lint")
    parser.add_argument("--config", default="config.yaml", help="YAML configuration file")
    parser.add_argument("--glossary", default=None, help="YAML glossary replacing the built-in one")
    parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format")
    parser.add_argument("--workers", type=int, default=None, help="Number of parallel workers")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    logging.basicConfig(
        level=getattr(logging, config.app.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        glossary = load_glossary(args.glossary) if args.glossary else None
        linter = LessonLinter(config, glossary)
    except GlossaryError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FAILED

    results = linter.lint_batch(args.paths, max_workers=args.workers)

    if args.format == "json":
        payload = [
            result.report.to_dict() if result.report else {"source_path": result.source_path, "error": result.error}
            for result in results
        ]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        for result in results:
            print(_format_text(result))

    return _exit_code(results)


if __name__ == "__main__":
    raise SystemExit(main())
