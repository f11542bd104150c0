"""Command line interface for the resume screener."""
from __future__ import annotations

import argparse
import csv
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, Sequence

from smart_screener import pipeline
from smart_screener.errors import ScreenerError
from smart_screener.logging_config import configure_logging
from smart_screener.matching import ScoreResult
from smart_screener.settings import MatchSettings

logger = logging.getLogger("smart_screener.cli")


def _parse_arguments(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Score resumes against a job description using TF-IDF cosine similarity.",
    )
    parser.add_argument(
        "job_description",
        type=Path,
        help="Path to a plain text file containing the job description.",
    )
    parser.add_argument(
        "resumes",
        type=Path,
        nargs="+",
        help="One or more resume files (.pdf or .txt).",
    )
    parser.add_argument(
        "--title",
        required=True,
        help="Job title shown alongside the results.",
    )
    parser.add_argument(
        "--top-k",
        type=int,
        default=None,
        help="Number of overlapping terms to report per resume.",
    )
    parser.add_argument(
        "--preview-length",
        type=int,
        default=None,
        help="Number of resume characters to include in the preview.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional path to save the results as JSON or CSV (based on extension).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def _settings_from_arguments(args: argparse.Namespace) -> MatchSettings:
    settings = MatchSettings.from_env()
    overrides = {}
    if args.top_k is not None:
        overrides["top_k"] = args.top_k
    if args.preview_length is not None:
        overrides["preview_length"] = args.preview_length
    if overrides:
        settings = dataclasses.replace(settings, **overrides)
    return settings


def _serialise_results(
    results: Sequence[tuple[Path, ScoreResult]], destination: Path
) -> None:
    destination.parent.mkdir(parents=True, exist_ok=True)

    if destination.suffix.lower() == ".json":
        payload = [
            {"resume": str(path), **pipeline.result_to_dict(result)} for path, result in results
        ]
        destination.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    elif destination.suffix.lower() == ".csv":
        with destination.open("w", encoding="utf-8", newline="") as csv_file:
            writer = csv.DictWriter(
                csv_file, fieldnames=["resume", "score", "term", "resumeTfIdf", "jdTfIdf"]
            )
            writer.writeheader()
            for path, result in results:
                if not result.top_overlap:
                    writer.writerow(
                        {
                            "resume": str(path),
                            "score": f"{result.score:.4f}",
                            "term": "",
                            "resumeTfIdf": "",
                            "jdTfIdf": "",
                        }
                    )
                for entry in result.top_overlap:
                    writer.writerow(
                        {
                            "resume": str(path),
                            "score": f"{result.score:.4f}",
                            "term": entry.term,
                            "resumeTfIdf": f"{entry.resume_weight:.3f}",
                            "jdTfIdf": f"{entry.jd_weight:.3f}",
                        }
                    )
    else:
        raise ValueError("Unsupported output format. Use a .json or .csv file extension.")


def main(argv: Iterable[str] | None = None) -> list[ScoreResult]:
    args = _parse_arguments(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    try:
        settings = _settings_from_arguments(args)
        job_description_text = pipeline.load_job_description(args.job_description)
        results = [
            (
                resume_path,
                pipeline.score_resume(
                    resume_path, args.title, job_description_text, settings=settings
                ),
            )
            for resume_path in args.resumes
        ]
    except (ScreenerError, FileNotFoundError, ValueError) as exc:
        logger.debug("Scoring failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    results.sort(key=lambda item: item[1].score, reverse=True)

    if args.output:
        _serialise_results(results, args.output)

    print(f"Job title: {args.title}")
    for resume_path, result in results:
        print()
        print(f"{resume_path}:")
        for line in pipeline.format_result(result):
            print(f"  {line}")
        if result.resume_preview:
            print("  Preview:")
            print(f"  {result.resume_preview}")

    return [result for _, result in results]


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
