"""Helper functions for run_pipeline CLI."""

from __future__ import annotations

import argparse


def parse_run_pipeline_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for run_pipeline."""

    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--sources",
        default=None,
        help="Comma-separated list of source names (default: all).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Config name under configs/ (default: $PIPELINE_CONFIG or prod)",
    )

    # Output options
    parser.add_argument("--load-s3", action="store_true", help="Upload story groups to S3")
    parser.add_argument("--load-local", action="store_true", help="Upsert story groups into a local JSONL store")
    return parser.parse_args(argv)
