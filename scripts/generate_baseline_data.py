#!/usr/bin/env python3
"""
Baseline Generation Script
--------------------------
Writes the table-only Urdu text (no hand-tuned exceptions) for every
initial x final x tone 1-4 to JSON. The review diff compares the current
resolver output against this file.

Output shape:
    {"b-a-1": "پآ", "b-a-2": "پآ", ...}

Usage:
    python scripts/generate_baseline_data.py [--output data/baseline_pinyin_data.json]
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from pinyin_chart.app.core.config import BASELINE_FILE
from pinyin_chart.services.review_service import generate_baseline

# Configure Logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def write_baseline(output_path: Path) -> int:
    """Generate and write the baseline. Returns the number of entries."""
    data = generate_baseline()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    return len(data)


def main():
    parser = argparse.ArgumentParser(description="Generate the review baseline data")
    parser.add_argument("--output", type=Path, default=BASELINE_FILE,
                        help=f"Output JSON file (default: {BASELINE_FILE})")
    args = parser.parse_args()

    logger.info(f"Generating baseline into {args.output}...")
    try:
        count = write_baseline(args.output)
    except OSError as e:
        logger.error(f"Could not write {args.output}: {e}")
        sys.exit(1)
    logger.info(f"Baseline generated: {count} entries.")


if __name__ == "__main__":
    main()
