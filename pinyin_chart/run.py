#!/usr/bin/env python3
"""
Run script for the Pinyin Chart API

Usage:
    python -m pinyin_chart.run [--reload]
"""
import argparse
import logging
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

# Resolve paths relative to this file
BASE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = BASE_DIR.parent

# Load .env before settings are read
load_dotenv(PROJECT_ROOT / ".env")

from pinyin_chart.config import settings  # noqa: E402

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Run the Pinyin Chart API server")
    parser.add_argument("--host", default=settings.api_host)
    parser.add_argument("--port", type=int, default=settings.api_port)
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    logger.info(f"Starting Pinyin Chart API server on {args.host}:{args.port}")

    uvicorn.run(
        "pinyin_chart.app.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
