#!/usr/bin/env python3
"""
Database Generator - Syllable Dictionary Builder

Builds the syllable dictionary consumed by the lyrics pipeline.
Pipeline: Download → Parse → JSON Export → LMDB Export → Verification

Data Attribution:
    Webster's Unabridged Dictionary (1913), Project Gutenberg eBook #29765.
    Public domain in the USA.

Usage:
    python -m lyricizer.dictionary_generator.generate_db
    python -m lyricizer.dictionary_generator.generate_db --source webster.txt --skip-lmdb
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from tqdm import tqdm

from lyricizer.dictionary_generator.download_data_files import (
    DEFAULT_TARGET,
    SOURCE_URL,
    check_and_download_files,
)
from lyricizer.dictionary_generator.json_exporter import entries_to_records, export_json
from lyricizer.dictionary_generator.lmdb_exporter import LMDBExporter
from lyricizer.dictionary_generator.webster_parser import WebsterParser
from lyricizer.nlp.syllable_service import SyllableDictionary

logger = logging.getLogger(__name__)


VERIFY_WORDS = ["hello", "cymbal", "translate", "resplendency", "godlike"]


class GeneratorConfig(BaseModel):
    """Configuration for a dictionary build."""
    source_path: Path = Field(default=DEFAULT_TARGET, description="Local copy of the wordlist")
    source_url: str = Field(default=SOURCE_URL, description="Where to fetch the wordlist when missing")
    json_path: Path = Field(default=SyllableDictionary.DEFAULT_JSON_PATH, description="JSON output")
    lmdb_path: Path = Field(default=SyllableDictionary.DEFAULT_LMDB_PATH, description="LMDB output directory")
    skip_lmdb: bool = Field(default=False, description="Only write the JSON export")

    model_config = ConfigDict(arbitrary_types_allowed=True)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build the syllable dictionary from the Webster wordlist")
    parser.add_argument("--source", type=Path, default=DEFAULT_TARGET, help="Wordlist text file (downloaded if missing)")
    parser.add_argument("--url", default=SOURCE_URL, help="Wordlist download URL")
    parser.add_argument("--json-out", type=Path, default=SyllableDictionary.DEFAULT_JSON_PATH, help="dictionary.json output path")
    parser.add_argument("--lmdb-out", type=Path, default=SyllableDictionary.DEFAULT_LMDB_PATH, help="LMDB output directory")
    parser.add_argument("--skip-lmdb", action="store_true", help="Do not write the LMDB export")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def build(config: GeneratorConfig) -> int:
    """
    Run the build pipeline.

    Returns:
        Process exit status (0 on success)
    """
    pipeline_start = time.time()

    # STEP 1: wordlist
    if not check_and_download_files(config.source_path, config.source_url):
        logger.error("Failed to prepare the wordlist")
        return 1

    # STEP 2: parse
    step_start = time.time()
    with tqdm(total=1, desc="Parse", unit="line") as pbar:
        def parse_progress(current, total):
            pbar.total = total
            pbar.n = current
            pbar.refresh()

        entries = WebsterParser().parse_file(config.source_path, progress_callback=parse_progress)

    if not entries:
        logger.error(f"No headwords parsed from {config.source_path}")
        return 1

    logger.info(f"Parsed {len(entries):,} headwords in {time.time() - step_start:.2f}s")

    # STEP 3: JSON export
    export_json(entries, config.json_path)

    # STEP 4: LMDB export + verification
    if not config.skip_lmdb:
        exporter = LMDBExporter(config.lmdb_path)
        records = entries_to_records(entries)

        with tqdm(total=len(records), desc="LMDB ", unit="word") as pbar:
            def export_progress(current, total):
                pbar.n = current
                pbar.refresh()

            exporter.export_raw(records, progress_callback=export_progress)

        verify_result = exporter.verify(VERIFY_WORDS)
        if verify_result["status"] == "success":
            logger.info(
                f"Verified LMDB: {verify_result['entries']:,} entries, "
                f"samples found {verify_result['sample_found']}"
            )
        else:
            logger.warning(f"Verification failed: {verify_result.get('message', 'Unknown error')}")

    logger.info(f"Dictionary build complete in {time.time() - pipeline_start:.2f}s")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = GeneratorConfig(
        source_path=args.source,
        source_url=args.url,
        json_path=args.json_out,
        lmdb_path=args.lmdb_out,
        skip_lmdb=args.skip_lmdb,
    )
    return build(config)


if __name__ == "__main__":
    sys.exit(main())
