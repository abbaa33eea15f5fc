#!/usr/bin/env python3
"""
LMDB exporter for the syllable dictionary.
Stores each headword's citation form as a MsgPack value for read-only lookups.

Value format (one record per headword):
    {"syllables": ["hel", "lo"], "hyphenated": "hel-lo", "stresses": [0, 2], "isKnown": true}
"""

import shutil
from pathlib import Path
from logging import getLogger
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

import lmdb
import msgpack

logger = getLogger(__name__)


class LMDBExporter:
    """
    Export dictionary to LMDB, sized for read-only access.

    Keys are written in sorted order with MDB_APPEND so the B+ tree is
    built sequentially.
    """

    # MsgPack is compact, so a modest margin covers LMDB page overhead
    OVERHEAD_FACTOR = 1.15
    SAFETY_MARGIN = 1.10
    MIN_MAP_SIZE = 1024 * 1024

    def __init__(self, db_path: Path):
        """
        Initialize LMDB exporter.

        Args:
            db_path: Path to LMDB database directory
        """
        self.db_path = Path(db_path)

    def _estimate_data_size(self, data: Dict[str, Dict[str, Any]]) -> int:
        """
        Estimate the map size needed for LMDB from a sample of entries.

        Args:
            data: Dictionary to export

        Returns:
            Estimated size in bytes with overhead and safety margin
        """
        sample_size = 0
        sample_count = 0
        max_samples = 1000

        for key, record in data.items():
            if sample_count >= max_samples:
                break
            sample_size += len(key.encode("utf-8"))
            sample_size += len(msgpack.packb(record, use_bin_type=True))
            sample_count += 1

        if sample_count > 0:
            estimated_data = int(sample_size / sample_count * len(data))
        else:
            estimated_data = 0

        final_size = max(
            int(estimated_data * self.OVERHEAD_FACTOR * self.SAFETY_MARGIN),
            self.MIN_MAP_SIZE,
        )

        logger.info(f"Estimated data size: {estimated_data / (1024*1024):.2f} MB")
        logger.info(f"Map size with overhead: {final_size / (1024*1024):.2f} MB")

        return final_size

    def export_raw(self, data: Dict[str, Dict[str, Any]], progress_callback: Optional[Callable] = None) -> None:
        """
        Export dictionary records to a fresh LMDB database.
        Deletes the existing database if present.

        Args:
            data: Dict mapping headwords to record dicts
            progress_callback: Optional callback(current, total) for progress tracking
        """
        logger.info(f"Exporting {len(data):,} words to LMDB at {self.db_path}")

        map_size = self._estimate_data_size(data)

        if self.db_path.exists():
            logger.info(f"Removing existing database at {self.db_path}")
            shutil.rmtree(self.db_path)

        self.db_path.mkdir(parents=True, exist_ok=True)

        # MDB_APPEND requires keys in byte order
        sorted_keys = sorted(data.keys(), key=lambda k: k.encode("utf-8"))

        env = lmdb.open(
            str(self.db_path),
            map_size=map_size,
            max_dbs=0,
            readonly=False,
            writemap=True,
            map_async=True,
            sync=True,
            metasync=True
        )

        try:
            with env.begin(write=True) as txn:
                total = len(sorted_keys)

                for idx, word in enumerate(sorted_keys, 1):
                    value = msgpack.packb(data[word], use_bin_type=True)
                    txn.put(word.encode("utf-8"), value, append=True)

                    if progress_callback and (idx % 10000 == 0 or idx == total):
                        progress_callback(idx, total)

            stats = env.stat()
            actual_pages = stats["leaf_pages"] + stats["branch_pages"] + stats["overflow_pages"]
            actual_size = stats["psize"] * actual_pages

            logger.info(f"Export complete: {stats['entries']:,} entries")
            logger.info(f"  Actual data: {actual_size / (1024*1024):.2f} MB")
        finally:
            env.close()

    def verify(self, sample_words: List[str]) -> Dict:
        """
        Verify exported database with sample lookups.
        Opens read-only, the way the dictionary is used in production.

        Args:
            sample_words: Words to test

        Returns:
            Dict with verification results
        """
        try:
            env = lmdb.open(str(self.db_path), readonly=True, lock=False)
        except lmdb.Error as e:
            return {"status": "error", "message": str(e)}

        try:
            stats = env.stat()
            with env.begin() as txn:
                found = sum(1 for word in sample_words if txn.get(word.encode("utf-8")) is not None)
                actual_pages = stats["leaf_pages"] + stats["branch_pages"] + stats["overflow_pages"]

                return {
                    "status": "success",
                    "entries": stats["entries"],
                    "size_bytes": stats["psize"] * actual_pages,
                    "sample_found": f"{found}/{len(sample_words)}"
                }
        finally:
            env.close()


class LMDBQuery:
    """
    Query an LMDB syllable dictionary.

    Usage:
        db = LMDBQuery("syllables.lmdb")
        record = db.lookup("hello")
        db.close()

    Or with context manager:
        with LMDBQuery("syllables.lmdb") as db:
            record = db.lookup("hello")
    """

    def __init__(self, db_path: Path):
        """
        Initialize LMDB query interface.

        Args:
            db_path: Path to LMDB database directory

        Raises:
            FileNotFoundError: If the database directory does not exist
        """
        self.db_path = Path(db_path)
        self.env = None
        self._open()

    def _open(self):
        """Open LMDB environment read-only without a lock file."""
        if not self.db_path.exists():
            raise FileNotFoundError(f"LMDB database not found at {self.db_path}")

        self.env = lmdb.open(
            str(self.db_path),
            readonly=True,
            lock=False,
            readahead=True,
            max_dbs=0
        )
        logger.debug(f"Opened LMDB database at {self.db_path}")

    def _require_open(self):
        if not self.env:
            raise RuntimeError("Database not open")

    def lookup(self, word: str) -> Optional[Dict[str, Any]]:
        """
        Look up a headword.

        Args:
            word: Lowercase headword

        Returns:
            Record dict, or None if not found
        """
        self._require_open()

        with self.env.begin(buffers=True) as txn:
            value = txn.get(word.encode("utf-8"))
            if value is None:
                return None
            return msgpack.unpackb(value, raw=False)

    def items(self) -> Iterator[Tuple[str, Dict[str, Any]]]:
        """
        Iterate over all (headword, record) pairs in key order.

        Yields:
            Tuples of headword and decoded record dict
        """
        self._require_open()

        with self.env.begin() as txn:
            for key, value in txn.cursor():
                yield key.decode("utf-8"), msgpack.unpackb(value, raw=False)

    def get_stats(self) -> Dict:
        """Get database statistics"""
        self._require_open()

        stats = self.env.stat()
        actual_pages = stats["leaf_pages"] + stats["branch_pages"] + stats["overflow_pages"]
        return {
            "entries": stats["entries"],
            "page_size": stats["psize"],
            "depth": stats["depth"],
            "size_bytes": stats["psize"] * actual_pages,
        }

    def list_words(self, limit: Optional[int] = None) -> List[str]:
        """
        List headwords in key order.

        Args:
            limit: Maximum number of words to return (None = all)
        """
        self._require_open()

        words = []
        with self.env.begin() as txn:
            for key in txn.cursor().iternext(keys=True, values=False):
                if limit is not None and len(words) >= limit:
                    break
                words.append(key.decode("utf-8"))

        return words

    def prefix_search(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        """
        Find headwords starting with prefix.

        Args:
            prefix: Prefix to search for
            limit: Maximum results to return
        """
        self._require_open()

        matches = []
        with self.env.begin() as txn:
            cursor = txn.cursor()

            # Position cursor at first key >= prefix
            if cursor.set_range(prefix.encode("utf-8")):
                for key in cursor.iternext(keys=True, values=False):
                    key_str = key.decode("utf-8")
                    if not key_str.startswith(prefix):
                        break
                    matches.append(key_str)
                    if limit is not None and len(matches) >= limit:
                        break

        return matches

    def close(self):
        """Close database connection"""
        if self.env:
            self.env.close()
            self.env = None
            logger.debug("Closed LMDB database")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __del__(self):
        self.close()
