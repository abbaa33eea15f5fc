#!/usr/bin/env python3
"""
Download the pronunciation wordlist the syllable dictionary is built from.

Webster's Unabridged Dictionary (1913), Project Gutenberg eBook #29765.
The text is public domain; it is cached under raw_data/ and only fetched
when missing.
"""

import hashlib
import urllib.error
import urllib.request
from pathlib import Path
from typing import Optional
from logging import getLogger

from tqdm import tqdm

logger = getLogger(__name__)


SOURCE_URL = "https://www.gutenberg.org/files/29765/29765-0.txt"
DEFAULT_TARGET = Path(__file__).parent / "raw_data" / "webster_29765.txt"


def get_file_hash(file_path: Path) -> Optional[str]:
    """Calculate SHA256 hash of a file."""
    if not file_path.exists():
        return None

    sha256_hash = hashlib.sha256()
    with open(file_path, "rb") as f:
        for byte_block in iter(lambda: f.read(4096), b""):
            sha256_hash.update(byte_block)
    return sha256_hash.hexdigest()


def download_file(url: str, target_path: Path, description: str) -> bool:
    """
    Download a file with a progress bar.

    Returns:
        True on success, False if the download failed
    """
    target_path.parent.mkdir(parents=True, exist_ok=True)
    partial_path = target_path.with_suffix(target_path.suffix + ".part")

    logger.info(f"Downloading {description} from {url}")

    with tqdm(unit="B", unit_scale=True, desc=description) as pbar:
        def progress_hook(block_num, block_size, total_size):
            if total_size > 0:
                pbar.total = total_size
            pbar.update(block_num * block_size - pbar.n)

        try:
            urllib.request.urlretrieve(url, partial_path, progress_hook)
        except (urllib.error.URLError, OSError) as e:
            logger.error(f"Download failed: {e}")
            if partial_path.exists():
                partial_path.unlink()
            return False

    partial_path.replace(target_path)
    logger.info(f"Download complete: {target_path}")
    return True


def check_and_download_files(target_path: Optional[Path] = None, url: str = SOURCE_URL) -> bool:
    """
    Make sure the wordlist is available locally, downloading it if needed.

    Args:
        target_path: Where the wordlist is cached (default: raw_data/webster_29765.txt)
        url: Source URL

    Returns:
        True if the file is ready
    """
    path = Path(target_path) if target_path is not None else DEFAULT_TARGET

    if path.exists():
        file_hash = get_file_hash(path)
        logger.info(
            f"Wordlist present: {path} ({path.stat().st_size / (1024*1024):.2f} MB, "
            f"sha256 {file_hash[:16]}...)"
        )
        return True

    logger.info(f"Wordlist not found at {path}")
    return download_file(url, path, "Webster wordlist")
