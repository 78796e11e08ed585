"""Pull localization keys out of free-form pasted text.

Only the first ``#`` token on each line counts. A bare run such as
``#menu.title`` is preferred; a quoted form such as ``"#menu.title"`` is the
fallback for lines where the run pattern finds nothing.
"""
from collections import Counter
from collections.abc import Iterable
import logging
import re

from langkeys.classes import Extraction

logger = logging.getLogger(__name__)

KEY_MARKER = "#"

key_regex = re.compile(r'#[^\s"]+')
quoted_key_regex = re.compile(r'"(#[^"]+)"')


def extract_line(line: str) -> str:
    """Return the key found on a single line, or an empty string."""
    line = line.strip()
    match = key_regex.search(line)
    if match:
        return match.group(0)
    match = quoted_key_regex.search(line)
    if match:
        return match.group(1)
    return ""


def deduplicate(raw_keys: Iterable[str]) -> tuple[list[str], dict[str, int]]:
    raw_keys = [key for key in raw_keys if key]
    counts = Counter(raw_keys)
    # dict.fromkeys keeps the first occurrence of every key
    keys = list(dict.fromkeys(raw_keys))
    duplicates = {key: counts[key] for key in keys if counts[key] > 1}
    return keys, duplicates


def extract(raw_text: str) -> Extraction:
    raw_keys = [
        extract_line(line) for line in raw_text.split("\n") if KEY_MARKER in line
    ]
    keys, duplicates = deduplicate(raw_keys)
    if duplicates:
        logger.debug(f"Duplicate keys in input: {duplicates}")
    logger.debug(f"Extracted {len(keys)} keys")
    return Extraction(keys, duplicates)


def extract_keys(raw_text: str) -> list[str]:
    return extract(raw_text).keys
