"""Corpus loading, tokenization and result writing."""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Union

from ngramlm.errors import CorpusIOError, InsufficientEvaluationDataError


logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r'\s+')


def tokenize(text: str) -> List[str]:
    """Split text on runs of whitespace."""
    return text.split()


def normalize(text: str, keep_lines: bool = False) -> str:
    """Lowercase and trim text.

    Args:
        text: Raw file contents
        keep_lines: Keep line breaks; otherwise every run of whitespace,
            newlines included, collapses to one space
    """
    text = text.lower().strip()
    if not keep_lines:
        text = _WHITESPACE.sub(' ', text)
    return text


def read_corpus(path: Union[str, Path], keep_lines: bool = False) -> str:
    """Read a UTF-8 text file and normalize it."""
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusIOError(f"cannot read {path}: {e}") from e
    logger.info(f"Read {len(text)} characters from {path}")
    return normalize(text, keep_lines=keep_lines)


def select_lines(text: str, limit: int) -> List[str]:
    """Return the first ``limit`` non-blank lines of text.

    Raises:
        InsufficientEvaluationDataError: if fewer non-blank lines exist
    """
    lines = [l.strip() for l in text.splitlines() if l.strip()]
    if len(lines) < limit:
        raise InsufficientEvaluationDataError(len(lines), limit)
    return lines[:limit]


def write_lines(items: Iterable[object], path: Union[str, Path]) -> int:
    """Write one item per line as UTF-8, returning the number of lines."""
    path = Path(path)
    count = 0
    try:
        with open(path, 'w', encoding='utf-8') as f:
            for item in items:
                f.write(f"{item}\n")
                count += 1
    except OSError as e:
        raise CorpusIOError(f"cannot write {path}: {e}") from e
    logger.info(f"Wrote {count} lines to {path}")
    return count
