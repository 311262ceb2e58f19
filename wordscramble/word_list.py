from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Protocol

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_WORD_LIST_PATH = Path(__file__).parent / 'data' / 'start.txt'


class WordListProvider(Protocol):
    def words(self) -> List[str]:
        ...


def parse_word_list(text: str) -> List[str]:
    """Split a newline-separated resource into lowercase words, skipping blank lines."""
    return [line.strip().lower() for line in text.split('\n') if line.strip()]


class StaticWordListProvider:
    def __init__(self, words: Iterable[str]):
        self._words = list(words)

    def words(self) -> List[str]:
        return list(self._words)


class FileWordListProvider:
    """Reads the word list file on first use and caches it."""

    def __init__(self, path: Path = DEFAULT_WORD_LIST_PATH):
        self.path = Path(path)
        self._words: Optional[List[str]] = None

    def words(self) -> List[str]:
        if self._words is None:
            try:
                text = self.path.read_text(encoding='utf-8')
            except OSError as exc:
                raise ConfigurationError(f"Could not load word list from {self.path}: {exc}") from exc
            self._words = parse_word_list(text)
            logger.info(f"[word-list] loaded {len(self._words)} words from {self.path}")
        return list(self._words)
