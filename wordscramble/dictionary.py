from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Optional, Protocol, Set

from wordfreq import zipf_frequency

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = 'en'


def language_of(locale: str) -> str:
    # 'en_US' / 'en-GB' -> 'en'
    return locale.replace('-', '_').split('_', 1)[0].lower()


class DictionaryService(Protocol):
    def is_valid_word(self, word: str, locale: str = DEFAULT_LOCALE) -> bool:
        ...


class WordSetDictionary:
    """Dictionary backed by an in-memory set of words for a single language."""

    def __init__(self, words: Iterable[str], language: str = DEFAULT_LOCALE):
        # Store lowercase words
        self._words: Set[str] = {w.strip().lower() for w in words if w.strip()}
        self.language = language_of(language)

    @classmethod
    def from_file(cls, path: Path, language: str = DEFAULT_LOCALE) -> 'WordSetDictionary':
        path = Path(path)
        try:
            with path.open(encoding='utf-8') as f:
                dictionary = cls(f, language=language)
        except OSError as exc:
            raise ConfigurationError(f"Could not load dictionary from {path}: {exc}") from exc
        logger.info(f"[dictionary] loaded {len(dictionary)} words from {path}")
        return dictionary

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return word.lower() in self._words

    def is_valid_word(self, word: str, locale: str = DEFAULT_LOCALE) -> bool:
        if not word:
            return False
        if language_of(locale) != self.language:
            return False
        return word.lower() in self._words


class WordfreqDictionary:
    """Treats a word as real when it shows up often enough in the wordfreq corpora.

    ``min_zipf`` is on the Zipf scale (0 means never seen, 3 is roughly once per
    million words); the default accepts anything the corpora have recorded.
    """

    def __init__(self, min_zipf: float = 1.0):
        self.min_zipf = min_zipf

    def is_valid_word(self, word: str, locale: str = DEFAULT_LOCALE) -> bool:
        if not word or not word.isalpha():
            return False
        try:
            freq = zipf_frequency(word.lower(), language_of(locale))
        except LookupError:
            logger.warning(f"[dictionary] wordfreq has no word list for locale={locale}")
            return False
        return freq >= self.min_zipf

    def warm_up(self, locale: str = DEFAULT_LOCALE) -> None:
        """Load the word list for ``locale`` now rather than on the first lookup."""
        try:
            zipf_frequency('the', language_of(locale))
        except LookupError as exc:
            raise ConfigurationError(f"wordfreq has no word list for locale={locale}") from exc


def build_dictionary(config) -> DictionaryService:
    backend = (getattr(config, 'DICTIONARY_BACKEND', None) or 'wordfreq').lower()
    if backend == 'wordfreq':
        dictionary = WordfreqDictionary(min_zipf=float(getattr(config, 'WORDFREQ_MIN_ZIPF', 1.0)))
        dictionary.warm_up(getattr(config, 'DICTIONARY_LOCALE', DEFAULT_LOCALE))
        return dictionary
    if backend == 'wordset':
        path: Optional[str] = getattr(config, 'DICTIONARY_PATH', None)
        if not path:
            raise ConfigurationError('DICTIONARY_BACKEND=wordset requires DICTIONARY_PATH')
        return WordSetDictionary.from_file(Path(path), language=getattr(config, 'DICTIONARY_LOCALE', DEFAULT_LOCALE))
    raise ConfigurationError(f"Unknown dictionary backend: {backend}")
