from __future__ import annotations
import enum
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .dictionary import DictionaryService, DEFAULT_LOCALE
from .errors import ConfigurationError, RoundNotStartedError

MIN_WORD_LENGTH = 3


class SubmitOutcome(str, enum.Enum):
    ACCEPTED = 'accepted'
    REJECTED_DUPLICATE = 'rejected_duplicate'
    REJECTED_NOT_COMPOSABLE = 'rejected_not_composable'
    REJECTED_NOT_REAL = 'rejected_not_real'
    IGNORED = 'ignored'


@dataclass(frozen=True)
class SubmitResult:
    outcome: SubmitOutcome
    word: str
    score: int  # score after the call

    @property
    def accepted(self) -> bool:
        return self.outcome is SubmitOutcome.ACCEPTED

    @property
    def rejected(self) -> bool:
        return self.outcome not in (SubmitOutcome.ACCEPTED, SubmitOutcome.IGNORED)


def normalize_word(word: str) -> str:
    return word.strip().lower()


def score_for_word(word: str) -> int:
    return 2 * len(word)


def is_original(word: str, root_word: str, used_words: Sequence[str]) -> bool:
    if word == root_word:
        return False
    return word not in used_words


def is_composable(word: str, root_word: str) -> bool:
    """Multiset-subset test: every letter of ``word`` must be taken from a
    distinct occurrence in ``root_word``. Letter order does not matter."""
    pool = list(root_word)
    for letter in word:
        if letter not in pool:
            return False
        pool.remove(letter)
    return True


def is_real(word: str, dictionary: DictionaryService, locale: str = DEFAULT_LOCALE) -> bool:
    if len(word) < MIN_WORD_LENGTH:
        return False
    return dictionary.is_valid_word(word, locale)


class RoundState:
    """Root word, used words and score for one player's round.

    The state is Idle until :meth:`start_round` is called; after that every
    call to :meth:`submit` either commits the word or returns a rejection
    without touching the state.
    """

    def __init__(self, dictionary: DictionaryService, locale: str = DEFAULT_LOCALE,
                 rng: Optional[random.Random] = None):
        self.dictionary = dictionary
        self.locale = locale
        self.rng = rng or random.Random()
        self.root_word: Optional[str] = None
        self._used_words: List[str] = []
        self.score: int = 0

    @property
    def used_words(self) -> Tuple[str, ...]:
        # most recent first
        return tuple(self._used_words)

    @property
    def is_started(self) -> bool:
        return self.root_word is not None

    def start_round(self, word_list: Sequence[str]) -> str:
        candidates = [w for w in (normalize_word(w) for w in word_list) if w]
        if not candidates:
            raise ConfigurationError('Word list is empty; no root word available')
        root = self.rng.choice(candidates)
        self.root_word, self._used_words, self.score = root, [], 0
        return root

    def submit(self, candidate: str) -> SubmitResult:
        if self.root_word is None:
            raise RoundNotStartedError('submit() called before start_round()')

        word = normalize_word(candidate)
        if not word:
            return SubmitResult(SubmitOutcome.IGNORED, word, self.score)

        # Order matters: duplicate, then composable, then real.
        if not is_original(word, self.root_word, self._used_words):
            return SubmitResult(SubmitOutcome.REJECTED_DUPLICATE, word, self.score)
        if not is_composable(word, self.root_word):
            return SubmitResult(SubmitOutcome.REJECTED_NOT_COMPOSABLE, word, self.score)
        if not is_real(word, self.dictionary, self.locale):
            return SubmitResult(SubmitOutcome.REJECTED_NOT_REAL, word, self.score)

        self._used_words.insert(0, word)
        self.score += score_for_word(word)
        return SubmitResult(SubmitOutcome.ACCEPTED, word, self.score)
