from __future__ import annotations
import logging
import random
from typing import Dict, Optional

from ..dictionary import DictionaryService, DEFAULT_LOCALE
from ..errors import SessionExists, SessionNotFound
from ..game_logic import RoundState
from ..schemas import Alert, RoundView, SubmitResponse
from ..word_list import WordListProvider

logger = logging.getLogger(__name__)


class RoundManager:
    """Keeps one RoundState per connected screen."""

    def __init__(self, words: WordListProvider, dictionary: DictionaryService,
                 locale: str = DEFAULT_LOCALE, rng: Optional[random.Random] = None):
        self.words = words
        self.dictionary = dictionary
        self.locale = locale
        self.rng = rng or random.Random()
        self.rounds: Dict[str, RoundState] = {}

    def _get(self, session_id: str) -> RoundState:
        state = self.rounds.get(session_id)
        if state is None:
            raise SessionNotFound(session_id)
        return state

    def create(self, session_id: str) -> RoundView:
        if session_id in self.rounds:
            raise SessionExists(session_id)
        state = RoundState(self.dictionary, locale=self.locale, rng=self.rng)
        # Register only once a root word exists
        self._start(session_id, state)
        self.rounds[session_id] = state
        return RoundView.of(state)

    def get(self, session_id: str) -> RoundView:
        return RoundView.of(self._get(session_id))

    def new_round(self, session_id: str) -> RoundView:
        state = self._get(session_id)
        self._start(session_id, state)
        return RoundView.of(state)

    def submit(self, session_id: str, word: str) -> SubmitResponse:
        state = self._get(session_id)
        result = state.submit(word)
        if result.accepted:
            logger.info(f"[word-accepted] session={session_id} word={result.word} score={result.score}")
        elif result.rejected:
            logger.info(f"[word-rejected] session={session_id} word={result.word} reason={result.outcome.value}")
        return SubmitResponse(
            outcome=result.outcome.value,
            word=result.word,
            score=result.score,
            alert=Alert.for_result(result),
            round=RoundView.of(state),
        )

    def discard(self, session_id: str) -> None:
        if self.rounds.pop(session_id, None) is not None:
            logger.info(f"[round-discard] session={session_id}")

    def _start(self, session_id: str, state: RoundState) -> None:
        root = state.start_round(self.words.words())
        logger.info(f"[round-start] session={session_id} root={root}")
