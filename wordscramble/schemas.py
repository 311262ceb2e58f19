from __future__ import annotations
from pydantic import BaseModel
from typing import Dict, List, Literal, Optional, Tuple

from .game_logic import RoundState, SubmitOutcome, SubmitResult

Outcome = Literal['accepted', 'rejected_duplicate', 'rejected_not_composable', 'rejected_not_real', 'ignored']

# (title, message) shown in the alert for each rejection
ALERTS: Dict[SubmitOutcome, Tuple[str, str]] = {
    SubmitOutcome.REJECTED_DUPLICATE: ('Word used already', 'Be more original'),
    SubmitOutcome.REJECTED_NOT_COMPOSABLE: ('Word not recognized', 'You cannot make a word up'),
    SubmitOutcome.REJECTED_NOT_REAL: ('Word not possible', 'This is not a real word'),
}

class UsedWord(BaseModel):
    word: str
    letters: int

class RoundView(BaseModel):
    rootWord: Optional[str] = None
    usedWords: List[UsedWord] = []
    score: int = 0

    @classmethod
    def of(cls, state: RoundState) -> 'RoundView':
        return cls(
            rootWord=state.root_word,
            usedWords=[UsedWord(word=w, letters=len(w)) for w in state.used_words],
            score=state.score,
        )

class Alert(BaseModel):
    title: str
    message: str
    reason: Outcome

    @classmethod
    def for_result(cls, result: SubmitResult) -> Optional['Alert']:
        if not result.rejected:
            return None
        title, message = ALERTS[result.outcome]
        return cls(title=title, message=message, reason=result.outcome.value)

class SubmitRequest(BaseModel):
    word: str

class SubmitResponse(BaseModel):
    outcome: Outcome
    word: str
    score: int
    alert: Optional[Alert] = None
    round: RoundView

class SessionCreated(BaseModel):
    sessionId: str
    round: RoundView

class WordValidation(BaseModel):
    word: str
    locale: str
    valid: bool
