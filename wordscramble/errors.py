from __future__ import annotations


class WordScrambleError(Exception):
    pass


class ConfigurationError(WordScrambleError):
    """No root word can be chosen: empty word list, missing resource or bad dictionary setup."""


class RoundNotStartedError(WordScrambleError, RuntimeError):
    pass


class SessionNotFound(WordScrambleError, KeyError):
    def __init__(self, session_id: str):
        super().__init__(session_id)
        self.session_id = session_id

    def __str__(self) -> str:
        return f"Session not found: {self.session_id}"


class SessionExists(WordScrambleError):
    def __init__(self, session_id: str):
        super().__init__(session_id)
        self.session_id = session_id

    def __str__(self) -> str:
        return f"Session already exists: {self.session_id}"
