"""Exceptions raised by ngramlm."""


class NgramError(Exception):
    """Base class for ngramlm errors."""


class MissingTransitionError(NgramError, KeyError):
    """A node has no recorded transition to the requested successor."""

    def __init__(self, token: str, successor: str):
        super().__init__(f"no transition {token!r} -> {successor!r}")
        self.token = token
        self.successor = successor

    def __str__(self) -> str:
        return self.args[0]


class InsufficientEvaluationDataError(NgramError):
    """Fewer non-blank evaluation lines than requested."""

    def __init__(self, available: int, required: int):
        super().__init__(
            f"evaluation text has {available} non-blank lines, "
            f"{required} required"
        )
        self.available = available
        self.required = required


class CorpusIOError(NgramError):
    """A corpus file could not be read or an output file written."""
