"""Unigram token counts."""

from collections import Counter
from typing import Iterable, Iterator, List, Tuple

from ngramlm.data.corpus import tokenize
from ngramlm.utils.estimator import ProbabilityRecord


NORMALIZATIONS = ('types', 'tokens')


class TokenCounter:
    """Maps each distinct token to the number of times it occurred.

    ``probability`` divides by the number of distinct tokens by default
    (``normalization='types'``). Pass ``normalization='tokens'`` to divide
    by the total number of occurrences instead.
    """

    def __init__(self, normalization: str = 'types'):
        if normalization not in NORMALIZATIONS:
            raise ValueError(
                f"normalization must be one of {NORMALIZATIONS}, "
                f"got {normalization!r}"
            )
        self.normalization = normalization
        self.counts: Counter = Counter()

    @classmethod
    def from_text(cls, text: str, normalization: str = 'types') -> 'TokenCounter':
        counter = cls(normalization)
        counter.fit(tokenize(text))
        return counter

    def fit(self, tokens: Iterable[str]) -> 'TokenCounter':
        self.counts.update(tokens)
        return self

    def record(self, token: str) -> None:
        self.counts[token] += 1

    def count(self, token: str) -> int:
        return self.counts[token]

    def total(self) -> int:
        """Total number of token occurrences."""
        return sum(self.counts.values())

    def probability(self, token: str) -> float:
        """Estimated probability of ``token``.

        Raises:
            KeyError: if the token was never recorded
        """
        if token not in self.counts:
            raise KeyError(token)
        return self.counts[token] / self._denominator()

    def _denominator(self) -> int:
        if self.normalization == 'tokens':
            return self.total()
        return len(self.counts)

    def probability_records(self) -> List[ProbabilityRecord]:
        denominator = self._denominator()
        return [ProbabilityRecord(None, token, count / denominator)
                for token, count in self.counts.items()]

    def items(self) -> Iterable[Tuple[str, int]]:
        return self.counts.items()

    def __contains__(self, token: str) -> bool:
        return token in self.counts

    def __len__(self) -> int:
        return len(self.counts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.counts)
