"""Joint probability and perplexity of held-out lines."""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from ngramlm.data.corpus import tokenize
from ngramlm.models.bigram import START_SYMBOL, TransitionGraph
from ngramlm.models.unigram import TokenCounter


logger = logging.getLogger(__name__)

# Perplexity of a line the model gives zero probability.
UNDEFINED_PERPLEXITY = math.inf


def perplexity(line_length: int, joint_probability: float) -> float:
    """1 / joint_probability ** (1 / line_length).

    Returns ``UNDEFINED_PERPLEXITY`` when the joint probability is zero.
    An overflowed product has no perplexity here; score it with
    ``log_perplexity`` instead.
    """
    if math.isinf(joint_probability):
        raise ValueError("joint probability overflowed, use log_perplexity")
    if joint_probability == 0.0:
        return log_perplexity(line_length, -math.inf)
    return log_perplexity(line_length, math.log(joint_probability))


def log_perplexity(line_length: int, log_probability: float) -> float:
    """Perplexity from the summed natural-log probability of a line.

    Returns ``UNDEFINED_PERPLEXITY`` when ``log_probability`` is ``-inf``.
    """
    if line_length <= 0:
        raise ValueError(f"line_length must be positive, got {line_length}")
    if log_probability == -math.inf:
        return UNDEFINED_PERPLEXITY
    return math.exp(-log_probability / line_length)


def is_undefined(value: float) -> bool:
    return math.isinf(value)


@dataclass(frozen=True)
class LineScore:
    """Evaluation result for one line."""
    line: str
    length: int
    joint_probability: float
    log_probability: float
    perplexity: float

    def __str__(self) -> str:
        return str(self.perplexity)


class PerplexityEvaluator:
    """Scores lines of text under a fitted unigram or bigram model.

    The joint probability is a plain float product and may overflow or
    underflow on long lines; perplexity is taken from the summed log
    probabilities, so it stays finite unless a token or transition is
    missing from the model.
    """

    def __init__(self, model: Union[TokenCounter, TransitionGraph]):
        if not isinstance(model, (TokenCounter, TransitionGraph)):
            raise TypeError(f"unsupported model type {type(model).__name__}")
        self.model = model

    def joint_probability(self, line: str) -> float:
        return self._joint(tokenize(line))[0]

    def log_probability(self, line: str) -> float:
        """Summed natural-log probability, ``-inf`` for an unseen token or transition."""
        return self._joint(tokenize(line))[1]

    def _joint(self, tokens: List[str]) -> Tuple[float, float]:
        if isinstance(self.model, TransitionGraph):
            return self._bigram_joint(tokens)
        return self._unigram_joint(tokens)

    def _unigram_joint(self, tokens: List[str]) -> Tuple[float, float]:
        prob, logsum = 1.0, 0.0
        for token in tokens:
            if token not in self.model:
                return 0.0, -math.inf
            p = self.model.probability(token)
            prob *= p
            logsum += math.log(p)
        return prob, logsum

    def _bigram_joint(self, tokens: List[str]) -> Tuple[float, float]:
        prob, logsum = 1.0, 0.0
        node = self.model.node(START_SYMBOL)
        for token in tokens:
            if not node.is_successor(token):
                return 0.0, -math.inf
            p = node.probability_of(token)
            prob *= p
            logsum += math.log(p)
            node = self.model.node(token)
        return prob, logsum

    def score(self, line: str) -> LineScore:
        tokens = tokenize(line)
        joint, logsum = self._joint(tokens)
        score = LineScore(line, len(tokens), joint, logsum,
                          log_perplexity(len(tokens), logsum))
        if logsum == -math.inf:
            logger.debug(f"Zero probability line: {line[:60]!r}")
        return score

    def evaluate(self, lines: Iterable[str]) -> List[LineScore]:
        scores = [self.score(line) for line in lines]
        defined = [s.perplexity for s in scores if not is_undefined(s.perplexity)]
        if defined:
            logger.info(
                f"Scored {len(scores)} lines, {len(scores) - len(defined)} "
                f"undefined, mean perplexity {sum(defined) / len(defined):.4f}"
            )
        else:
            logger.info(f"Scored {len(scores)} lines, all undefined")
        return scores
