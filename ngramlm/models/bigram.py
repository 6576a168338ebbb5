"""Bigram transition graph.

Every token seen in training gets a ``Node`` recording which tokens followed
it and how often. Training walks the token sequence starting from the
``<START>`` node and closes it with a transition into ``<END>``.
"""

import logging
from collections import Counter
from typing import Dict, Iterable, Iterator, List, Tuple

from ngramlm.data.corpus import tokenize
from ngramlm.errors import MissingTransitionError
from ngramlm.utils.estimator import ProbabilityRecord


logger = logging.getLogger(__name__)

START_SYMBOL = '<START>'
END_SYMBOL = '<END>'


class Node:
    """Successor counts for a single token."""

    def __init__(self, token: str):
        self.token = token
        # successor -> count, in first-observation order
        self.successor_counts: Counter = Counter()

    def observe(self, successor: str) -> None:
        self.successor_counts[successor] += 1

    def total_outgoing(self) -> int:
        return sum(self.successor_counts.values())

    def is_successor(self, token: str) -> bool:
        return token in self.successor_counts

    def successors(self) -> Iterable[Tuple[str, int]]:
        return self.successor_counts.items()

    def probability_of(self, successor: str) -> float:
        """P(successor | self.token).

        Raises:
            MissingTransitionError: if ``successor`` never followed this token
        """
        if successor not in self.successor_counts:
            raise MissingTransitionError(self.token, successor)
        return self.successor_counts[successor] / self.total_outgoing()

    def probability_records(self) -> List[ProbabilityRecord]:
        total = self.total_outgoing()
        return [ProbabilityRecord(self.token, successor, count / total)
                for successor, count in self.successor_counts.items()]

    def describe(self) -> List[str]:
        """Human readable dump of the node and its successors."""
        lines = [f"{self.token} (total {self.total_outgoing()})"]
        for successor, count in self.successor_counts.items():
            lines.append(f"    -> {successor}: {count}")
        return lines

    def __len__(self) -> int:
        return len(self.successor_counts)

    def __repr__(self) -> str:
        return f"Node({self.token!r}, {self.successor_counts!r})"


class TransitionGraph:
    """Maps each token, plus the sentinels, to its ``Node``."""

    def __init__(self):
        self.nodes: Dict[str, Node] = {START_SYMBOL: Node(START_SYMBOL)}

    @classmethod
    def from_text(cls, text: str) -> 'TransitionGraph':
        return cls().fit(tokenize(text))

    def fit(self, tokens: Iterable[str]) -> 'TransitionGraph':
        """Add one document's transitions, bounded by the sentinels.

        Raises:
            ValueError: if the document contains a sentinel token
        """
        tokens = list(tokens)
        reserved = {START_SYMBOL, END_SYMBOL}.intersection(tokens)
        if reserved:
            raise ValueError(f"reserved tokens in training text: {sorted(reserved)}")
        current = START_SYMBOL
        for token in tokens:
            self.observe(current, token)
            current = token
        self.observe(current, END_SYMBOL)
        logger.debug(f"Graph has {len(self.nodes)} nodes after fit")
        return self

    def observe(self, token: str, successor: str) -> None:
        self._get_or_create(successor)
        self._get_or_create(token).observe(successor)

    def _get_or_create(self, token: str) -> Node:
        node = self.nodes.get(token)
        if node is None:
            node = self.nodes[token] = Node(token)
        return node

    def node(self, token: str) -> Node:
        return self.nodes[token]

    def probability_records(self) -> List[ProbabilityRecord]:
        records = []
        for node in self.nodes.values():
            records.extend(node.probability_records())
        return records

    def __contains__(self, token: str) -> bool:
        return token in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes.values())
