"""Probability records and output sampling."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import torch


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProbabilityRecord:
    """Estimated probability of a token, optionally given its predecessor."""
    predecessor: Optional[str]
    token: str
    probability: float

    def __str__(self) -> str:
        if self.predecessor is None:
            return f"P({self.token}) = {self.probability}"
        return f"P({self.token}|{self.predecessor}) = {self.probability}"


class ProbabilityEstimator:
    """Turns a fitted model into printable probability records."""

    def __init__(self, generator: Optional[torch.Generator] = None):
        """
        Args:
            generator: Random source for sampling; seed it for
                reproducible output
        """
        self.generator = generator

    @classmethod
    def seeded(cls, seed: Optional[int] = None) -> 'ProbabilityEstimator':
        generator = torch.Generator()
        if seed is None:
            generator.seed()
        else:
            generator.manual_seed(seed)
        return cls(generator)

    def records(self, model) -> List[ProbabilityRecord]:
        """All records of the model in its deterministic base order."""
        return list(model.probability_records())

    def sample(self, model, limit: int) -> List[ProbabilityRecord]:
        """Up to ``limit`` distinct records drawn uniformly at random."""
        return sample_records(self.records(model), limit, self.generator)


def sample_records(
    records: Sequence[ProbabilityRecord],
    limit: int,
    generator: Optional[torch.Generator] = None,
) -> List[ProbabilityRecord]:
    """Sample without replacement.

    Returns every record, shuffled, when fewer than ``limit`` exist.
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    if not records:
        return []
    order = torch.randperm(len(records), generator=generator)[:limit]
    if len(records) < limit:
        logger.info(f"Only {len(records)} records available, "
                    f"writing all instead of {limit}")
    return [records[i] for i in order.tolist()]
