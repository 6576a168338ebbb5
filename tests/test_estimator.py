import torch

from ngramlm.models.bigram import TransitionGraph
from ngramlm.models.unigram import TokenCounter
from ngramlm.utils.estimator import ProbabilityEstimator, ProbabilityRecord, sample_records


def make_records(n):
    return [ProbabilityRecord(None, f"w{i}", 1.0 / n) for i in range(n)]


def test_record_formatting():
    assert str(ProbabilityRecord(None, "the", 0.4)) == "P(the) = 0.4"
    assert str(ProbabilityRecord("the", "cat", 0.5)) == "P(cat|the) = 0.5"


def test_sample_never_exceeds_limit_or_duplicates():
    records = make_records(250)
    sample = sample_records(records, 100, torch.Generator().manual_seed(0))
    assert len(sample) == 100
    assert len(set(sample)) == 100
    assert set(sample) <= set(records)


def test_sample_returns_everything_when_short():
    records = make_records(7)
    sample = sample_records(records, 100, torch.Generator().manual_seed(0))
    assert sorted(r.token for r in sample) == sorted(r.token for r in records)


def test_sample_is_reproducible_with_seed():
    model = TransitionGraph.from_text("a b c a b d a c " * 20)
    first = ProbabilityEstimator.seeded(42).sample(model, 5)
    second = ProbabilityEstimator.seeded(42).sample(model, 5)
    assert first == second


def test_records_keep_model_order():
    model = TokenCounter.from_text("b a b")
    records = ProbabilityEstimator().records(model)
    assert [r.token for r in records] == ["b", "a"]


def test_empty_records():
    assert sample_records([], 10) == []
