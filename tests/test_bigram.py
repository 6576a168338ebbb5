import pytest

from ngramlm.errors import MissingTransitionError
from ngramlm.models.bigram import END_SYMBOL, START_SYMBOL, Node, TransitionGraph

TEXT = "the cat sat on the mat"


@pytest.fixture
def graph():
    return TransitionGraph.from_text(TEXT)


def test_successors_of_the(graph):
    node = graph.node("the")
    assert dict(node.successors()) == {"cat": 1, "mat": 1}
    assert node.probability_of("cat") == 0.5


def test_start_and_end_sentinels(graph):
    assert dict(graph.node(START_SYMBOL).successors()) == {"the": 1}
    assert dict(graph.node("mat").successors()) == {END_SYMBOL: 1}
    assert len(graph.node(END_SYMBOL)) == 0


def test_total_outgoing_matches_following_tokens(graph):
    tokens = TEXT.split()
    for token in set(tokens):
        followed = sum(1 for t in tokens if t == token)
        assert graph.node(token).total_outgoing() == followed


def test_probabilities_sum_to_one(graph):
    for node in graph:
        if node.total_outgoing():
            total = sum(node.probability_of(s) for s, _ in node.successors())
            assert total == pytest.approx(1.0)


def test_repeated_successor_increments_existing_pair():
    node = Node("a")
    for successor in ["b", "c", "b", "b"]:
        node.observe(successor)
    assert list(node.successors()) == [("b", 3), ("c", 1)]
    assert len(node) == 2
    assert node.total_outgoing() == 4


def test_missing_transition(graph):
    node = graph.node("cat")
    assert not node.is_successor("mat")
    with pytest.raises(MissingTransitionError):
        node.probability_of("mat")


def test_records_in_node_then_pair_order(graph):
    records = [str(r) for r in graph.probability_records()]
    assert records[:3] == [
        "P(the|<START>) = 1.0",
        "P(cat|the) = 0.5",
        "P(mat|the) = 0.5",
    ]
    assert len(records) == 7
    assert records[-1] == "P(<END>|mat) = 1.0"


def test_building_twice_gives_same_graph():
    a = TransitionGraph.from_text(TEXT)
    b = TransitionGraph.from_text(TEXT)
    assert {t: dict(n.successors()) for t, n in a.nodes.items()} == \
        {t: dict(n.successors()) for t, n in b.nodes.items()}


def test_describe_lists_successors(graph):
    assert graph.node("the").describe() == [
        "the (total 2)",
        "    -> cat: 1",
        "    -> mat: 1",
    ]


@pytest.mark.parametrize("text", ["<START> x", "x <END> y"])
def test_fit_rejects_sentinel_tokens(text):
    graph = TransitionGraph()
    with pytest.raises(ValueError):
        graph.fit(text.split())
    assert len(graph.node(START_SYMBOL)) == 0
