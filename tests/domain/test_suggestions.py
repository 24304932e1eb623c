"""Tests for the similar-neighbor and similar-non-neighbor heuristics."""

from __future__ import annotations

from bunnygraph.domain.reduction import plain_graph, reduce_graph
from bunnygraph.domain.relations import parse_relations
from bunnygraph.domain.suggestions import (
    NeighborSuggestion,
    PairSuggestion,
    suggest_similar_neighbors,
    suggest_similar_nonneighbors,
)
from bunnygraph.domain.types import Edge, MetaNode, RenderedGraph
from tests.conftest import HUB_TEXT, KITE_TEXT


def _plain(text: str) -> RenderedGraph:
    relations = parse_relations(text)
    return plain_graph(relations.nodes, relations.edges)


class TestSimilarNeighbors:
    def test_kite_ranking(self) -> None:
        result = suggest_similar_neighbors(_plain(KITE_TEXT))
        assert [s.text for s in result] == [
            "D x A (which is similar to B - Common neighbors: 1, Unique extras: 1)",
            "D x C (which is similar to B - Common neighbors: 1, Unique extras: 1)",
            "A x D (which is similar to B - Common neighbors: 0, Unique extras: 2)",
            "C x D (which is similar to B - Common neighbors: 0, Unique extras: 2)",
        ]

    def test_score_penalizes_unique_extras(self) -> None:
        result = suggest_similar_neighbors(_plain(KITE_TEXT))
        assert [s.score for s in result] == [-41, -41, -84, -84]

    def test_custom_weight(self) -> None:
        result = suggest_similar_neighbors(_plain(KITE_TEXT), weight=1)
        assert result[0].score == 0
        assert result[-1].score == -2

    def test_limit(self) -> None:
        result = suggest_similar_neighbors(_plain(KITE_TEXT), limit=2)
        assert [(s.candidate, s.target) for s in result] == [("D", "A"), ("D", "C")]

    def test_default_limit_is_ten(self) -> None:
        text = "\n".join(f"hub x leaf{i}\nleaf{i} x tip{i}" for i in range(8))
        result = suggest_similar_neighbors(_plain(text))
        assert len(result) == 10

    def test_never_proposes_self_or_pivot(self) -> None:
        text = KITE_TEXT + "D x E\nE x F\nC x F\n"
        for s in suggest_similar_neighbors(_plain(text), limit=100):
            assert s.candidate != s.target
            assert s.candidate != s.pivot

    def test_candidates_are_not_already_neighbors(self) -> None:
        graph = _plain(KITE_TEXT + "D x E\nE x F\nC x F\n")
        pairs = {frozenset((e.from_, e.to)) for e in graph.edges}
        for s in suggest_similar_neighbors(graph, limit=100):
            assert frozenset((s.candidate, s.target)) not in pairs

    def test_empty_graph(self) -> None:
        assert suggest_similar_neighbors(RenderedGraph()) == []

    def test_single_edge_has_nothing_to_suggest(self) -> None:
        assert suggest_similar_neighbors(_plain("A x B")) == []

    def test_uses_display_labels(self) -> None:
        relations = parse_relations(HUB_TEXT + "S1 x Z\n")
        graph = reduce_graph(relations.nodes, relations.edges)
        texts = [s.text for s in suggest_similar_neighbors(graph)]
        assert texts
        assert all("T2" not in t or "{T1, T2}" in t for t in texts)

    def test_same_label_nodes_share_a_key(self) -> None:
        graph = RenderedGraph(
            nodes=(
                MetaNode(id="a1", label="A"),
                MetaNode(id="a2", label="A"),
                MetaNode(id="b", label="B"),
                MetaNode(id="c", label="C"),
            ),
            edges=(Edge("a1", "b"), Edge("a2", "b"), Edge("b", "c")),
        )
        result = suggest_similar_neighbors(graph)
        # Both "A" nodes are visited, each producing the same label-level proposal.
        assert [s.text for s in result] == [
            "C x A (which is similar to B - Common neighbors: 0, Unique extras: 1)",
            "C x A (which is similar to B - Common neighbors: 0, Unique extras: 1)",
            "A x C (which is similar to B - Common neighbors: 0, Unique extras: 1)",
        ]

    def test_pure(self) -> None:
        graph = _plain(KITE_TEXT)
        first = suggest_similar_neighbors(graph)
        second = suggest_similar_neighbors(graph)
        assert first == second
        assert graph == _plain(KITE_TEXT)

    def test_to_dict(self) -> None:
        s = NeighborSuggestion("C", "A", "B", common=2, unique_extras=0, score=2)
        d = s.to_dict()
        assert d["candidate"] == "C"
        assert d["text"] == s.text


class TestSimilarNonneighbors:
    def test_kite(self) -> None:
        result = suggest_similar_nonneighbors(_plain(KITE_TEXT))
        assert [s.text for s in result] == [
            "A x D (Common: 1, Non-Common: 1)",
            "C x D (Common: 1, Non-Common: 1)",
        ]
        assert [s.score for s in result] == [41, 41]

    def test_shared_connectivity_dominates(self) -> None:
        text = "P x M1\nP x M2\nP x X1\nQ x M1\nQ x M2\nQ x X2\nR x K\nS x K\n"
        result = suggest_similar_nonneighbors(_plain(text), limit=3)
        assert [(s.first, s.second) for s in result] == [("M1", "M2"), ("P", "Q"), ("R", "S")]
        assert [(s.common, s.non_common, s.score) for s in result] == [
            (2, 0, 84),
            (2, 2, 82),
            (1, 0, 42),
        ]

    def test_never_proposes_existing_edge(self) -> None:
        graph = _plain(KITE_TEXT + "D x E\nE x F\nC x F\n")
        pairs = {frozenset((e.from_, e.to)) for e in graph.edges}
        for s in suggest_similar_nonneighbors(graph, limit=100):
            assert frozenset((s.first, s.second)) not in pairs
            assert s.first < s.second

    def test_each_pair_once(self) -> None:
        graph = _plain("A x B\nC x D\n")
        result = suggest_similar_nonneighbors(graph, limit=100)
        pairs = [(s.first, s.second) for s in result]
        assert len(pairs) == len(set(pairs)) == 4

    def test_reports_labels_of_reduced_graph(self) -> None:
        relations = parse_relations("A x B\nA x C\nD x E\n")
        graph = reduce_graph(relations.nodes, relations.edges)
        texts = [s.text for s in suggest_similar_nonneighbors(graph)]
        assert "A x {D, E} (Common: 0, Non-Common: 1)" in texts
        assert "[B,\nC] x {D, E} (Common: 0, Non-Common: 1)" in texts

    def test_complete_graph_has_no_suggestions(self) -> None:
        assert suggest_similar_nonneighbors(_plain("A x B\nB x C\nA x C\n")) == []

    def test_empty_graph(self) -> None:
        assert suggest_similar_nonneighbors(RenderedGraph()) == []

    def test_to_dict(self) -> None:
        s = PairSuggestion("A", "D", common=1, non_common=1, score=41)
        assert s.to_dict() == {
            "first": "A",
            "second": "D",
            "common": 1,
            "non_common": 1,
            "score": 41,
            "text": "A x D (Common: 1, Non-Common: 1)",
        }
