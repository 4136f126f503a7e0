"""Tests for CliqueCover/scoring/cover_scoring.py"""

import numpy as np

from CliqueCover.scoring.cover_scoring import (
    CoverScoreCalculator,
    is_clique,
    is_independent_set,
    is_maximal_clique,
    is_vertex_cover,
)
from CliqueCover.solver.clique_solver import find_maximal_cliques
from CliqueCover.solver.independent_set import maximum_independent_set
from CliqueCover.solver.vertex_cover import vertex_cover_approx, vertex_cover_exact_via_mis


class TestPredicates:
    def test_is_clique(self, k4, four_cycle):
        assert is_clique(k4, [0, 1, 2, 3])
        assert is_clique(four_cycle, [0, 1])
        assert is_clique(four_cycle, [2])
        assert not is_clique(four_cycle, [0, 2])

    def test_is_clique_rejects_bad_members(self, k4):
        assert not is_clique(k4, [0, 0])
        assert not is_clique(k4, [0, 4])
        assert not is_clique(k4, [])

    def test_empty_clique_on_no_vertices(self, no_vertices):
        assert is_clique(no_vertices, [])
        assert is_maximal_clique(no_vertices, [])

    def test_is_maximal_clique(self, k4, four_cycle):
        assert is_maximal_clique(k4, [0, 1, 2, 3])
        assert not is_maximal_clique(k4, [0, 1, 2])
        assert is_maximal_clique(four_cycle, [1, 2])
        assert not is_maximal_clique(four_cycle, [1])

    def test_maximal_cliques_pass(self, random_graphs):
        for g in random_graphs:
            for clique in find_maximal_cliques(g):
                assert is_maximal_clique(g, clique)

    def test_is_independent_set(self, four_cycle, empty5):
        assert is_independent_set(four_cycle, [0, 2])
        assert not is_independent_set(four_cycle, [0, 1])
        assert is_independent_set(empty5, [0, 1, 2, 3, 4])
        assert not is_independent_set(empty5, [])

    def test_independent_sets_pass(self, random_graphs):
        for g in random_graphs:
            assert is_independent_set(g, maximum_independent_set(g))

    def test_is_vertex_cover(self, four_cycle, empty5, no_vertices):
        assert is_vertex_cover(four_cycle, [1, 3])
        assert not is_vertex_cover(four_cycle, [0, 1])
        assert not is_vertex_cover(four_cycle, [1, 3, 3])
        assert is_vertex_cover(empty5, [])
        assert is_vertex_cover(no_vertices, [])
        assert not is_vertex_cover(four_cycle, [])


class TestCoverScoreCalculator:
    def test_scores(self, four_cycle):
        exact = vertex_cover_exact_via_mis(four_cycle).to_list()
        approx = vertex_cover_approx(four_cycle).to_list()
        calculator = CoverScoreCalculator(four_cycle, [exact, approx, [0]])
        validity, rel, ratio = calculator.get_scores()
        assert validity.tolist() == [1, 1, 0]
        assert np.allclose(ratio, [1.0, 0.5, 0.0])
        assert np.allclose(rel, [1.0, 0.5, 0.0])

    def test_no_valid_responses(self, four_cycle):
        rel, ratio = CoverScoreCalculator(four_cycle, [[0], []]).optimality()
        assert np.all(rel == 0)
        assert np.all(ratio == 0)

    def test_no_responses(self, four_cycle):
        validity, rel, ratio = CoverScoreCalculator(four_cycle, []).get_scores()
        assert len(validity) == 0
        assert len(rel) == 0

    def test_empty_cover_on_edgeless_graph(self, empty5):
        rel, ratio = CoverScoreCalculator(empty5, [[], [0, 1]]).optimality()
        assert ratio[0] == 1.0
        assert ratio[1] == 0.0
