"""Tests for adjacent-swap reordering and answer helpers."""

import pytest

from app.domain.ordering import Direction, move_adjacent, neighbor_index
from app.domain.questions import (
    DEFAULT_QUESTIONS,
    NO_ANSWER_PLACEHOLDER,
    answer_at,
    fit_answers,
    optional_answer,
)

pytestmark = pytest.mark.unit


class TestMoveAdjacent:
    def test_move_up_swaps_with_previous(self):
        assert move_adjacent(["a", "b", "c"], 1, Direction.UP) == ["b", "a", "c"]

    def test_move_down_swaps_with_next(self):
        assert move_adjacent(["a", "b", "c"], 1, Direction.DOWN) == ["a", "c", "b"]

    def test_first_up_is_noop(self):
        assert move_adjacent(["a", "b", "c"], 0, Direction.UP) == ["a", "b", "c"]

    def test_last_down_is_noop(self):
        assert move_adjacent(["a", "b", "c"], 2, Direction.DOWN) == ["a", "b", "c"]

    def test_returns_new_list(self):
        items = ["a", "b"]
        moved = move_adjacent(items, 0, Direction.DOWN)
        assert moved == ["b", "a"]
        assert items == ["a", "b"]

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_out_of_range_index_is_noop(self, index):
        assert neighbor_index(index, Direction.UP, 3) is None
        assert move_adjacent(["a", "b", "c"], index, Direction.DOWN) == ["a", "b", "c"]

    def test_direction_parses_from_string(self):
        assert Direction("up") is Direction.UP


class TestAnswerHelpers:
    def test_default_questions_never_empty(self):
        assert len(DEFAULT_QUESTIONS) == 2

    def test_answer_at_strips(self):
        assert answer_at(["  GPT  "], 0) == "GPT"

    def test_answer_at_placeholder_for_missing_or_blank(self):
        assert answer_at(["   "], 0) == NO_ANSWER_PLACEHOLDER
        assert answer_at([], 3) == NO_ANSWER_PLACEHOLDER

    def test_optional_answer_none_for_missing(self):
        assert optional_answer(["a"], 1) is None
        assert optional_answer(["a", "b"], 1) == "b"

    def test_fit_answers_pads_short_lists(self):
        assert fit_answers(["one"], 3) == ("one", NO_ANSWER_PLACEHOLDER, NO_ANSWER_PLACEHOLDER)

    def test_fit_answers_truncates_long_lists(self):
        assert fit_answers(["a", "b", "c"], 2) == ("a", "b")
