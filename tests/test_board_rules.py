"""Tests for Gobang board rules."""

import numpy as np
import pytest

from gobanguct.game import (
    AI_WIN,
    HUMAN_WIN,
    WIN_LENGTH,
    WINNER_AI,
    WINNER_HUMAN,
    Board,
    Cell,
    IllegalMoveError,
    Point,
)


def place(board, points, who):
    for r, c in points:
        board.grid[r, c] = who
    return board


class TestInitialState:
    def test_empty_board(self):
        board = Board(19, 19)
        assert board.grid.shape == (19, 19)
        assert board.grid.dtype == np.int8
        assert np.all(board.grid == 0)
        assert board.is_empty()

    def test_invalid_dimensions_raise(self):
        with pytest.raises(ValueError):
            Board(0, 19)
        with pytest.raises(ValueError):
            Board(19, -1)

    def test_from_array_copies(self):
        grid = np.zeros((5, 6), dtype=np.int8)
        board = Board.from_array(grid)
        grid[0, 0] = Cell.AI
        assert board.shape == (5, 6)
        assert board[Point(0, 0)] == Cell.EMPTY

    def test_from_array_rejects_unknown_values(self):
        with pytest.raises(ValueError):
            Board.from_array([[0, 3], [0, 0]])

    def test_center(self):
        assert Board(19, 19).center == Point(9, 9)
        assert Board(15, 15).center == Point(7, 7)


class TestLegality:
    def test_empty_cell_is_legal(self):
        assert Board(19, 19).is_legal(Point(0, 18))

    def test_occupied_cell_is_illegal(self):
        board = place(Board(19, 19), [(3, 3)], Cell.HUMAN)
        assert not board.is_legal(Point(3, 3))

    def test_out_of_bounds_is_illegal(self):
        board = Board(19, 19)
        assert not board.is_legal(Point(-1, 0))
        assert not board.is_legal(Point(0, 19))
        assert not board.is_legal(Point(19, 0))
        assert not board.is_legal(None)


class TestApply:
    def test_sets_cell(self):
        board = Board(19, 19)
        outcome = board.apply(Point(4, 5), Cell.AI)
        assert board[Point(4, 5)] == Cell.AI
        assert outcome.reward == 0.0
        assert not outcome.done
        assert outcome.winner is None

    def test_occupied_raises(self):
        board = Board(19, 19)
        board.apply(Point(4, 5), Cell.AI)
        with pytest.raises(IllegalMoveError):
            board.apply(Point(4, 5), Cell.HUMAN)

    def test_out_of_bounds_raises(self):
        board = Board(19, 19)
        with pytest.raises(IllegalMoveError):
            board.apply(Point(19, 0), Cell.HUMAN)

    def test_invalid_mover_raises(self):
        board = Board(19, 19)
        with pytest.raises(IllegalMoveError):
            board.apply(Point(1, 1), Cell.EMPTY)
        with pytest.raises(IllegalMoveError):
            board.apply(Point(1, 1), 7)
        assert board.is_empty()

    def test_illegal_move_is_value_error(self):
        assert issubclass(IllegalMoveError, ValueError)

    def test_outcome_snapshot_is_frozen(self):
        board = Board(19, 19)
        outcome = board.apply(Point(0, 0), Cell.HUMAN)
        board.apply(Point(0, 1), Cell.AI)

        assert outcome.board[0, 1] == Cell.EMPTY
        with pytest.raises(ValueError):
            outcome.board[5, 5] = Cell.AI
        with pytest.raises(TypeError):
            outcome.info["winner"] = WINNER_AI


class TestWinDetection:
    @pytest.mark.parametrize("dr, dc", [(0, 1), (1, 0), (1, 1), (1, -1)])
    def test_five_on_every_axis(self, dr, dc):
        board = Board(19, 19)
        start = (5, 10)
        stones = [(start[0] + i * dr, start[1] + i * dc) for i in range(4)]
        place(board, stones, Cell.HUMAN)

        last = Point(start[0] + 4 * dr, start[1] + 4 * dc)
        outcome = board.apply(last, Cell.HUMAN)

        assert outcome.done
        assert outcome.reward == HUMAN_WIN
        assert outcome.winner == WINNER_HUMAN
        assert board.run_length(last, dr, dc) >= WIN_LENGTH

    def test_open_four_extended_to_five(self):
        board = place(Board(19, 19), [(5, 3), (5, 4), (5, 5), (5, 6)], Cell.HUMAN)
        outcome = board.apply(Point(5, 7), Cell.HUMAN)
        assert outcome.done
        assert outcome.reward == HUMAN_WIN

    def test_ai_fills_gap(self):
        board = place(Board(19, 19), [(9, 0), (9, 1), (9, 3), (9, 4)], Cell.AI)
        outcome = board.apply(Point(9, 2), Cell.AI)
        assert outcome.done
        assert outcome.reward == AI_WIN
        assert outcome.winner == WINNER_AI

    def test_overline_counts(self):
        board = place(Board(19, 19), [(2, 2), (2, 3), (2, 4), (2, 6), (2, 7)], Cell.AI)
        assert board.apply(Point(2, 5), Cell.AI).done

    def test_four_is_not_done(self):
        board = place(Board(19, 19), [(9, 9), (9, 10), (9, 11)], Cell.AI)
        outcome = board.apply(Point(9, 12), Cell.AI)
        assert not outcome.done

    def test_mixed_line_is_not_done(self):
        board = place(Board(19, 19), [(9, 9), (9, 10), (9, 11), (9, 12)], Cell.HUMAN)
        outcome = board.apply(Point(9, 13), Cell.AI)
        assert not outcome.done

    def test_win_on_small_board_edge(self):
        board = place(Board(5, 5), [(0, 0), (1, 1), (2, 2), (3, 3)], Cell.AI)
        assert board.apply(Point(4, 4), Cell.AI).done


class TestCopyAndReset:
    def test_copy_is_independent(self):
        board = Board(19, 19)
        board.apply(Point(9, 9), Cell.AI)
        copy = board.copy()

        copy.apply(Point(9, 10), Cell.HUMAN)

        assert board[Point(9, 10)] == Cell.EMPTY
        assert copy[Point(9, 9)] == Cell.AI
        assert not np.shares_memory(board.grid, copy.grid)

    def test_equality_by_value(self):
        board = Board(7, 7)
        board.apply(Point(3, 3), Cell.AI)
        assert board == board.copy()
        other = board.copy()
        other.apply(Point(0, 0), Cell.HUMAN)
        assert board != other

    def test_reset(self):
        board = Board(9, 11)
        board.apply(Point(3, 3), Cell.AI)
        board.reset()
        assert board.is_empty()
        assert board.shape == (9, 11)


class TestCandidateMoves:
    def test_empty_board_has_none(self):
        assert Board(19, 19).candidate_moves() == set()

    def test_single_center_stone(self):
        board = Board(19, 19)
        board.apply(Point(9, 9), Cell.AI)
        expected = {
            Point(9 + dr, 9 + dc)
            for dr in (-1, 0, 1)
            for dc in (-1, 0, 1)
            if (dr, dc) != (0, 0)
        }
        assert board.candidate_moves() == expected

    def test_corner_stone(self):
        board = Board(19, 19)
        board.apply(Point(0, 0), Cell.HUMAN)
        assert board.candidate_moves() == {Point(0, 1), Point(1, 0), Point(1, 1)}

    def test_excludes_occupied_cells(self):
        board = Board(19, 19)
        board.apply(Point(9, 9), Cell.AI)
        board.apply(Point(9, 10), Cell.HUMAN)
        candidates = board.candidate_moves()

        assert Point(9, 9) not in candidates
        assert Point(9, 10) not in candidates
        assert len(candidates) == 10
        assert all(board.is_legal(p) for p in candidates)

    def test_full_board_has_none(self):
        board = Board.from_array([[1, 2], [2, 1]])
        assert board.is_full()
        assert board.candidate_moves() == set()
