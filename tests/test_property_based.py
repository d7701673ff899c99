from typing import List

import pytest

hypothesis = pytest.importorskip("hypothesis")
from hypothesis import given, strategies as st  # noqa: E402

from tictactoe.game_logic import (  # noqa: E402
    Board, TurnController, EMPTY, MARKERS, WINNING_LINES,
    CONTINUE, WIN, TIE, NOOP, IN_PROGRESS, FINISHED,
)

indices = st.integers(min_value=-3, max_value=12)


@given(st.lists(st.tuples(indices, st.sampled_from(MARKERS)), max_size=30))
def test_board_cells_never_overwritten(writes):
    b = Board()
    for index, marker in writes:
        before = b.get()
        b.set_mark(index, marker)
        after = b.get()
        assert len(after) == 9
        for old, new in zip(before, after):
            if old != EMPTY:
                assert new == old


@given(st.lists(indices, max_size=30))
def test_reset_always_empties(moves):
    b = Board()
    for i, index in enumerate(moves):
        b.set_mark(index, MARKERS[i % 2])
    b.reset()
    assert b.get() == (EMPTY,) * 9


@given(st.lists(indices, max_size=40))
def test_session_invariants(moves: List[int]):
    game = TurnController()
    game.start_game("Ann", "Bob")
    expected = 0  # mover index we expect next
    for index in moves:
        before = game.get_board_snapshot()
        was_running = game.state == IN_PROGRESS
        result = game.play_move(index)
        after = game.get_board_snapshot()
        if result == NOOP:
            assert after == before
            continue
        assert was_running
        changed = [i for i in range(9) if before[i] != after[i]]
        assert changed == [index]
        # markers alternate X, O, X, ...
        assert after[index] == MARKERS[expected]
        if result == CONTINUE:
            expected = 1 - expected
            assert game.state == IN_PROGRESS
        elif result == WIN:
            assert game.state == FINISHED
            assert game.winner.marker == after[index]
            assert game.winning_line in WINNING_LINES
            assert index in game.winning_line
        else:
            assert result == TIE
            assert EMPTY not in after
            assert game.winning_line is None
    if game.state == FINISHED:
        frozen = game.get_board_snapshot()
        for i in range(9):
            assert game.play_move(i) == NOOP
        assert game.get_board_snapshot() == frozen
