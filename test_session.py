"""
Tests for GameSession: turn order, terminal states, reset, and the
delayed AI move.
"""

import random

import pytest

from engine.config import GameConfig
from engine.game_state import GameState, Player, Mode
from engine.scheduler import ManualScheduler
from engine.session import GameSession
from engine.win_checker import WIN_PATTERNS


X, O = Player.X, Player.O
DELAY = GameConfig.AI_THINK_DELAY_MS


def make_session(mode=Mode.TWO_PLAYER, seed=0):
    scheduler = ManualScheduler()
    session = GameSession(
        mode=mode,
        scheduler=scheduler,
        rng=random.Random(seed),
        verbose=False
    )
    return session, scheduler


def play(session, moves):
    for idx in moves:
        assert session.apply_move(idx), f"move {idx} rejected"


# ==================== TWO PLAYER ====================

def test_players_alternate():
    session, _ = make_session()
    expected = X
    
    for idx in [4, 0, 8, 2, 1, 7]:
        assert session.current_player == expected
        assert session.apply_move(idx)
        assert session.board[idx] == expected
        expected = expected.opposite()


def test_rejected_move_changes_nothing():
    session, _ = make_session()
    play(session, [4])
    before = session.state.copy()
    
    assert not session.apply_move(4)
    assert not session.apply_move(4)
    assert session.state == before
    assert session.current_player == O


def test_out_of_range_is_rejected():
    session, _ = make_session()
    before = session.state.copy()
    
    assert not session.apply_move(9)
    assert not session.apply_move(-1)
    assert session.state == before


@pytest.mark.parametrize("pattern", WIN_PATTERNS)
def test_completing_any_pattern_wins(pattern):
    session, _ = make_session()
    others = [idx for idx in range(9) if idx not in pattern]
    
    # X: pattern cells, O: two cells off the pattern
    play(session, [pattern[0], others[0], pattern[1], others[1], pattern[2]])
    
    assert session.game_over
    assert session.winner == X
    assert session.winning_combo == pattern
    assert session.current_player == X
    assert all(session.is_winning_cell(idx) for idx in pattern)
    assert not any(session.is_winning_cell(idx) for idx in others)


def test_o_can_win():
    session, _ = make_session()
    play(session, [0, 3, 1, 4, 8, 5])
    
    assert session.winner == O
    assert session.winning_combo == (3, 4, 5)
    assert session.status_text == GameConfig.STATUS_O_WINS_2P


def test_tie():
    session, _ = make_session()
    play(session, [0, 1, 2, 4, 3, 5, 7, 6, 8])
    
    assert session.game_over
    assert session.winner is None
    assert session.winning_combo is None
    assert all(cell is not None for cell in session.board)
    assert session.status_text == GameConfig.STATUS_TIE


def test_no_moves_after_game_over():
    session, _ = make_session()
    play(session, [0, 3, 1, 4, 2])
    before = session.state.copy()
    
    for idx in [5, 6, 7, 8]:
        assert not session.apply_move(idx)
    assert session.state == before
    assert not session.can_play(5)


def test_exactly_one_outcome_after_each_move():
    session, _ = make_session()
    
    for idx in [0, 1, 2, 4, 3, 5, 7, 6, 8]:
        mover = session.current_player
        play(session, [idx])
        
        continues = not session.game_over and session.current_player == mover.opposite()
        won = session.game_over and session.winner is not None and len(session.winning_combo) == 3
        tie = session.game_over and session.winner is None and None not in session.board
        assert [continues, won, tie].count(True) == 1


def test_status_text_two_player():
    session, _ = make_session()
    assert session.status_text == GameConfig.STATUS_X_TURN
    
    play(session, [4])
    assert session.status_text == GameConfig.STATUS_O_TURN
    
    play(session, [0, 3, 1, 5])
    assert session.status_text == GameConfig.STATUS_X_WINS


def test_board_is_read_only_copy():
    session, _ = make_session()
    board = session.board
    
    assert isinstance(board, tuple)
    play(session, [4])
    assert board[4] is None


# ==================== RESET / MODE ====================

def test_reset_restores_initial_state():
    session, _ = make_session()
    play(session, [0, 3, 1, 4, 2])
    
    session.reset()
    assert session.state == GameState()
    assert session.status_text == GameConfig.STATUS_X_TURN
    assert session.pending_ai_move is None


def test_reset_replaces_state_object():
    session, _ = make_session()
    old_state = session.state
    play(session, [4])
    
    session.reset()
    assert session.state is not old_state
    assert old_state.board[4] == X


def test_set_mode_resets_the_game():
    session, _ = make_session()
    play(session, [0, 4, 8])
    
    session.set_mode(Mode.VS_AI)
    assert session.mode == Mode.VS_AI
    assert session.state == GameState()


def test_set_mode_accepts_strings():
    session, _ = make_session()
    
    session.set_mode("ai")
    assert session.mode == Mode.VS_AI
    session.set_mode("2p")
    assert session.mode == Mode.TWO_PLAYER


def test_set_mode_unknown_value():
    session, _ = make_session()
    
    with pytest.raises(ValueError):
        session.set_mode("online")


def test_sessions_do_not_share_state():
    first, _ = make_session()
    second, _ = make_session()
    
    play(first, [4])
    assert second.board[4] is None


# ==================== VS AI ====================

def test_ai_move_is_scheduled_after_human_move():
    session, scheduler = make_session(Mode.VS_AI)
    play(session, [0])
    
    assert session.ai_engaged
    assert session.current_player == O
    assert session.pending_ai_move is not None
    assert session.status_text == GameConfig.STATUS_AI_THINKING
    assert scheduler.next_delay() == DELAY


def test_ai_plays_after_the_delay():
    session, scheduler = make_session(Mode.VS_AI)
    play(session, [0])
    
    scheduler.advance(DELAY - 1)
    assert session.ai_engaged
    assert session.board[4] is None
    
    scheduler.advance(1)
    assert session.board[4] == O
    assert not session.ai_engaged
    assert session.current_player == X
    assert session.pending_ai_move is None
    assert session.status_text == GameConfig.STATUS_X_TURN


def test_human_moves_rejected_while_ai_thinks():
    session, scheduler = make_session(Mode.VS_AI)
    play(session, [0])
    before = session.state.copy()
    
    assert not session.apply_move(1)
    assert not session.can_play(1)
    assert session.state == before
    
    scheduler.run_pending()
    assert session.apply_move(1)


def test_ai_blocks_then_wins():
    session, scheduler = make_session(Mode.VS_AI)
    
    play(session, [0])
    scheduler.run_pending()  # AI takes the center
    play(session, [1])
    scheduler.run_pending()  # AI blocks row 0
    assert session.board[2] == O
    
    play(session, [8])
    scheduler.run_pending()  # AI completes 2-4-6
    
    assert session.game_over
    assert session.winner == O
    assert session.winning_combo == (2, 4, 6)
    assert not session.ai_engaged
    assert session.current_player == O
    assert session.status_text == GameConfig.STATUS_O_WINS_AI


def test_no_ai_move_after_human_wins():
    session, scheduler = make_session(Mode.VS_AI)
    session.state.board[:] = [X, X, None, O, O, None, None, None, None]
    
    play(session, [2])
    assert session.winner == X
    assert not session.ai_engaged
    assert scheduler.pending_count == 0


def test_no_ai_in_two_player_mode():
    session, scheduler = make_session(Mode.TWO_PLAYER)
    play(session, [0])
    
    assert not session.ai_engaged
    assert scheduler.pending_count == 0


def test_reset_cancels_pending_ai_move():
    session, scheduler = make_session(Mode.VS_AI)
    play(session, [0])
    task = session.pending_ai_move
    
    session.reset()
    assert task.cancelled
    assert scheduler.run_pending() == 0
    assert session.state == GameState()


def test_mode_switch_cancels_pending_ai_move():
    session, scheduler = make_session(Mode.VS_AI)
    play(session, [0])
    
    session.set_mode(Mode.TWO_PLAYER)
    scheduler.advance(DELAY * 2)
    assert session.board == (None,) * 9
    assert session.current_player == X


def test_stale_callback_is_inert():
    session, scheduler = make_session(Mode.VS_AI)
    play(session, [0])
    task = session.pending_ai_move
    
    session.reset()
    play(session, [8])
    fresh = session.state.copy()
    
    # Fire the superseded callback by hand
    task.callback()
    assert session.state == fresh
    
    scheduler.run_pending()
    assert session.board[4] == O


def test_zero_delay():
    scheduler = ManualScheduler()
    session = GameSession(mode=Mode.VS_AI, scheduler=scheduler, delay_ms=0, verbose=False)
    play(session, [4])
    
    scheduler.advance(0)
    assert session.current_player == X
    assert session.board.count(O) == 1


def test_pending_ai_move_is_read_only():
    session, scheduler = make_session(Mode.VS_AI)
    play(session, [0])
    task = session.pending_ai_move
    
    scheduler.run_pending()
    assert task.done
    assert session.pending_ai_move is None
    assert session.pending_ai_move is None


def test_can_play_matches_apply_move():
    session, scheduler = make_session(Mode.VS_AI)
    assert session.can_play(0)
    assert not session.can_play(9)
    
    play(session, [0])
    assert not any(session.can_play(idx) for idx in range(9))
    
    scheduler.run_pending()
    assert not session.can_play(0)
    assert not session.can_play(4)
    assert session.can_play(8)
