import pytest

from solong.game import Direction, Game
from solong.mapfile import MapError

CORRIDOR = ["111111", "1P0CE1", "111111"]
EXIT_FIRST = ["111111", "1PE0C1", "111111"]


def make_game(rows):
    game = Game.from_rows(rows)
    messages = []
    game.report = messages.append
    return game, messages


def test_from_rows_finds_player():
    game, _ = make_game(CORRIDOR)
    assert game.player == (1, 1)
    assert game.moves == 0
    assert game.render_text() == "\n".join(CORRIDOR)


def test_from_rows_without_player_raises():
    with pytest.raises(MapError):
        Game.from_rows(["111", "101", "111"])


def test_blocked_by_wall():
    game, messages = make_game(CORRIDOR)
    assert game.go_up() is False
    assert game.go_left() is False
    assert game.moves == 0
    assert messages == []
    assert game.rows == CORRIDOR


def test_simple_step_reports_moves():
    game, messages = make_game(CORRIDOR)
    assert game.go_right() is True
    assert game.player == (1, 2)
    assert game.rows[1] == "10PCE1"
    assert messages == ["moves : 1\n"]


def test_collect_then_win():
    game, messages = make_game(CORRIDOR)
    assert game.remaining_collectibles() == 1
    game.go_right()
    game.go_right()
    assert game.remaining_collectibles() == 0
    assert game.won is False
    assert game.go_right() is True
    assert game.won is True
    assert messages[-1] == f"moves : {game.moves}\nYou win 🥂"


def test_no_moves_after_win():
    game, _ = make_game(CORRIDOR)
    for _ in range(3):
        game.go_right()
    moves = game.moves
    assert game.go_left() is False
    assert game.moves == moves


def test_stepping_on_exit_with_collectibles_left():
    game, messages = make_game(EXIT_FIRST)
    assert game.go_right() is True
    assert game.won is False
    assert game.exit_under_player == (1, 2)
    assert game.rows[1] == "10P0C1"
    game.go_right()
    assert game.rows[1] == "10EPC1"
    assert game.exit_under_player is None
    assert len(messages) == 2


def test_return_to_exit_after_collecting_wins():
    game, _ = make_game(EXIT_FIRST)
    game.go_right()
    game.go_right()
    game.go_right()
    assert game.remaining_collectibles() == 0
    game.go_left()
    assert game.won is False
    game.go_left()
    assert game.won is True


def test_move_counter_matches_successful_moves():
    game, messages = make_game(["11111", "1P0C1", "10E01", "11111"])
    results = [
        game.go_down(),
        game.go_down(),
        game.go_up(),
        game.go_right(),
        game.move(Direction.RIGHT),
    ]
    assert game.moves == sum(results)
    assert len(messages) == game.moves


def test_cell_count_preserved_while_walking():
    rows = ["111111", "1P00C1", "100001", "1E0001", "111111"]
    game, _ = make_game(rows)
    for direction in (Direction.DOWN, Direction.RIGHT, Direction.RIGHT, Direction.UP):
        game.move(direction)
        assert sum(line.count("P") for line in game.rows) == 1
        assert [len(line) for line in game.rows] == [len(line) for line in rows]