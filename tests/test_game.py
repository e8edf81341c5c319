import pytest

from solong.game import KEY_BINDINGS, KEY_ESCAPE, Direction, Game

SAMPLE = [
    "111111",
    "1PEC01",
    "111111",
]

OPEN_MAP = [
    "1111111",
    "1C000E1",
    "1000001",
    "100P001",
    "1000001",
    "1111111",
]


def test_player_position_matches_map():
    game = Game(SAMPLE)
    y = next(i for i, row in enumerate(SAMPLE) if "P" in row)
    assert game.player_position() == (SAMPLE[y].index("P"), y)


def test_player_position_without_player_raises():
    with pytest.raises(ValueError):
        Game(["111", "101", "111"]).player_position()


def test_initial_counts_match_map():
    game = Game(SAMPLE)
    assert game.collectibles == "".join(SAMPLE).count("C")
    assert game.exits == "".join(SAMPLE).count("E")
    assert game.rows == SAMPLE


@pytest.mark.parametrize("direction", [Direction.UP, Direction.DOWN, Direction.LEFT])
def test_move_into_wall_does_nothing(direction, capsys):
    game = Game(SAMPLE)
    assert game.move(direction) is False
    assert game.rows == SAMPLE
    assert game.moves == 0
    assert capsys.readouterr().out == ""


def test_move_onto_floor():
    rows = ["11111", "1P0C1", "10E01", "11111"]
    game = Game(rows)
    x, y = game.player_position()
    assert game.move(Direction.DOWN) is True
    assert game.player_position() == (x, y + 1)
    assert game.tile(x, y) == "0"
    assert game.moves == 1


def test_collecting_lowers_count():
    rows = ["11111", "1PC01", "10E01", "11111"]
    game = Game(rows)
    before = game.collectibles
    game.move(Direction.RIGHT)
    assert game.collectibles == before - 1
    assert "C" not in "".join(game.rows)


def test_exit_is_restored_after_stepping_off():
    game = Game(SAMPLE)
    x, y = game.player_position()
    game.move(Direction.RIGHT)
    assert game.won is False
    assert game.exits == 0
    assert game.player_position() == (x + 1, y)
    game.move(Direction.RIGHT)
    assert game.tile(x + 1, y) == "E"
    assert game.exits == 1
    assert game.collectibles == 0


def test_winning_closes_game_and_prints_moves(capsys):
    game = Game(SAMPLE)
    for direction in (Direction.RIGHT, Direction.RIGHT, Direction.LEFT):
        assert game.move(direction) is True
    assert game.won is True
    assert game.closed is True
    assert capsys.readouterr().out.split() == [str(n) for n in range(1, game.moves + 1)]
    assert game.move(Direction.RIGHT) is False


def test_handle_key_moves_and_escape_closes():
    game = Game(SAMPLE)
    start = game.player_position()
    assert game.handle_key("d") is True
    assert game.player_position() == (start[0] + 1, start[1])
    assert game.handle_key(KEY_ESCAPE) is False
    assert game.closed is True
    assert game.won is False


def test_unknown_key_is_ignored():
    game = Game(SAMPLE)
    assert game.handle_key("q") is True
    assert game.rows == SAMPLE


@pytest.mark.parametrize(
    "key, offset",
    [("w", (0, -1)), ("s", (0, 1)), ("a", (-1, 0)), ("d", (1, 0))],
)
def test_key_bindings_follow_wasd(key, offset):
    game = Game(OPEN_MAP)
    x, y = game.player_position()
    assert game.handle_key(key) is True
    assert game.player_position() == (x + offset[0], y + offset[1])
    assert (KEY_BINDINGS[key].dx, KEY_BINDINGS[key].dy) == offset
    assert game.moves == 1