import pytest

from backrooms.app import chapter_step, init_game, level_trigger, main
from backrooms.config import NUMBER_OF_MAPS, TRIGGER
from backrooms.entities import entities_init
from backrooms.maps import map_size
from backrooms.state import Game

FIRST = ["#####", "#NT #", "#####"]
SECOND = ["#####", "#S  #", "#####"]


def make_game(*grids):
    game = Game()
    game.texture_width = 160
    game.texture_height = 120
    game.maps = [list(grid) for grid in grids]
    game.maps_sizes = [tuple(map_size(grid)) for grid in grids]
    game.level = 0
    entities_init(game)
    return game


@pytest.mark.parametrize("level", range(NUMBER_OF_MAPS))
def test_chapters_keep_running(level):
    game = make_game(FIRST, SECOND)
    assert chapter_step(game, level) is True
    assert game.level == 0


@pytest.mark.parametrize("level", [-1, NUMBER_OF_MAPS])
def test_chapter_out_of_range(level):
    game = make_game(FIRST, SECOND)
    with pytest.raises(ValueError):
        chapter_step(game, level)


def test_no_trigger_keeps_level():
    game = make_game(FIRST, SECOND)
    assert level_trigger(game) is False
    assert game.level == 0


def test_trigger_moves_to_next_level_with_state():
    game = make_game(FIRST, SECOND)
    player = game.players[0]
    player.x = 2.5
    player.y = 1.5
    player.camera_shift = 7
    player.speed = 4
    assert game.cell(2, 1) == TRIGGER
    assert level_trigger(game) is True
    assert game.level == 1
    moved = game.players[1]
    assert moved.x == player.x
    assert moved.y == player.y
    assert moved.dir_x == player.dir_x
    assert moved.dir_y == player.dir_y
    assert moved.cam_x == player.cam_x
    assert moved.camera_shift == 7
    assert moved.speed == 4


def test_trigger_on_last_level_stays():
    game = make_game(FIRST)
    game.players[0].x = 2.5
    assert level_trigger(game) is False
    assert game.level == len(game.players) - 1


def test_init_game_missing_maps(tmp_path):
    with pytest.raises(FileNotFoundError):
        init_game(tmp_path)


def test_main_reports_missing_assets(tmp_path, capsys):
    assert main(["--root", str(tmp_path)]) == 1
    assert "ERROR" in capsys.readouterr().err