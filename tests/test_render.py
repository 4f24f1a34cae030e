import io

import pygame
import pytest

from solong.game import Game, Outcome
from solong.gamemap import TILE_SIZE, parse_map
from solong.render import PygameRenderer, render_text

ROWS = ["11111", "1PCE1", "11111"]


def make_game():
    return Game.from_map(parse_map(ROWS), stream=io.StringIO())


def test_render_text_matches_map_rows():
    lines = render_text(make_game()).splitlines()
    assert lines[: len(ROWS)] == ROWS


def test_render_text_counters_initial():
    lines = render_text(make_game()).splitlines()
    assert lines[-2] == "Moves: 0"
    assert lines[-1] == "Fleurs restantes: 1"


def test_render_text_after_collecting():
    game = make_game()
    assert game.move_player(1, 0) == Outcome.MOVED
    text = render_text(game)
    lines = text.splitlines()
    assert "C" not in text
    assert lines[1].index("P") == game.player[0]
    assert lines[-2] == "Moves: 1"
    assert lines[-1] == "Fleurs restantes: 0"


def test_render_text_has_one_player():
    game = make_game()
    game.move_player(1, 0)
    assert render_text(game).count("P") == 1


@pytest.fixture
def renderer(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    stream = io.StringIO()
    game = make_game()
    rend = PygameRenderer(game, tmp_path, stream)
    yield rend, game, stream
    pygame.quit()


def test_window_size_follows_map(renderer):
    rend, game, _ = renderer
    assert rend.screen.get_size() == (
        game.map.width * TILE_SIZE,
        game.map.height * TILE_SIZE,
    )


def test_missing_images_are_reported(renderer):
    rend, _, stream = renderer
    rend.load_images()
    output = stream.getvalue()
    for name in ("wall", "floor", "player", "exit", "item"):
        assert f"Erreur image {name}\n" in output
    assert all(image is None for image in rend.images.values())


def test_draw_reports_flowers(renderer):
    rend, game, stream = renderer
    rend.load_images()
    rend.draw(game)
    output = stream.getvalue()
    assert "Rendering map...\n" in output
    assert "Fleur visible à : 2, 1\n" in output


def test_draw_paints_player_tile(renderer):
    rend, game, _ = renderer
    rend.load_images()
    rend.draw(game)
    px, py = game.player
    centre = (px * TILE_SIZE + TILE_SIZE // 2, py * TILE_SIZE + TILE_SIZE // 2)
    wall_centre = (TILE_SIZE // 2, TILE_SIZE // 2)
    assert rend.screen.get_at(centre) != rend.screen.get_at(wall_centre)