from hexnav.hexgrid import HexCoordinate
from hexnav.pathfinding import has_valid_path
from hexnav.tiles import Terrain
from scenarios.simple_scenario import BOAT_START, build_map, build_session


def test_default_scenario(monkeypatch):
    monkeypatch.delenv("HEXNAV_MAP_PATH", raising=False)
    session = build_session(hex_size=1.0, seed=0)

    assert session.grid.tile_count() == 80
    assert session.boat.current_hex == BOAT_START
    assert session.boat.has_valid_position()
    # the outer ring of the default map is open water
    assert has_valid_path(session.grid, BOAT_START, HexCoordinate.from_offset(9, 7))


def test_scenario_obstacles_only_on_land_and_seeded(monkeypatch):
    monkeypatch.delenv("HEXNAV_MAP_PATH", raising=False)
    a = build_map(hex_size=1.0, seed=5)
    b = build_map(hex_size=1.0, seed=5)

    for coord, tile in a.tiles.items():
        if tile.obstacle:
            assert tile.terrain is Terrain.TERRAIN
        assert b.get_tile(coord).obstacle == tile.obstacle


def test_scenario_reads_map_path(monkeypatch, tmp_path):
    p = tmp_path / "bay.txt"
    p.write_text("0 0 0\n0 1 0\n", encoding="utf-8")
    monkeypatch.setenv("HEXNAV_MAP_PATH", str(p))
    monkeypatch.setenv("HEXNAV_HEX_SIZE", "2.0")

    grid = build_map()
    assert grid.tile_count() == 6
    assert grid.get_hex_size() == 2.0


def test_explicit_map_text_wins(monkeypatch):
    monkeypatch.setenv("HEXNAV_MAP_PATH", "/does/not/exist.txt")
    grid = build_map("0 0\n", hex_size=1.0)
    assert grid.tile_count() == 2
