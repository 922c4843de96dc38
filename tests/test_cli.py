import io
import logging
from pathlib import Path

from grid_pathfinder import main
from grid_pathfinder.core.coordinates import Coord
from grid_pathfinder.persistence.map_io import GridMap, save_map
from grid_pathfinder.utils import observer
from grid_pathfinder.utils.cli import commands
from grid_pathfinder.utils.cli.command_parser import parse_command


def _state_with(grid_map: GridMap) -> dict:
    state = commands.new_state()
    state["map"] = grid_map
    return state


SMALL = GridMap(4, 3, bytes([1, 1, 1, 1, 0, 1, 0, 1, 0, 1, 1, 1]), Coord(0, 0), Coord(1, 2))


def test_parse_command_basic():
    cmd = parse_command("/find 0 0 1 2")
    assert cmd is not None
    assert cmd.name == "find"
    assert cmd.args == ["0", "0", "1", "2"]


def test_parse_command_invalid():
    assert parse_command("hello") is None
    assert parse_command("/") is None


def test_parse_command_lowercases_name():
    assert parse_command("  /LOAD maps/x.yaml ").name == "load"


def test_find_uses_map_endpoints(capsys):
    state = _state_with(SMALL)
    assert commands.execute("find", [], state) == 3
    out = capsys.readouterr().out
    assert "Length: 3" in out
    assert "Path: [1, 5, 9]" in out
    assert state["last_find"] == (Coord(0, 0), Coord(1, 2))
    assert state["events"][-1] == {
        "type": "find", "start": (0, 0), "target": (1, 2), "length": 3
    }


def test_find_explicit_coordinates(capsys):
    state = _state_with(SMALL)
    assert commands.execute("find", ["0", "0", "3", "0"], state) == 3
    assert "Path: [1, 2, 3]" in capsys.readouterr().out


def test_find_reports_small_buffer(capsys):
    state = _state_with(SMALL)
    commands.execute("capacity", ["2"], state)
    assert commands.execute("find", [], state) == 3
    out = capsys.readouterr().out
    assert "does not fit" in out
    assert "Path:" not in out


def test_find_no_path(capsys):
    state = _state_with(GridMap(2, 2, bytes([1, 0, 0, 1]), Coord(0, 0), Coord(1, 1)))
    assert commands.execute("find", [], state) == -1
    assert "No path." in capsys.readouterr().out


def test_find_bad_input_is_logged(caplog):
    state = _state_with(SMALL)
    with caplog.at_level(logging.ERROR):
        assert commands.execute("find", ["0", "0", "0", "1"], state) is None
    assert "target cell" in caplog.text


def test_find_without_map_is_logged(caplog):
    with caplog.at_level(logging.ERROR):
        assert commands.execute("find", [], commands.new_state()) is None
    assert "No map loaded" in caplog.text


def test_find_records_observer_stats():
    state = _state_with(SMALL)
    commands.execute("find", [], state)
    stats = observer.search_stats()
    assert stats["count"] == 1
    assert stats["found_ratio"] == 1.0


def test_load_and_save(tmp_path: Path):
    src = tmp_path / "small.yaml"
    save_map(SMALL, src)
    state = commands.new_state()
    assert commands.execute("load", [str(src)], state) == SMALL

    dst = tmp_path / "copy.yaml"
    commands.execute("save", [str(dst)], state)
    assert dst.exists()


def test_load_missing_file_is_logged(tmp_path: Path, caplog):
    state = commands.new_state()
    with caplog.at_level(logging.ERROR):
        assert commands.execute("load", [str(tmp_path / "nope.yaml")], state) is None
    assert state["map"] is None
    assert "Error loading map" in caplog.text


def test_invalid_capacity_is_logged(caplog):
    state = commands.new_state()
    before = state["capacity"]
    with caplog.at_level(logging.ERROR):
        commands.execute("capacity", ["lots"], state)
    assert state["capacity"] == before


def test_profile_invokes_profile_searches(monkeypatch):
    called = {}

    def dummy_profile(n, callback, out_path):
        called["n"] = n
        called["length"] = callback()

    monkeypatch.setattr(commands, "profile_searches", dummy_profile)
    state = _state_with(SMALL)
    commands.execute("find", [], state)
    commands.execute("profile", ["5"], state)
    assert called == {"n": 5, "length": 3}


def test_unknown_command_is_logged(caplog):
    with caplog.at_level(logging.ERROR):
        commands.execute("jump", [], commands.new_state())
    assert "Unknown command" in caplog.text


def test_run_stops_on_quit(tmp_path: Path, capsys):
    path = tmp_path / "small.yaml"
    save_map(SMALL, path)
    script = io.StringIO(f"/load {path}\nnot a command\n/find\n/quit\n/find\n")
    state = main.run(script)
    assert state["running"] is False
    assert capsys.readouterr().out.count("Length: 3") == 1


def test_run_survives_malformed_map(tmp_path: Path, caplog):
    path = tmp_path / "bad.yaml"
    path.write_text("width: 2\nheight: 1\ncells: [1, x]\n")
    script = io.StringIO(f"/load {path}\n/quit\n")
    with caplog.at_level(logging.ERROR):
        state = main.run(script)
    assert state["running"] is False
    assert state["map"] is None
    assert "Error loading map" in caplog.text


def test_huge_capacity_allocates_at_most_the_map(capsys):
    state = _state_with(SMALL)
    commands.execute("capacity", ["10000000000"], state)
    assert commands.execute("find", [], state) == 3
    assert "Path: [1, 5, 9]" in capsys.readouterr().out


def test_negative_capacity_is_logged(caplog):
    state = _state_with(SMALL)
    commands.execute("capacity", ["-1"], state)
    with caplog.at_level(logging.ERROR):
        assert commands.execute("find", [], state) is None
    assert "output buffer size" in caplog.text


def test_main_applies_config_file(tmp_path: Path, monkeypatch):
    maps_dir = tmp_path / "my_maps"
    save_map(SMALL, maps_dir / "tiny.yaml")
    cfg_path = tmp_path / "alt.yaml"
    cfg_path.write_text(
        "search:\n"
        "  default_capacity: 7\n"
        "paths:\n"
        f"  maps_dir: {maps_dir}\n"
        f"  profile_out: {tmp_path / 'out.prof'}\n"
    )
    captured = {}
    monkeypatch.setattr(main, "run", lambda stream, state: captured.update(state) or state)

    assert main.main(["tiny.yaml", str(cfg_path)]) == 0
    assert captured["map"] == SMALL
    assert captured["capacity"] == 7
    assert captured["config"].paths.maps_dir == str(maps_dir)


def test_profile_writes_to_configured_path(tmp_path: Path, monkeypatch):
    from grid_pathfinder.config import Config, LoggingConfig, PathsConfig, SearchConfig

    out = tmp_path / "search.prof"
    cfg = Config(LoggingConfig(), SearchConfig(), PathsConfig(profile_out=str(out)))
    state = commands.new_state(cfg)
    state["map"] = SMALL
    commands.execute("find", [], state)
    commands.execute("profile", ["2"], state)
    assert out.exists()
