from pathlib import Path

import pytest
import yaml

from lobiu_sala import settings as settings_module
from lobiu_sala.errors import SettingsError
from lobiu_sala.game import GameLoop
from lobiu_sala.settings import Settings


@pytest.fixture(autouse=True)
def _isolated_user_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings_module, "default_settings_path", lambda: tmp_path / "nowhere" / "settings.yaml")


def test_packaged_defaults():
    s = Settings.load()
    assert (s.grid.rows, s.grid.cols) == (10, 10)
    assert (s.grid.item_count, s.grid.enemy_count) == (5, 8)
    assert s.grid.seed is None
    assert s.messages.capacity == 6
    assert s.messages.lifetime == pytest.approx(2.5)
    assert s.display.reveal_enemies is False
    assert s.controls.mapping["up"] == ["W", "UP"]


def test_user_file_overlays_defaults(tmp_path: Path):
    path = tmp_path / "user.yaml"
    path.write_text(
        "grid:\n  rows: 12\n  seed: 99\ndisplay:\n  reveal_enemies: true\n",
        encoding="utf-8",
    )

    s = Settings.load(user_path=path)

    assert s.grid.rows == 12
    assert s.grid.cols == 10
    assert s.grid.seed == 99
    assert s.display.reveal_enemies is True
    assert s.controls.mapping["quit"] == ["Q", "ESCAPE"]


def test_missing_user_file_warns(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    caplog.set_level("WARNING")
    s = Settings.load(user_path=tmp_path / "missing.yaml")
    assert s.grid.rows == 10
    assert "not found" in caplog.text


def test_unknown_key_raises(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("grid:\n  width: 3\n", encoding="utf-8")
    with pytest.raises(SettingsError):
        Settings.load(user_path=path)


def test_null_key_mapping_falls_back_to_defaults(tmp_path: Path):
    path = tmp_path / "controls.yaml"
    path.write_text("controls:\n  mapping: null\n", encoding="utf-8")

    s = Settings.load(user_path=path)

    assert s.controls.mapping == {}


def test_non_list_key_binding_raises(tmp_path: Path):
    path = tmp_path / "controls.yaml"
    path.write_text("controls:\n  mapping:\n    up: 5\n", encoding="utf-8")
    with pytest.raises(SettingsError):
        Settings.load(user_path=path)


def test_malformed_yaml_raises(tmp_path: Path):
    path = tmp_path / "broken.yaml"
    path.write_text("grid: [1, 2\n", encoding="utf-8")
    with pytest.raises(SettingsError):
        Settings.load(user_path=path)


def test_save_writes_loadable_yaml(tmp_path: Path):
    s = Settings.load()
    s.grid.seed = 5
    s.messages.capacity = 3
    out = tmp_path / "cfg" / "settings.yaml"

    s.save(out)

    assert yaml.safe_load(out.read_text(encoding="utf-8"))["grid"]["seed"] == 5
    again = Settings.load(user_path=out)
    assert again.grid.seed == 5
    assert again.messages.capacity == 3


def test_loop_from_settings(clock):
    s = Settings.load()
    s.grid.seed = 42
    s.grid.rows = 8
    s.messages.capacity = 2

    loop = GameLoop.from_settings(s, clock=clock)

    assert loop.state.grid.rows == 8
    assert loop.state.messages.capacity == 2
    assert loop.state.player.position == (0, 0)
