from pathlib import Path

from outcome_ui.config import UIConfig, find_project_root, load_config
from outcome_ui.errors import Err, ErrorKind, Ok


def _write_config(root: Path, text: str) -> None:
    (root / "config").mkdir()
    (root / "config" / "config.yaml").write_text(text, encoding="utf-8")


def test_missing_file_yields_defaults(tmp_path: Path):
    res = load_config(tmp_path)
    assert isinstance(res, Ok)
    assert res.value == UIConfig()


def test_values_override_defaults(tmp_path: Path):
    _write_config(tmp_path, "ui:\n  toast_timeout_ms: 1500\ndemo:\n  delay_ms: 0\n")
    res = load_config(tmp_path)
    assert isinstance(res, Ok)
    assert res.value.toast_timeout_ms == 1500
    assert res.value.demo_delay_ms == 0
    assert res.value.window_title == "Outcome Demo"


def test_schema_violation_is_config_error(tmp_path: Path):
    _write_config(tmp_path, "ui:\n  toast_timeout_ms: -1\nlogging:\n  level: LOUD\n")
    res = load_config(tmp_path)
    assert isinstance(res, Err)
    assert res.error.kind is ErrorKind.CONFIG
    assert list(ErrorKind) == [ErrorKind.CONFIG]
    assert "toast_timeout_ms" in res.error.source
    assert "logging.level" in res.error.source


def test_non_mapping_and_broken_yaml_are_rejected(tmp_path: Path):
    _write_config(tmp_path, "- just\n- a list\n")
    assert isinstance(load_config(tmp_path), Err)
    (tmp_path / "config" / "config.yaml").write_text("ui: [unclosed\n", encoding="utf-8")
    res = load_config(tmp_path)
    assert isinstance(res, Err)
    assert res.error.kind is ErrorKind.CONFIG


def test_empty_file_is_defaults(tmp_path: Path):
    _write_config(tmp_path, "")
    res = load_config(tmp_path)
    assert isinstance(res, Ok)
    assert res.value == UIConfig()


def test_find_project_root_walks_up_to_marker(tmp_path: Path):
    (tmp_path / ".outcome-ui-project").touch()
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_project_root(nested) == tmp_path


def test_shipped_config_is_valid():
    root = Path(__file__).resolve().parents[1]
    res = load_config(root)
    assert isinstance(res, Ok)
