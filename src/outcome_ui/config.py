"""Optional YAML configuration for the outcome demo, validated against a JSON schema."""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import json, logging

import yaml
from jsonschema import Draft202012Validator  # type: ignore
from outcome_ui.errors import Ok, Err, Attempt, AppError, ErrorKind

LOG_CONFIG = logging.getLogger("outcome.config")

PROJECT_MARKER = ".outcome-ui-project"
SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "config.schema.json"


@dataclass(frozen=True)
class UIConfig:
    window_title: str = "Outcome Demo"
    toast_timeout_ms: int = 4000
    demo_delay_ms: int = 1000
    log_level: str = "INFO"


def find_project_root(start: Path) -> Path:
    """
    Walk upwards from `start` to locate the project root. Prefer a directory
    that contains the marker file `.outcome-ui-project`; fall back to a
    directory that contains a `config` folder with a `config.yaml`.
    """
    for p in [start] + list(start.parents):
        if (p / PROJECT_MARKER).exists():
            return p
        if (p / "config" / "config.yaml").is_file():
            return p
    return start


def _read_yaml(cfg_path: Path) -> Attempt[dict, AppError]:
    try:
        with cfg_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as ex:
        return Err(AppError(ErrorKind.CONFIG, f"Failed to read config: {cfg_path}", str(ex)))
    if data is None:
        return Ok({})
    if not isinstance(data, dict):
        return Err(AppError(ErrorKind.CONFIG, f"Config root must be a mapping: {cfg_path}"))
    return Ok(data)


def _validate(data: dict, cfg_path: Path) -> Optional[AppError]:
    schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    Draft202012Validator.check_schema(schema)
    validator = Draft202012Validator(schema)
    problems = sorted(validator.iter_errors(data), key=lambda e: list(e.absolute_path))
    if not problems:
        return None
    detail = "; ".join(
        f"{'.'.join(str(p) for p in e.absolute_path) or '<root>'}: {e.message}"
        for e in problems
    )
    return AppError(ErrorKind.CONFIG, f"Invalid config: {cfg_path}", detail)


def load_config(project_root: Path | None = None) -> Attempt[UIConfig, AppError]:
    """Load `<project_root>/config/config.yaml`; a missing file yields the defaults."""
    if project_root is None:
        project_root = find_project_root(Path.cwd())
    cfg_path = project_root / "config" / "config.yaml"
    if not cfg_path.exists():
        LOG_CONFIG.debug("No config at %s, using defaults", cfg_path)
        return Ok(UIConfig())

    read = _read_yaml(cfg_path)
    if isinstance(read, Err):
        return read
    data = read.value

    problem = _validate(data, cfg_path)
    if problem is not None:
        return Err(problem)

    ui = data.get("ui") or {}
    demo = data.get("demo") or {}
    logging_cfg = data.get("logging") or {}
    defaults = UIConfig()
    cfg = UIConfig(
        window_title=ui.get("window_title", defaults.window_title),
        toast_timeout_ms=ui.get("toast_timeout_ms", defaults.toast_timeout_ms),
        demo_delay_ms=demo.get("delay_ms", defaults.demo_delay_ms),
        log_level=logging_cfg.get("level", defaults.log_level),
    )
    LOG_CONFIG.info("Loaded config from %s", cfg_path)
    return Ok(cfg)
