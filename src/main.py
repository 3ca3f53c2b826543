# --- Portable bootstrap: ensure 'src' is on sys.path and discover project root ---
from __future__ import annotations
import sys
from pathlib import Path

_CUR = Path(__file__).resolve()
_SRC_DIR = _CUR.parent                      # .../PROJECT_ROOT/src
_PROJ_ROOT = _SRC_DIR.parent                # .../PROJECT_ROOT

# Optional: verify root marker (robust in case of relocations)
if not (_PROJ_ROOT / ".outcome-ui-project").exists():
    for p in _CUR.parents:
        if (p / ".outcome-ui-project").exists():
            _PROJ_ROOT = p
            _SRC_DIR = _PROJ_ROOT / "src"
            break

if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))
# --- end bootstrap ---

from outcome_ui.app import main  # noqa: E402


if __name__ == "__main__":
    sys.exit(main(_PROJ_ROOT))
