"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and keeps the user's global config out of every test.
"""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of cxxclean modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("cxxclean"):
        del sys.modules[module_name]


@pytest.fixture(autouse=True)
def _isolated_global_config(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> Iterator[Path]:
    """Point the global config path at an empty directory."""
    global_path = tmp_path_factory.mktemp("global") / "config.yaml"
    monkeypatch.setattr("cxxclean.config.loader.GLOBAL_CONFIG_PATH", global_path)
    yield global_path
