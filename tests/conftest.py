"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local typelens package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of typelens modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("typelens"):
        del sys.modules[module_name]


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Hide user config, strip TYPELENS__ env vars, reset the default factory and package logger."""
    import os

    from typelens.config import loader
    from typelens.reflection.factory import set_default_factory

    monkeypatch.setattr(loader, "GLOBAL_CONFIG_PATH", tmp_path / "missing" / "config.yaml")

    for key in list(os.environ):
        if key.upper().startswith("TYPELENS__"):
            monkeypatch.delenv(key)
    set_default_factory(None)
    yield
    set_default_factory(None)

    package_logger = logging.getLogger("typelens")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
