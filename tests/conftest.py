import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'lexstack' and tests/ as 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from lexstack.core.config import LexstackSettings, load_settings
from lexstack.core.layers import LayerStack
from helpers.cache_utils import reset_lexstack_caches
from helpers.editor import RecordingEditor
from helpers.layers import make_layer_stack


@pytest.fixture(autouse=True)
def _reset_caches() -> None:
    """Ensure all global caches are fresh for each test."""
    reset_lexstack_caches()
    yield
    reset_lexstack_caches()


@pytest.fixture
def settings() -> LexstackSettings:
    return load_settings({"languages": {"app_name": "Koder"}})


@pytest.fixture
def layer_stack(tmp_path: Path) -> LayerStack:
    """system → user → system-nonpackaged → user-nonpackaged under tmp_path."""
    return make_layer_stack(tmp_path / "data")


@pytest.fixture
def editor() -> RecordingEditor:
    return RecordingEditor()
