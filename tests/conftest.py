from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from tests._fixtures.component_tree import ComponentTree


@pytest.fixture
def component_tree(tmp_path: Path) -> ComponentTree:
    """Provide a component directory rooted at the pytest tmp_path."""
    return ComponentTree(tmp_path)


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[str], ComponentTree]:
    """Build additional named component directories for multi-account tests."""
    return lambda name: ComponentTree(tmp_path, name)
