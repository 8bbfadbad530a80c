import pytest

from themestyle.models import Theme, Viewport
from themestyle.registry import VariableRegistry, default_registry, hash_generate


@pytest.fixture
def registry():
    """Fresh registry with a predictable length token sequence."""
    return VariableRegistry(token_factory=hash_generate(seed=500000))


@pytest.fixture
def shared_registry():
    """Module-level registry, emptied before and after the test."""
    default_registry.reset()
    yield default_registry
    default_registry.reset()


@pytest.fixture
def theme():
    return Theme(
        rem=10,
        sizes={"gutter": "2rem", "spacing": {"tight": "4px", "loose": "3rem"}},
        colors={"primary": "#2E4D37", "text": {"muted": "#6B6860"}},
        elevation=lambda level: {"shadowOpacity": 0.1 * level, "shadowRadius": f"{level * 2}px"},
    )


@pytest.fixture
def viewport():
    return Viewport(width=200, height=400)
