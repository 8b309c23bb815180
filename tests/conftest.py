#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def call_counter():
    """Fixture returning (func, calls) where func records each call and returns value * 10."""
    calls = []

    def _func(value, state, target):
        calls.append(value)
        return value * 10

    return _func, calls


@pytest.fixture
def two_cycle() -> tuple[dict, dict]:
    """Two dicts referencing each other: a -> b -> a."""
    a = {}
    b = {"a": a}
    a["b"] = b
    return a, b
