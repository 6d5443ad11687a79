import pytest

from qbayes.logging_utils import set_verbose


@pytest.fixture(autouse=True)
def quiet_steps():
    """Keep step logging off between tests (the CLI can switch it on)."""
    set_verbose(False)
    yield
    set_verbose(False)


@pytest.fixture
def ticking_clock():
    """Deterministic store clock: a new millisecond on every call."""
    state = {"n": 0}

    def _clock() -> str:
        state["n"] += 1
        return f"2026-01-01T00:00:00.{state['n']:03d}Z" if state["n"] < 1000 else f"t{state['n']}"

    return _clock
