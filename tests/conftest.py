import pytest

from debug import Debug
from enigma import Enigma

STACK = [("I", 0), ("II", 0), ("III", 0), ("Reflector B", 0)]


@pytest.fixture(autouse=True)
def quiet_debug():
    yield
    Debug().toggle_global(False)


@pytest.fixture
def machine():
    """I, II, III at A with reflector B and no plugs."""
    return Enigma.configure(STACK)
