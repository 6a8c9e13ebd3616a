import pytest


class ScriptedRandom:
    """Random source that replays a fixed draw sequence and checks each draw."""

    def __init__(self, draws):
        self.draws = list(draws)

    def _pop(self):
        assert self.draws, "scripted random source exhausted"
        return self.draws.pop(0)

    def next_int(self, low, high):
        v = self._pop()
        assert isinstance(v, int), f"expected an int draw, script had {v!r}"
        assert low <= v <= high, f"{v} outside [{low},{high}]"
        return v

    def next_unit(self):
        v = self._pop()
        assert isinstance(v, float), f"expected a unit draw, script had {v!r}"
        return v


@pytest.fixture
def scripted():
    return ScriptedRandom
