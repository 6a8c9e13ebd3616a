import pytest
from duelsim.battle.archetypes import Archetype
from duelsim.battle.combatant import Combatant
from duelsim.core.errors import InvalidArgumentError


def make(max_hp=100):
    return Combatant("Tester", max_hp, Archetype.PRECISE)


def test_starts_at_full_health():
    c = make(120)
    assert c.health == 120
    assert c.max_health == 120
    assert c.is_fresh()
    assert not c.is_defeated()


@pytest.mark.parametrize("bad", [0, -5, 2.5, "100", True])
def test_rejects_non_positive_or_non_int_max_health(bad):
    with pytest.raises(InvalidArgumentError):
        Combatant("Bad", bad, Archetype.HEAVY)


def test_damage_saturates_at_zero():
    c = make(50)
    c.take_damage(80)
    assert c.health == 0
    assert c.is_defeated()


def test_heal_saturates_at_max():
    c = make(50)
    c.take_damage(10)
    c.heal(999)
    assert c.health == 50


def test_zero_amounts_are_noops():
    c = make(40)
    c.take_damage(15)
    c.take_damage(0)
    c.heal(0)
    assert c.health == 25


def test_negative_amounts_do_not_raise_or_change_health():
    c = make(40)
    c.take_damage(-10)
    assert c.health == 40
    c.take_damage(5)
    c.heal(-3)
    assert c.health == 35


def test_health_stays_in_bounds_over_mixed_sequence():
    c = make(100)
    for dmg, heal in [(30, 5), (90, 0), (0, 200), (101, 1), (7, 0), (0, 0)]:
        c.take_damage(dmg)
        assert 0 <= c.health <= c.max_health
        c.heal(heal)
        assert 0 <= c.health <= c.max_health


def test_health_is_read_only():
    c = make()
    with pytest.raises(AttributeError):
        c.health = 5
    with pytest.raises(AttributeError):
        c.max_health = 5


def test_name_can_be_relabelled():
    c = make()
    c.name = "Ana (CamilleDebugger)"
    assert "Ana" in repr(c)
