import pytest

from petbox.cli import handle_key, main
from petbox.constants import (
    HUNGER_DECREASE_BIG,
    HUNGER_INCREASE_BIG,
    INITIAL_HAPPINESS,
    INITIAL_HEALTH,
    INITIAL_HUNGER,
)
from petbox.tamagotchi import Tamagotchi


def test_key_one_plays():
    pet = Tamagotchi("Rex")
    assert handle_key(pet, "1") is False
    assert pet.hunger == INITIAL_HUNGER + HUNGER_INCREASE_BIG
    assert pet.notifications[0].message == "Rex is playing!"


def test_key_two_feeds():
    pet = Tamagotchi("Rex", hunger=40)
    assert handle_key(pet, "2") is False
    assert pet.hunger == 40 - HUNGER_DECREASE_BIG


def test_key_three_exits():
    pet = Tamagotchi("Rex")
    assert handle_key(pet, "3") is True
    assert pet.notifications == []


@pytest.mark.parametrize("key", ["", "x", "4", "\x1b"])
def test_other_keys_are_ignored(key):
    pet = Tamagotchi("Rex")
    assert handle_key(pet, key) is False
    assert (pet.health, pet.happiness, pet.hunger) == (
        INITIAL_HEALTH,
        INITIAL_HAPPINESS,
        INITIAL_HUNGER,
    )


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "petbox" in capsys.readouterr().out


def test_unknown_argument_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2