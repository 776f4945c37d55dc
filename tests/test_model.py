# tests/test_model.py

import dataclasses

import pytest

from model import User


def test_user_holds_name():
    assert User(name="World").name == "World"


def test_user_is_a_value_object():
    assert User(name="World") == User(name="World")
    assert User(name="World") != User(name="Moon")

    with pytest.raises(dataclasses.FrozenInstanceError):
        User(name="World").name = "Moon"
