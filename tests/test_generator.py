from __future__ import annotations

import dataclasses

import pytest

from otpgen import Algorithm, Counter, Generator, InvalidGenerator, InvalidTime, Timer

from .conftest import RFC_SECRET_SHA1


def test_generator_rejects_invalid_configuration() -> None:
    with pytest.raises(InvalidGenerator):
        Generator(Counter(0), RFC_SECRET_SHA1, digits=5)
    with pytest.raises(InvalidGenerator):
        Generator(Timer(0), RFC_SECRET_SHA1)
    with pytest.raises(InvalidGenerator):
        Generator(Timer(301), RFC_SECRET_SHA1)


def test_counter_generator_password_ignores_time() -> None:
    generator = Generator(Counter(1), RFC_SECRET_SHA1)
    assert generator.password_at(0) == "287082"
    assert generator.password_at(1234567890) == "287082"


def test_timer_generator_password_at() -> None:
    generator = Generator(Timer(30), RFC_SECRET_SHA1, Algorithm.SHA1, 8)
    assert generator.counter_at(59) == 1
    assert generator.password_at(59) == "94287082"
    assert generator.password_at(1111111109) == "07081804"


def test_timer_generator_rejects_negative_time() -> None:
    generator = Generator(Timer(30), RFC_SECRET_SHA1)
    with pytest.raises(InvalidTime):
        generator.password_at(-1)


def test_successor_advances_counter() -> None:
    generator = Generator(Counter(8), RFC_SECRET_SHA1)
    successor = generator.successor()
    assert successor.factor == Counter(9)
    assert successor.password_at(0) == "520489"
    # original untouched
    assert generator.factor == Counter(8)


def test_successor_of_timer_generator_is_itself() -> None:
    generator = Generator(Timer(30), RFC_SECRET_SHA1)
    assert generator.successor() is generator


def test_generator_is_immutable_and_hides_secret() -> None:
    generator = Generator(Counter(0), RFC_SECRET_SHA1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        generator.digits = 8
    assert "1234567890" not in repr(generator)
