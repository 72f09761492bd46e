"""Sample classes shared by the test modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Color(Enum):
    RED = "red"
    GREEN = "green"


class Sensor:
    """Instance attributes, a failing read-only property, methods."""

    unit = "celsius"

    def __init__(self, reading: float) -> None:
        self.reading = reading
        self._calibration = 0.5

    @property
    def status(self) -> str:
        raise RuntimeError("sensor offline")

    def recalibrate(self) -> None:
        self._calibration = 0.0

    @staticmethod
    def supported_units() -> list[str]:
        return ["celsius", "kelvin"]


class Thermostat:
    def __init__(self) -> None:
        self._target = 20

    @property
    def target(self) -> int:
        return self._target

    @target.setter
    def target(self, value: int) -> None:
        self._target = value


@dataclass(slots=True)
class Point:
    x: int
    y: int


# User classes sharing a short name with a built-in handler's class.


@dataclass
class Task:
    title: str
    done: bool = False


class Counter:
    def __init__(self) -> None:
        self.count = 0


class Warning:  # noqa: A001
    def __init__(self, message: str) -> None:
        self.message = message
