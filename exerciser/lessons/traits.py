"""Traits and generics: appending "Bar", licences and a generic wrapper."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Generic, TypeVar

T = TypeVar("T")


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Software that reports its licensing information."""

    def licensing_info(self) -> str:
        return "some information"


class SomeSoftware(Licensed):
    """One piece of licensed software."""


class OtherSoftware(Licensed):
    """Another piece of licensed software."""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Return True if both carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T