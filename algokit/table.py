"""Search tables of (key, weight) elements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

_PER_LINE = 10


@dataclass(frozen=True)
class Element:
    """A table entry: an integer key and a weight."""

    key: int
    weight: float


def read_table(text: str, limit: int) -> list[Element]:
    """Read at most ``limit`` key/weight pairs from whitespace-separated text."""
    tokens = text.split()
    elements: list[Element] = []
    for key_token, weight_token in zip(tokens[0::2], tokens[1::2]):
        if len(elements) >= limit:
            break
        try:
            element = Element(int(key_token), float(weight_token))
        except ValueError:
            break
        elements.append(element)
    return elements


def format_element(element: Element) -> str:
    return f"({element.key:3d}, {element.weight:.1f}) "


def format_key(element: Element) -> str:
    return f"{element.key:3d} "


def format_entries(
    elements: Iterable[Element], formatter: Callable[[Element], str]
) -> str:
    """Format elements, ten to a line, ending with a newline."""
    parts = []
    for i, element in enumerate(elements):
        if i and not i % _PER_LINE:
            parts.append("\n")
        parts.append(formatter(element))
    parts.append("\n")
    return "".join(parts)