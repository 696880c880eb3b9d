# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Entity model: measures, areas and the areas container."""

from __future__ import annotations

from typing import TypeVar, Union

from .area import ENGLISH, WELSH, Area
from .areas import Areas
from .measure import Measure

Entity = TypeVar("Entity", bound=Union[Measure, Area])


def merge(into: Entity, incoming: Entity) -> Entity:
    """Merge ``incoming`` into ``into`` (incoming wins) and return ``into``."""

    if type(into) is not type(incoming):
        raise TypeError(
            f"Cannot merge {type(incoming).__name__} into {type(into).__name__}"
        )
    if isinstance(into, Area) and into.code != incoming.code:
        raise ValueError(f"Cannot merge area {incoming.code} into area {into.code}")
    if isinstance(into, Measure) and into.codename != incoming.codename:
        raise ValueError(
            f"Cannot merge measure {incoming.codename} into measure {into.codename}"
        )
    into.merge(incoming)
    return into


def equals(a: object, b: object) -> bool:
    return type(a) is type(b) and a == b


__all__ = ["Area", "Areas", "ENGLISH", "Measure", "WELSH", "equals", "merge"]
