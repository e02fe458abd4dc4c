from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Symbol:
    """A named atom: a variable, a builtin's name, or quoted data."""

    name: str

    def __post_init__(self):
        object.__setattr__(self, "name", sys.intern(self.name))

    def __str__(self):
        return self.name
