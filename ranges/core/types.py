from enum import IntEnum
from typing import TypeVar

T = TypeVar("T")


class Ordering(IntEnum):
    """Three-way result of comparing two values or two bounds"""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> "Ordering":
        return Ordering(-self.value)
