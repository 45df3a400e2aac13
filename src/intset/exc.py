from __future__ import annotations

from typing_extensions import override

__all__ = (
    "IntSetError",
    "InvalidArgumentError",
)


class IntSetError(Exception):
    """
    Base class exception for all intset-related exceptions.
    """

    __slots__ = ()


class InvalidArgumentError(IntSetError, ValueError):
    """
    Thrown when a set is created with a capacity that isn't a positive integer.
    """

    __slots__ = ("capacity",)

    def __init__(self, capacity: object):
        #: The rejected capacity.
        self.capacity = capacity

        super().__init__(capacity)

    @override
    def __str__(self) -> str:
        return f"capacity must be a positive integer, not {self.capacity!r}"
