from __future__ import annotations

import attr
from typing_extensions import override

from intset.exc import InvalidArgumentError
from intset.utils import LoggerWithTrace
from intset.utils.array import FixedArray

logger: LoggerWithTrace = LoggerWithTrace.get(__name__)

#: The capacity used when none is given to :class:`.IntSet`.
DEFAULT_CAPACITY = 5

#: How much the backing array is multiplied by when it runs out of room.
GROWTH_FACTOR = 2


def _check_value(value: object) -> None:
    # bool is an int subclass, but True and 1 would silently collide
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"IntSet only holds integers, not {type(value).__name__}")


@attr.s(frozen=True, slots=True)
class SetStatistics:
    """
    A point-in-time snapshot of an :class:`.IntSet`'s storage.
    """

    #: The number of live elements.
    size: int = attr.ib()

    #: The length of the backing array.
    capacity: int = attr.ib()

    #: The number of times the backing array has been reallocated.
    grow_count: int = attr.ib()


class IntSet:
    """
    An unordered set of unique integers stored in a :class:`.FixedArray`.

    Lookups are a linear scan. Inserts are amortised O(1) because the backing array doubles in
    size whenever it fills up, and removals move the last live element into the freed slot
    instead of shifting everything after it down.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        """
        :param capacity: The initial length of the backing array. It may grow, but never shrinks.
        """

        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity <= 0:
            raise InvalidArgumentError(capacity)

        self._storage = FixedArray(capacity)
        self._count = 0
        self._grow_count = 0

    @property
    def capacity(self) -> int:
        """
        Returns the current length of the backing array.
        """

        return len(self._storage)

    def is_empty(self) -> bool:
        """
        Returns True if this set has no elements.
        """

        return self._count == 0

    def size(self) -> int:
        """
        Returns the number of elements in this set.
        """

        return self._count

    def statistics(self) -> SetStatistics:
        """
        Returns a snapshot of this set's size, capacity, and growth history.
        """

        return SetStatistics(
            size=self._count, capacity=self.capacity, grow_count=self._grow_count
        )

    def _index_of(self, value: int) -> int | None:
        for idx in range(0, self._count):
            if self._storage[idx] == value:
                return idx

        return None

    def _grow(self) -> None:
        old_capacity = len(self._storage)
        larger = FixedArray(old_capacity * GROWTH_FACTOR)

        for idx in range(0, self._count):
            larger[idx] = self._storage[idx]

        self._storage = larger
        self._grow_count += 1
        logger.debug(f"Grew backing array from {old_capacity} to {len(larger)} slots")

    def contains(self, value: int) -> bool:
        """
        Checks if ``value`` is in this set.
        """

        _check_value(value)
        return self._index_of(value) is not None

    def add(self, value: int) -> None:
        """
        Adds ``value`` to this set. Adding a value that is already present does nothing.
        """

        if self.contains(value):
            return

        if self._count == len(self._storage):
            self._grow()

        self._storage[self._count] = value
        logger.trace(f"Added {value} at slot {self._count}")
        self._count += 1

    def remove(self, value: int) -> None:
        """
        Removes ``value`` from this set. Removing a value that isn't present does nothing.

        The last element is moved into the removed element's slot, so the internal layout changes.
        """

        _check_value(value)
        idx = self._index_of(value)
        if idx is None:
            return

        last = self._count - 1
        self._storage[idx] = self._storage[last]
        self._storage[last] = None
        self._count = last
        logger.trace(f"Removed {value} from slot {idx}, moved slot {last} into its place")

    def __len__(self) -> int:
        return self._count

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int) or isinstance(value, bool):
            return False

        return self._index_of(value) is not None

    @override
    def __repr__(self) -> str:
        return f"IntSet(size={self._count}, capacity={self.capacity})"
