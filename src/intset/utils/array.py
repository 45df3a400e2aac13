from __future__ import annotations


class FixedArray:
    """
    A fixed-length array of optional integers that only supports reading and writing by index.

    Empty slots hold ``None``. There is no append, search, or delete; anything built on top of
    this has to do its own bookkeeping.
    """

    __slots__ = ("_items",)

    def __init__(self, size: int) -> None:
        if not isinstance(size, int) or isinstance(size, bool) or size < 0:
            raise ValueError(f"array size must be a non-negative integer, not {size!r}")

        self._items: list[int | None] = [None] * size

    def _check_index(self, idx: int) -> int:
        if not 0 <= idx < len(self._items):
            raise IndexError(f"index {idx} out of range (size: {len(self._items)})") from None

        return idx

    def __len__(self) -> int:
        return len(self._items)

    def __setitem__(self, key: int, value: int | None) -> None:
        self._items[self._check_index(key)] = value

    def __getitem__(self, item: int) -> int | None:
        return self._items[self._check_index(item)]
