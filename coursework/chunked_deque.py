"""A double-ended queue stored as a map of fixed-size blocks.

Elements live in blocks of ``Deque.BLOCK_SIZE`` slots.  Growing the block
map never moves existing blocks, so an iterator taken before the deque grew
still reads the element it pointed at.
"""

from __future__ import annotations

import copy
import operator
from typing import Any, Iterator, List

BLOCK_SIZE = 32


def _block_count(previous: int, elements: int = BLOCK_SIZE) -> int:
    """Number of blocks for a map that had ``previous`` blocks and must hold ``elements``."""
    if elements <= (previous // 2 + 1) * BLOCK_SIZE:
        return previous * 2
    return (elements // BLOCK_SIZE + 1) * 4


def _new_block() -> List[Any]:
    return [None] * BLOCK_SIZE


class Deque:
    """Double-ended queue with stable element storage and random-access iterators."""

    BLOCK_SIZE = BLOCK_SIZE

    def __init__(self, size: int = 0, value: Any = None) -> None:
        size = operator.index(size)
        if size < 0:
            raise ValueError("deque size must not be negative")
        count = _block_count(1, size)
        self._blocks: List[List[Any]] = [_new_block() for _ in range(count)]
        self._first = (count // 2) * BLOCK_SIZE
        self._size = 0
        for _ in range(size):
            self.push_back(copy.copy(value))

    # -- storage helpers -------------------------------------------------

    def _load(self, position: int) -> Any:
        return self._blocks[position // BLOCK_SIZE][position % BLOCK_SIZE]

    def _store(self, position: int, value: Any) -> None:
        self._blocks[position // BLOCK_SIZE][position % BLOCK_SIZE] = value

    def _grow(self) -> None:
        """Double the block map, keeping the old blocks in its middle half."""
        total = _block_count(len(self._blocks))
        quarter = total // 4
        head = [_new_block() for _ in range(quarter)]
        tail = [_new_block() for _ in range(total - quarter - len(self._blocks))]
        self._blocks = head + self._blocks + tail
        self._first += quarter * BLOCK_SIZE

    def _reset_if_empty(self) -> None:
        if self._size == 0:
            self._first = (len(self._blocks) // 2) * BLOCK_SIZE

    def _checked(self, index: int) -> int:
        index = operator.index(index)
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("deque index out of range")
        return self._first + index

    def _offset_of(self, position: Any) -> int:
        if isinstance(position, DequeIterator):
            if position.deque is not self or position.reverse:
                raise ValueError("iterator does not belong to this deque")
            return position.index - self._first
        return operator.index(position)

    # -- container protocol ----------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> Any:
        return self._load(self._checked(index))

    def __setitem__(self, index: int, value: Any) -> None:
        self._store(self._checked(index), value)

    def __iter__(self) -> Iterator[Any]:
        for position in range(self._first, self._first + self._size):
            yield self._load(position)

    def __reversed__(self) -> Iterator[Any]:
        for position in range(self._first + self._size - 1, self._first - 1, -1):
            yield self._load(position)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deque):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Deque({list(self)!r})"

    def at(self, index: int) -> Any:
        """Return the element at ``index``; negative indices are out of range."""
        index = operator.index(index)
        if not 0 <= index < self._size:
            raise IndexError("out_of_range")
        return self._load(self._first + index)

    def copy(self) -> "Deque":
        """Return an independent deque holding copies of the elements."""
        clone = Deque.__new__(Deque)
        clone._blocks = [_new_block() for _ in range(len(self._blocks))]
        clone._first = self._first
        clone._size = self._size
        for position in range(self._first, self._first + self._size):
            clone._store(position, copy.copy(self._load(position)))
        return clone

    # -- modifiers -------------------------------------------------------

    def push_back(self, value: Any) -> None:
        if (self._first + self._size) // BLOCK_SIZE >= len(self._blocks):
            self._grow()
        self._store(self._first + self._size, value)
        self._size += 1

    def push_front(self, value: Any) -> None:
        if self._first == 0:
            self._grow()
        self._first -= 1
        self._store(self._first, value)
        self._size += 1

    def pop_back(self) -> None:
        """Remove the last element; does nothing on an empty deque."""
        if not self._size:
            return
        self._store(self._first + self._size - 1, None)
        self._size -= 1
        self._reset_if_empty()

    def pop_front(self) -> None:
        """Remove the first element; does nothing on an empty deque."""
        if not self._size:
            return
        self._store(self._first, None)
        self._first += 1
        self._size -= 1
        self._reset_if_empty()

    def insert(self, position: Any, value: Any) -> None:
        """Insert ``value`` before ``position`` (an iterator or an index)."""
        offset = self._offset_of(position)
        if not 0 <= offset <= self._size:
            raise IndexError("insert position out of range")
        carried = value
        for index in range(offset, self._size):
            carried, self[index] = self[index], carried
        self.push_back(carried)

    def erase(self, position: Any) -> None:
        """Remove the element at ``position`` (an iterator or an index)."""
        offset = self._offset_of(position)
        if not 0 <= offset < self._size:
            raise IndexError("erase position out of range")
        for index in range(offset, self._size - 1):
            self[index] = self[index + 1]
        self.pop_back()

    # -- iterators -------------------------------------------------------

    def begin(self) -> "DequeIterator":
        return DequeIterator(self, self._first)

    def end(self) -> "DequeIterator":
        return DequeIterator(self, self._first + self._size)

    def rbegin(self) -> "DequeIterator":
        return DequeIterator(self, self._first + self._size - 1, reverse=True)

    def rend(self) -> "DequeIterator":
        return DequeIterator(self, self._first - 1, reverse=True)


class DequeIterator:
    """Random-access position in a ``Deque``; immutable and hashable."""

    def __init__(self, deque: Deque, index: int, reverse: bool = False) -> None:
        self._deque = deque
        # The block map is captured now, so growth of the deque later does
        # not change which element this iterator refers to.
        self._blocks = deque._blocks
        self._index = index
        self._reverse = reverse

    @property
    def deque(self) -> Deque:
        return self._deque

    @property
    def index(self) -> int:
        return self._index

    @property
    def reverse(self) -> bool:
        return self._reverse

    def _slot(self) -> tuple:
        block, offset = divmod(self._index, BLOCK_SIZE)
        if self._index < 0 or block >= len(self._blocks):
            raise IndexError("iterator is outside the deque storage")
        return self._blocks[block], offset

    @property
    def value(self) -> Any:
        """The element the iterator points at."""
        block, offset = self._slot()
        return block[offset]

    @value.setter
    def value(self, new_value: Any) -> None:
        block, offset = self._slot()
        block[offset] = new_value

    def _moved(self, offset: int) -> "DequeIterator":
        step = -offset if self._reverse else offset
        moved = DequeIterator(self._deque, self._index + step, self._reverse)
        moved._blocks = self._blocks
        return moved

    def __add__(self, offset: int) -> "DequeIterator":
        return self._moved(operator.index(offset))

    __radd__ = __add__

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, DequeIterator):
            return self._distance(other)
        return self._moved(-operator.index(other))

    def __iadd__(self, offset: int) -> "DequeIterator":
        return self + offset

    def __isub__(self, offset: int) -> "DequeIterator":
        return self - offset

    def _distance(self, other: "DequeIterator") -> int:
        if other._reverse != self._reverse:
            raise TypeError("cannot compare forward and reverse iterators")
        if self._reverse:
            return other._index - self._index
        return self._index - other._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DequeIterator):
            return NotImplemented
        return (
            self._deque is other._deque
            and self._reverse == other._reverse
            and self._index == other._index
        )

    def __lt__(self, other: "DequeIterator") -> bool:
        if not isinstance(other, DequeIterator):
            return NotImplemented
        return self._distance(other) < 0

    def __le__(self, other: "DequeIterator") -> bool:
        if not isinstance(other, DequeIterator):
            return NotImplemented
        return self._distance(other) <= 0

    def __gt__(self, other: "DequeIterator") -> bool:
        if not isinstance(other, DequeIterator):
            return NotImplemented
        return self._distance(other) > 0

    def __ge__(self, other: "DequeIterator") -> bool:
        if not isinstance(other, DequeIterator):
            return NotImplemented
        return self._distance(other) >= 0

    def __hash__(self) -> int:
        return hash((id(self._deque), self._index, self._reverse))

    def __repr__(self) -> str:
        kind = "reverse " if self._reverse else ""
        return f"<{kind}DequeIterator at {self._index}>"