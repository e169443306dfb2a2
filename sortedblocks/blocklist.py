"""A sorted collection stored as a list of bounded, sorted blocks."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import chain
from typing import Any

from sortedblocks.bsearch import Comparator, binary_search


class BlockList:
    """Sorted items kept in blocks of fewer than ``block_element_limit`` items.

    A block that fills up is split in half; after a removal a block is merged
    into a neighbour when together they hold fewer than half the limit.
    Items that compare equal under ``cmp`` are stored once.
    """

    def __init__(self, block_element_limit: int, cmp: Comparator) -> None:
        if block_element_limit < 2 or block_element_limit % 2 != 0:
            raise ValueError("block_element_limit must be an even number of at least 2")
        self.block_element_limit = block_element_limit
        self.cmp = cmp
        self._blocks: list[list[Any]] = []
        self._count = 0

    def _put_order(self, index: int, item: Any) -> int:
        """Locate the block that ``item`` belongs in, or would be inserted into."""
        block = self._blocks[index]
        limit = self.block_element_limit
        is_first = index == 0
        is_last = index == len(self._blocks) - 1
        not_full = len(block) < limit
        low = block[0]
        high = block[-1]
        if not_full and not is_last and self._blocks[index + 1]:
            high = self._blocks[index + 1][0]
        if self.cmp(item, high) >= 0:
            return 0 if not_full and is_last else -1
        if self.cmp(item, low) < 0:
            return 0 if not_full and is_first else 1
        return 0

    def _get_order(self, index: int, item: Any) -> int:
        """Locate the block whose range holds ``item``."""
        block = self._blocks[index]
        if self.cmp(item, block[-1]) > 0:
            return -1
        if self.cmp(item, block[0]) < 0:
            return 1
        return 0

    def _find_block(self, item: Any, order: Comparator) -> int:
        return binary_search(range(len(self._blocks)), item, order)

    def put(self, item: Any) -> None:
        """Insert ``item``, or replace the stored item equal to it."""
        lp = self._find_block(item, self._put_order)
        if lp < 0:
            lp = -lp - 1
            if lp not in (0, len(self._blocks)):
                raise RuntimeError("block layout is inconsistent")
            self._blocks.insert(lp, [item])
            self._count += 1
            return

        block = self._blocks[lp]
        pos = binary_search(block, item, self.cmp)
        if pos >= 0:
            block[pos] = item
            return
        block.insert(-pos - 1, item)
        self._count += 1

        if len(block) == self.block_element_limit:
            half = self.block_element_limit // 2
            self._blocks.insert(lp + 1, block[half:])
            del block[half:]

    def get_pos(self, key: Any) -> int:
        """Return the overall position of ``key``, or ``-(insertion_point + 1)``."""
        lp = self._find_block(key, self._put_order)
        if lp < 0:
            lp = -lp - 1
            if lp == 0:
                return -1
            if lp == len(self._blocks):
                return -self._count - 1
            raise RuntimeError("block layout is inconsistent")

        offset = sum(len(block) for block in self._blocks[:lp])
        pos = binary_search(self._blocks[lp], key, self.cmp)
        if pos < 0:
            return -(offset + (-pos - 1)) - 1
        return offset + pos

    def get(self, key: Any) -> Any | None:
        """Return the stored item equal to ``key``, or ``None``."""
        lp = self._find_block(key, self._get_order)
        if lp < 0:
            return None
        block = self._blocks[lp]
        pos = binary_search(block, key, self.cmp)
        return block[pos] if pos >= 0 else None

    def _merge(self, left: int, right: int) -> bool:
        first, second = self._blocks[left], self._blocks[right]
        if len(first) + len(second) < self.block_element_limit // 2:
            first.extend(second)
            del self._blocks[right]
            return True
        return False

    def remove(self, key: Any) -> Any:
        """Remove and return the stored item equal to ``key``."""
        lp = self._find_block(key, self._get_order)
        if lp < 0:
            raise KeyError(key)
        block = self._blocks[lp]
        pos = binary_search(block, key, self.cmp)
        if pos < 0:
            raise KeyError(key)
        removed = block.pop(pos)
        self._count -= 1

        if not block:
            del self._blocks[lp]
            return removed
        if lp - 1 >= 0 and self._merge(lp - 1, lp):
            return removed
        if lp + 1 < len(self._blocks):
            self._merge(lp, lp + 1)
        return removed

    def block_sizes(self) -> list[int]:
        """Return the number of items in each block, in order."""
        return [len(block) for block in self._blocks]

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        return chain.from_iterable(self._blocks)

    def __repr__(self) -> str:
        return f"BlockList(block_element_limit={self.block_element_limit}, blocks={self.block_sizes()})"