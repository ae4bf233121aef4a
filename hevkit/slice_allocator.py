"""Allocator that caches freed blocks in fixed size classes."""

from __future__ import annotations

from typing import Dict, List, Optional

from .align import align_up
from .allocator import MemoryAllocator, _check_size


class Slice(bytearray):
    """A block from a :class:`SliceAllocator`.

    ``index`` is the block's size class, or -1 for a block too large to cache.
    """

    def __init__(self, size: int, index: int) -> None:
        super().__init__(size)
        self.index = index


class SliceAllocator(MemoryAllocator):
    """Allocator that keeps freed small blocks for reuse.

    Requests are rounded up to ``align`` bytes. Blocks up to ``max_size``
    bytes are cached by size class on free; at most ``max_count`` blocks are
    kept, and when the cache is full a block of the least recently refilled
    class is dropped.
    """

    def __init__(self, align: int = 16, max_size: int = 4096, max_count: int = 1000) -> None:
        super().__init__()
        align_up(0, align)
        if max_count < 1:
            raise ValueError(f"max_count must be positive: {max_count}")
        self.align = align
        self.max_index = max_size // align
        self.max_count = max_count
        self.cached_count = 0
        self._cache: List[List[Slice]] = [[] for _ in range(self.max_index)]
        # Size classes in order of last refill; the first key is the oldest.
        self._lru: Dict[int, None] = {}

    def _classify(self, size: int) -> tuple[int, int]:
        aligned = align_up(size, self.align)
        return aligned, aligned // self.align

    def alloc(self, size: int) -> Optional[Slice]:
        """Return a block of ``size`` bytes rounded up, or None for size zero."""
        _check_size(size)
        aligned, index = self._classify(size)
        if index == 0:
            return None
        if index > self.max_index:
            return Slice(aligned, -1)

        slot = index - 1
        stack = self._cache[slot]
        if not stack:
            return Slice(aligned, slot)

        block = stack.pop()
        self.cached_count -= 1
        del self._lru[slot]
        if stack:
            self._lru[slot] = None
        return block

    def realloc(self, block: Optional[Slice], size: int) -> Optional[Slice]:
        """Resize ``block`` in place; a size of zero frees it and returns None."""
        _check_size(size)
        if block is None:
            return self.alloc(size)
        if size == 0:
            self.free(block)
            return None
        if not isinstance(block, Slice):
            raise TypeError("block was not allocated by a SliceAllocator")

        aligned, index = self._classify(size)
        if len(block) > aligned:
            del block[aligned:]
        else:
            block.extend(bytes(aligned - len(block)))
        block.index = index - 1 if 1 <= index <= self.max_index else -1
        return block

    def free(self, block: Optional[Slice]) -> None:
        """Return ``block`` to the cache, or release it if it is not cacheable."""
        if block is None:
            return
        if not isinstance(block, Slice):
            raise TypeError("block was not allocated by a SliceAllocator")
        if block.index < 0:
            del block[:]
            return

        if self.cached_count >= self.max_count:
            oldest = next(iter(self._lru))
            stack = self._cache[oldest]
            victim = stack.pop()
            self.cached_count -= 1
            if not stack:
                del self._lru[oldest]
            del victim[:]

        stack = self._cache[block.index]
        was_empty = not stack
        stack.append(block)
        self.cached_count += 1
        if was_empty:
            self._lru[block.index] = None

    def destroy(self) -> None:
        """Release every cached block."""
        for slot in self._lru:
            stack = self._cache[slot]
            for block in stack:
                del block[:]
            stack.clear()
        self._lru.clear()
        self.cached_count = 0