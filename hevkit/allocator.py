"""Reference-counted memory allocators and the per-thread default allocator."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Optional


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")


class MemoryAllocator(ABC):
    """Base class of allocators that hand out ``bytearray`` blocks.

    A new allocator starts with one reference; :meth:`destroy` runs when the
    last reference is dropped.
    """

    def __init__(self) -> None:
        self.ref_count = 1

    @abstractmethod
    def alloc(self, size: int) -> Optional[bytearray]:
        """Return a block of at least ``size`` bytes, or None."""

    @abstractmethod
    def realloc(self, block: Optional[bytearray], size: int) -> Optional[bytearray]:
        """Resize ``block`` to ``size`` bytes, keeping its leading contents."""

    @abstractmethod
    def free(self, block: Optional[bytearray]) -> None:
        """Give ``block`` back to the allocator."""

    def destroy(self) -> None:
        """Release what the allocator holds; the base class holds nothing."""

    def ref(self) -> MemoryAllocator:
        """Add a reference and return the allocator."""
        self.ref_count += 1
        return self

    def unref(self) -> None:
        """Drop a reference, destroying the allocator when none remain."""
        if self.ref_count == 0:
            raise ValueError("allocator has no references left")
        self.ref_count -= 1
        if self.ref_count > 0:
            return
        self.destroy()


class SimpleAllocator(MemoryAllocator):
    """Allocator that creates a fresh block for every request."""

    def alloc(self, size: int) -> bytearray:
        """Return a new zero-filled block of exactly ``size`` bytes."""
        _check_size(size)
        return bytearray(size)

    def realloc(self, block: Optional[bytearray], size: int) -> Optional[bytearray]:
        """Resize ``block`` in place; a size of zero frees it and returns None."""
        _check_size(size)
        if block is None:
            return self.alloc(size)
        if size == 0:
            self.free(block)
            return None
        if len(block) > size:
            del block[size:]
        else:
            block.extend(bytes(size - len(block)))
        return block

    def free(self, block: Optional[bytearray]) -> None:
        """Release the storage of ``block``."""
        if block is not None:
            del block[:]


_local = threading.local()


def default_allocator() -> MemoryAllocator:
    """Return this thread's default allocator, creating a simple one if needed."""
    allocator = getattr(_local, "allocator", None)
    if allocator is None:
        allocator = SimpleAllocator()
        _local.allocator = allocator
    return allocator


def set_default_allocator(
    allocator: Optional[MemoryAllocator],
) -> Optional[MemoryAllocator]:
    """Make ``allocator`` this thread's default and return the previous one."""
    old = getattr(_local, "allocator", None)
    _local.allocator = allocator
    return old