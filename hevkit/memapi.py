"""Allocation functions that use the calling thread's default allocator."""

from __future__ import annotations

from typing import Optional

from .allocator import default_allocator


def malloc(size: int) -> Optional[bytearray]:
    """Allocate ``size`` bytes from the default allocator."""
    return default_allocator().alloc(size)


def malloc0(size: int) -> Optional[bytearray]:
    """Allocate ``size`` bytes from the default allocator, cleared to zero."""
    block = default_allocator().alloc(size)
    if block is not None:
        block[:size] = bytes(size)
    return block


def calloc(nmemb: int, size: int) -> Optional[bytearray]:
    """Allocate a zeroed array of ``nmemb`` elements of ``size`` bytes each.

    Returns None when either count is zero.
    """
    if not nmemb or not size:
        return None
    total = nmemb * size
    block = default_allocator().alloc(total)
    if block is not None:
        block[:total] = bytes(total)
    return block


def realloc(block: Optional[bytearray], size: int) -> Optional[bytearray]:
    """Resize ``block`` to ``size`` bytes with the default allocator."""
    return default_allocator().realloc(block, size)


def free(block: Optional[bytearray]) -> None:
    """Give ``block`` back to the default allocator."""
    default_allocator().free(block)