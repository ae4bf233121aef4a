"""Power-of-two address alignment helpers."""

from __future__ import annotations


def _check_align(align: int) -> None:
    if align <= 0 or align & (align - 1):
        raise ValueError(f"alignment must be a positive power of two: {align}")


def align_up(addr: int, align: int) -> int:
    """Round ``addr`` up to the next multiple of ``align``."""
    _check_align(align)
    return (addr + align - 1) & ~(align - 1)


def align_down(addr: int, align: int) -> int:
    """Round ``addr`` down to a multiple of ``align``."""
    _check_align(align)
    return addr & ~(align - 1)