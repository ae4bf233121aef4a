import pytest
from hypothesis import given, strategies as st

from hevkit.slice_allocator import Slice, SliceAllocator


def test_alloc_zero_returns_none():
    assert SliceAllocator().alloc(0) is None


def test_small_alloc_is_rounded_to_alignment():
    block = SliceAllocator().alloc(1)
    assert isinstance(block, Slice)
    assert len(block) == 16
    assert block.index == 0


def test_large_alloc_is_not_cacheable():
    allocator = SliceAllocator(align=8, max_size=64, max_count=4)
    block = allocator.alloc(65)
    assert block.index == -1
    assert len(block) % 8 == 0
    assert len(block) >= 65
    allocator.free(block)
    assert allocator.cached_count == 0
    assert len(block) == 0


def test_negative_size_raises():
    with pytest.raises(ValueError):
        SliceAllocator().alloc(-5)


def test_freed_block_is_reused_for_same_class():
    allocator = SliceAllocator(align=8, max_size=64, max_count=4)
    block = allocator.alloc(5)
    allocator.free(block)
    assert allocator.cached_count == 1
    again = allocator.alloc(7)
    assert again is block
    assert allocator.cached_count == 0


def test_other_class_does_not_reuse():
    allocator = SliceAllocator(align=8, max_size=64, max_count=4)
    block = allocator.alloc(5)
    allocator.free(block)
    other = allocator.alloc(20)
    assert other is not block
    assert allocator.cached_count == 1


def test_full_cache_drops_oldest_class():
    allocator = SliceAllocator(align=8, max_size=64, max_count=2)
    a1 = allocator.alloc(8)
    a2 = allocator.alloc(8)
    b = allocator.alloc(16)
    allocator.free(a1)
    allocator.free(b)
    allocator.free(a2)
    assert allocator.cached_count == 2
    assert len(a1) == 0
    assert allocator.alloc(8) is a2
    assert allocator.alloc(16) is b
    fresh = allocator.alloc(8)
    assert fresh is not a1
    assert allocator.cached_count == 0


def test_realloc_moves_block_between_classes():
    allocator = SliceAllocator(align=8, max_size=64, max_count=4)
    block = allocator.alloc(8)
    block[:] = b"abcdefgh"
    grown = allocator.realloc(block, 30)
    assert grown is block
    assert grown[:8] == b"abcdefgh"
    assert len(grown) % 8 == 0 and len(grown) >= 30
    huge = allocator.realloc(block, 100)
    assert huge.index == -1
    back = allocator.realloc(huge, 3)
    assert back.index == 0
    assert back[:3] == b"abc"


def test_realloc_to_zero_caches_block():
    allocator = SliceAllocator(align=8, max_size=64, max_count=4)
    block = allocator.alloc(8)
    assert allocator.realloc(block, 0) is None
    assert allocator.cached_count == 1
    assert allocator.alloc(8) is block


def test_free_rejects_foreign_block():
    with pytest.raises(TypeError):
        SliceAllocator().free(bytearray(16))


def test_free_none_is_ignored():
    allocator = SliceAllocator()
    allocator.free(None)
    assert allocator.cached_count == 0


def test_unref_destroys_cache():
    allocator = SliceAllocator(align=8, max_size=64, max_count=4)
    blocks = [allocator.alloc(size) for size in (8, 16, 24)]
    for block in blocks:
        allocator.free(block)
    assert allocator.cached_count == 3
    allocator.unref()
    assert allocator.cached_count == 0
    assert all(len(block) == 0 for block in blocks)
    assert allocator.alloc(8) is not blocks[0]


def test_invalid_configuration_raises():
    with pytest.raises(ValueError):
        SliceAllocator(align=12)
    with pytest.raises(ValueError):
        SliceAllocator(max_count=0)


@given(
    st.lists(
        st.tuples(st.booleans(), st.integers(min_value=1, max_value=100)),
        max_size=60,
    )
)
def test_cache_never_exceeds_limit(operations):
    allocator = SliceAllocator(align=8, max_size=64, max_count=3)
    live = []
    for do_alloc, size in operations:
        if do_alloc or not live:
            block = allocator.alloc(size)
            assert len(block) >= size
            assert len(block) % 8 == 0
            live.append(block)
        else:
            allocator.free(live.pop(size % len(live)))
        assert 0 <= allocator.cached_count <= 3