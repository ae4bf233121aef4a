import threading

import pytest

from hevkit.allocator import (
    MemoryAllocator,
    SimpleAllocator,
    default_allocator,
    set_default_allocator,
)


def _recording(base):
    """Return a subclass of ``base`` that counts calls to ``destroy``."""

    class RecordingAllocator(base):
        def __init__(self):
            super().__init__()
            self.destroyed = 0

        def destroy(self):
            self.destroyed += 1

    return RecordingAllocator


@pytest.fixture
def fresh_default():
    old = set_default_allocator(None)
    yield
    set_default_allocator(old)


def test_alloc_returns_zeroed_block_of_requested_size():
    allocator = SimpleAllocator()
    block = allocator.alloc(24)
    assert block == bytearray(24)


def test_alloc_rejects_negative_size():
    with pytest.raises(ValueError):
        SimpleAllocator().alloc(-1)


def test_realloc_grows_and_keeps_contents():
    allocator = SimpleAllocator()
    block = allocator.alloc(4)
    block[:] = b"abcd"
    grown = allocator.realloc(block, 10)
    assert grown[:4] == b"abcd"
    assert len(grown) == 10
    assert grown[4:] == bytes(6)


def test_realloc_shrinks_and_keeps_prefix():
    allocator = SimpleAllocator()
    block = allocator.alloc(6)
    block[:] = b"abcdef"
    shrunk = allocator.realloc(block, 3)
    assert shrunk == b"abc"


def test_realloc_of_none_allocates():
    block = SimpleAllocator().realloc(None, 5)
    assert block == bytearray(5)


def test_realloc_to_zero_frees_and_returns_none():
    allocator = SimpleAllocator()
    block = allocator.alloc(8)
    assert allocator.realloc(block, 0) is None
    assert len(block) == 0


def test_free_releases_storage():
    allocator = SimpleAllocator()
    block = allocator.alloc(8)
    allocator.free(block)
    assert len(block) == 0


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        MemoryAllocator()


def test_ref_returns_self_and_counts():
    plain = SimpleAllocator()
    assert plain.ref() is plain
    assert plain.ref_count == 2

    allocator = _recording(SimpleAllocator)()
    assert allocator.ref() is allocator
    assert allocator.ref_count == 2
    allocator.unref()
    assert allocator.destroyed == 0
    allocator.unref()
    assert allocator.destroyed == 1
    assert allocator.ref_count == 0


def test_unref_without_references_raises():
    plain = SimpleAllocator()
    plain.unref()
    with pytest.raises(ValueError):
        plain.unref()

    allocator = _recording(SimpleAllocator)()
    allocator.unref()
    with pytest.raises(ValueError):
        allocator.unref()
    assert allocator.destroyed == 1


def test_default_allocator_is_created_once(fresh_default):
    first = default_allocator()
    assert isinstance(first, SimpleAllocator)
    assert default_allocator() is first


def test_set_default_returns_previous(fresh_default):
    first = default_allocator()
    replacement = SimpleAllocator()
    assert set_default_allocator(replacement) is first
    assert default_allocator() is replacement


def test_default_allocator_is_per_thread(fresh_default):
    main = default_allocator()
    seen = []
    thread = threading.Thread(target=lambda: seen.append(default_allocator()))
    thread.start()
    thread.join()
    assert len(seen) == 1
    assert seen[0] is not main
    assert default_allocator() is main