# hevkit

hevkit is a set of small building blocks for systems-style Python code.

- **`hevkit.rbtree`**: an intrusive red-black tree. The tree never compares
  keys. You find the insertion point yourself, attach an `RBNode` with
  `RBTree.link(node, parent, left)`, and then rebalance with
  `RBTree.insert_color(node)`. The tree also offers:
  - `erase(node)` to remove a node;
  - `replace(victim, new)` to swap one node for another without
    rebalancing;
  - in-order walking with `first()`, `last()`, `RBNode.next()`,
    `RBNode.prev()` or plain iteration.

  An `RBNode` can carry a `value`. `RBNode.is_empty()` tells whether the
  node is linked into a tree.
- **`hevkit.rbtree_cached`**: `CachedRBTree`, an `RBTree` that caches its
  leftmost node, so `first()` runs in constant time. When you call
  `insert_color(node, leftmost)`, say whether the new node is the new
  leftmost one.
- **`hevkit.align`**: `align_up` and `align_down` for power-of-two
  alignment. Both raise `ValueError` for any other alignment.
- **`hevkit.refobject`**: `RefObject` and `AtomicRefObject`.
  - Each starts with one reference.
  - `ref()` adds a reference and returns the object.
  - `unref()` drops a reference and calls `destruct()` when the count
    reaches zero.
  - `unref()` on an object with no references left raises `ValueError`.
  - `AtomicRefObject` guards its count with a lock.
- **`hevkit.allocator`**: the `MemoryAllocator` base class, which is
  reference-counted and calls `destroy()` on the last `unref()`. It also
  has:
  - `SimpleAllocator`, which hands out zero-filled `bytearray` blocks of
    exactly the requested size;
  - a per-thread default allocator. `default_allocator()` returns it,
    creating a `SimpleAllocator` on first use. `set_default_allocator()`
    replaces it and returns the previous one.
- **`hevkit.slice_allocator`**: `SliceAllocator(align, max_size,
  max_count)`.
  - Requests are rounded up to a multiple of `align`. A request of zero
    bytes returns `None`.
  - Freed blocks of up to `max_size` bytes are kept per size class for
    reuse.
  - At most `max_count` blocks are kept. When the cache is full, a block
    of the class that was least recently refilled is dropped.
  - Blocks are `Slice` objects, a `bytearray` subclass with an `index`
    that holds the block's size class.
- **`hevkit.memapi`**: `malloc`, `malloc0`, `calloc`, `realloc` and
  `free`, all working against the calling thread's default allocator.
  - `calloc` returns `None` when either count is zero.
  - `realloc(block, 0)` frees the block and returns `None`.

## Installation

From a checkout of the project:

```
pip install .
```

## Example

```python
from hevkit import memapi

block = memapi.calloc(2, 64)      # 128 zeroed bytes
block = memapi.realloc(block, 256)
memapi.free(block)
```

To switch the default allocator for the current thread:

```python
from hevkit.allocator import set_default_allocator
from hevkit.slice_allocator import SliceAllocator

previous = set_default_allocator(SliceAllocator(16, 4096, 1000))
```

A red-black tree with caller-chosen placement:

```python
from hevkit.rbtree import RBNode, RBTree

tree = RBTree()
for value in (5, 2, 8):
    node = RBNode(value)
    parent, left = None, False
    cur = tree.root
    while cur is not None:
        parent, left = cur, value < cur.value
        cur = cur.left if left else cur.right
    tree.link(node, parent, left)
    tree.insert_color(node)

print([n.value for n in tree])    # [2, 5, 8]
```

## What it does not do

The allocators manage Python `bytearray` objects. They do not hand out or
track raw memory addresses. The package is a library only and provides
no command-line tool.

## Running the tests

```
pip install ".[test]"
pytest
```