"""Intrusive red-black trees, alignment helpers, reference-counted objects and allocators."""

__version__ = "0.1.0"
__all__ = [
    "align",
    "allocator",
    "memapi",
    "rbtree",
    "rbtree_cached",
    "refobject",
    "slice_allocator",
]