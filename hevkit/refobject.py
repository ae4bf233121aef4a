"""Reference-counted objects with an overridable destructor."""

from __future__ import annotations

import threading


class RefObject:
    """An object that is destructed when its reference count drops to zero.

    A new object starts with one reference. Subclasses override
    :meth:`destruct` to release what they hold.
    """

    name = "HevObject"

    def __init__(self) -> None:
        self.ref_count = 1

    def ref(self) -> RefObject:
        """Add a reference and return the object."""
        self.ref_count += 1
        return self

    def unref(self) -> None:
        """Drop a reference, destructing the object when none remain."""
        if self.ref_count == 0:
            raise ValueError("object has no references left")
        self.ref_count -= 1
        if self.ref_count:
            return
        self.destruct()

    def destruct(self) -> None:
        """Release the object's resources; the base class holds none."""


class AtomicRefObject(RefObject):
    """A :class:`RefObject` whose count may be changed from several threads."""

    name = "HevObjectAtomic"

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.Lock()

    def ref(self) -> AtomicRefObject:
        """Add a reference atomically and return the object."""
        with self._lock:
            self.ref_count += 1
        return self

    def unref(self) -> None:
        """Drop a reference atomically, destructing when none remain."""
        with self._lock:
            if self.ref_count == 0:
                raise ValueError("object has no references left")
            previous = self.ref_count
            self.ref_count -= 1
        if previous > 1:
            return
        self.destruct()