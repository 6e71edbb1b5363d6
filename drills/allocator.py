"""A thread-safe first-fit allocator over a simulated address range."""

from __future__ import annotations

import threading


class AllocationError(Exception):
    """An allocation could not be satisfied or a release was invalid."""


class MemoryAllocator:
    """Hands out address ranges from ``0 .. size - 1`` by first fit.

    Released blocks return to the free list as they are; adjacent free
    blocks are not merged.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("the allocator size must be positive")
        self.size = size
        self._free: dict[int, int] = {0: size}
        self._allocated: dict[int, int] = {}
        self._lock = threading.Lock()

    def allocate(self, size: int) -> int:
        """Reserve ``size`` units and return the start address.

        Raises AllocationError when no free block is large enough.
        """
        if size <= 0:
            raise ValueError("allocation size must be positive")
        with self._lock:
            for addr in sorted(self._free):
                block = self._free[addr]
                if size <= block:
                    del self._free[addr]
                    if block > size:
                        self._free[addr + size] = block - size
                    self._allocated[addr] = size
                    return addr
        raise AllocationError(f"no free block of {size} units")

    def deallocate(self, addr: int) -> None:
        """Release the block starting at ``addr``.

        Raises AllocationError if no block was allocated there.
        """
        with self._lock:
            try:
                size = self._allocated.pop(addr)
            except KeyError:
                raise AllocationError(f"address {addr} is not allocated") from None
            self._free[addr] = size

    def free_blocks(self) -> list[tuple[int, int]]:
        """Free ``(address, size)`` blocks in address order."""
        with self._lock:
            return sorted(self._free.items())

    def allocated_blocks(self) -> list[tuple[int, int]]:
        """Allocated ``(address, size)`` blocks in address order."""
        with self._lock:
            return sorted(self._allocated.items())