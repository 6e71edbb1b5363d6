import threading

import pytest

from drills.allocator import AllocationError, MemoryAllocator


def _accounted(allocator):
    return sum(size for _, size in allocator.free_blocks()) + sum(
        size for _, size in allocator.allocated_blocks()
    )


def test_fresh_allocator_is_one_free_block():
    allocator = MemoryAllocator(1024)
    assert allocator.free_blocks() == [(0, 1024)]
    assert allocator.allocated_blocks() == []


def test_first_fit_addresses():
    allocator = MemoryAllocator(1024)
    first = allocator.allocate(16 * 4)
    second = allocator.allocate(256)
    third = allocator.allocate(256)
    assert first == 0
    assert second == first + 16 * 4
    assert third == 320
    assert _accounted(allocator) == 1024


def test_full_allocator_raises():
    allocator = MemoryAllocator(1024)
    allocator.allocate(16 * 4)
    for _ in range(3):
        allocator.allocate(256)
    before = allocator.free_blocks()
    with pytest.raises(AllocationError):
        allocator.allocate(256)
    assert allocator.free_blocks() == before


def test_deallocate_returns_block_to_free_list():
    allocator = MemoryAllocator(1024)
    allocator.allocate(16 * 4)
    allocator.allocate(256)
    allocator.allocate(256)
    allocator.deallocate(320)
    assert (320, 256) in allocator.free_blocks()
    assert all(addr != 320 for addr, _ in allocator.allocated_blocks())
    assert _accounted(allocator) == 1024


def test_deallocate_unknown_address_raises():
    allocator = MemoryAllocator(1024)
    allocator.allocate(256)
    with pytest.raises(AllocationError):
        allocator.deallocate(120)


def test_double_free_raises():
    allocator = MemoryAllocator(1024)
    addr = allocator.allocate(256)
    allocator.deallocate(addr)
    with pytest.raises(AllocationError):
        allocator.deallocate(addr)


def test_freed_block_is_reused_first():
    allocator = MemoryAllocator(1024)
    addr = allocator.allocate(256)
    allocator.allocate(256)
    allocator.deallocate(addr)
    assert allocator.allocate(100) == addr


def test_exact_fit_leaves_no_empty_block():
    allocator = MemoryAllocator(1024)
    allocator.allocate(1024)
    assert allocator.free_blocks() == []
    with pytest.raises(AllocationError):
        allocator.allocate(1)


@pytest.mark.parametrize("size", [0, -5])
def test_invalid_sizes(size):
    with pytest.raises(ValueError):
        MemoryAllocator(size)
    with pytest.raises(ValueError):
        MemoryAllocator(1024).allocate(size)


def test_concurrent_allocations_do_not_overlap():
    allocator = MemoryAllocator(1024)
    addresses = []
    lock = threading.Lock()

    def worker():
        for _ in range(4):
            addr = allocator.allocate(16)
            with lock:
                addresses.append(addr)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(set(addresses)) == len(addresses) == 32
    assert _accounted(allocator) == 1024