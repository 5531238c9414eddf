"""Reading, writing and copying bytes of main memory across page boundaries."""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

from memoria.paging import PagedMemory, PagingError


class Chunk(NamedTuple):
    """A run of bytes inside one page: where it starts and how long it is."""

    address: int
    length: int


def split_transfer(page_size: int, physical_addresses: Sequence[int], size: int) -> list[Chunk]:
    """Split a transfer of size bytes into one chunk per physical address.

    The first chunk runs from its address to the end of its page, or less if
    the transfer is shorter. Middle chunks fill a whole page. The last chunk
    takes whatever is left.
    """
    if page_size <= 0:
        raise ValueError(f"page size must be positive: {page_size}")
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    if not physical_addresses:
        raise ValueError("at least one physical address is needed")

    chunks: list[Chunk] = []
    remaining = size
    last = len(physical_addresses) - 1
    for position, address in enumerate(physical_addresses):
        if address < 0:
            raise ValueError(f"physical address must not be negative: {address}")
        if position == 0:
            length = min(page_size - address % page_size, remaining)
        elif position == last:
            length = remaining
        else:
            length = page_size
            if length > remaining:
                raise ValueError(
                    f"{len(physical_addresses)} addresses are too many for {size} bytes"
                )
        chunks.append(Chunk(address, length))
        remaining -= length
    if remaining:
        raise ValueError(
            f"{len(physical_addresses)} addresses do not cover {size} bytes"
        )
    return chunks


def _check_bounds(memory: PagedMemory, chunk: Chunk) -> None:
    if chunk.address + chunk.length > len(memory.memory):
        raise PagingError(
            f"access of {chunk.length} bytes at {chunk.address} "
            f"goes past the memory size {len(memory.memory)}"
        )


def read_memory(memory: PagedMemory, physical_addresses: Sequence[int], size: int) -> bytes:
    """Read size bytes spread over the given physical addresses."""
    chunks = split_transfer(memory.page_size, physical_addresses, size)
    parts: list[bytes] = []
    with memory.lock:
        for chunk in chunks:
            _check_bounds(memory, chunk)
            parts.append(bytes(memory.memory[chunk.address:chunk.address + chunk.length]))
            memory.touch_frame(chunk.address // memory.page_size)
    return b"".join(parts)


def write_memory(memory: PagedMemory, physical_addresses: Sequence[int], data: bytes) -> None:
    """Write data spread over the given physical addresses."""
    chunks = split_transfer(memory.page_size, physical_addresses, len(data))
    with memory.lock:
        for chunk in chunks:
            _check_bounds(memory, chunk)
        offset = 0
        for chunk in chunks:
            memory.memory[chunk.address:chunk.address + chunk.length] = (
                data[offset:offset + chunk.length]
            )
            offset += chunk.length
            page = memory.touch_frame(chunk.address // memory.page_size)
            page.modified = True


def copy_memory(
    memory: PagedMemory,
    sources: Sequence[int],
    destinations: Sequence[int],
    size: int,
) -> bytes:
    """Copy size bytes from the source addresses to the destination addresses.

    Returns the bytes that were copied.
    """
    with memory.lock:
        data = read_memory(memory, sources, size)
        write_memory(memory, destinations, data)
    return data