"""Frames, page tables and processes of the paged main memory."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field


class PagingError(Exception):
    """Raised when a paging operation cannot be carried out."""


class OutOfMemoryError(PagingError):
    """Raised when a process cannot grow to the requested size."""


class UnknownProcessError(PagingError, LookupError):
    """Raised when no process has the requested PID."""

    def __init__(self, pid: int) -> None:
        super().__init__(f"no process with PID {pid}")
        self.pid = pid


@dataclass
class Page:
    """One entry of a process's page table."""

    page_number: int
    frame_number: int
    used: bool = False
    modified: bool = False
    present: bool = False
    last_use: float = 0.0


@dataclass
class Frame:
    """A fixed-size block of main memory and the page it currently holds."""

    number: int
    pid: int | None = None
    page: Page | None = None


@dataclass
class Process:
    """A process known to memory: its instructions and its page table."""

    pid: int
    instructions: list[str] = field(default_factory=list)
    pages: list[Page] = field(default_factory=list)

    @property
    def size_in_pages(self) -> int:
        return len(self.pages)


class PagedMemory:
    """Main memory split into frames, handed out to processes page by page."""

    def __init__(self, memory_size: int, page_size: int) -> None:
        if page_size <= 0:
            raise ValueError(f"page size must be positive: {page_size}")
        if memory_size < 0:
            raise ValueError(f"memory size must not be negative: {memory_size}")
        self.memory_size = memory_size
        self.page_size = page_size
        self.memory = bytearray(memory_size)
        self.lock = threading.RLock()
        frame_total = -(-memory_size // page_size)
        self.frames: list[Frame] = [Frame(number) for number in range(frame_total)]
        self._free_frames: list[Frame] = list(self.frames)
        self._processes: dict[int, Process] = {}

    def frame_count(self) -> int:
        """Total number of frames in memory."""
        return len(self.frames)

    def free_frame_count(self) -> int:
        """Number of frames not assigned to any page."""
        with self.lock:
            return len(self._free_frames)

    @property
    def free_frames(self) -> list[int]:
        """Numbers of the free frames, in the order they will be handed out."""
        with self.lock:
            return [frame.number for frame in self._free_frames]

    def create_process(self, pid: int, instructions: list[str]) -> Process:
        """Register a new process holding the given instructions and no pages."""
        with self.lock:
            if pid in self._processes:
                raise PagingError(f"a process with PID {pid} already exists")
            process = Process(pid, list(instructions))
            self._processes[pid] = process
            return process

    def get_process(self, pid: int) -> Process:
        """Return the process with the given PID."""
        with self.lock:
            try:
                return self._processes[pid]
            except KeyError:
                raise UnknownProcessError(pid) from None

    def kill_process(self, pid: int) -> Process:
        """Remove a process and give all of its frames back to the free list."""
        with self.lock:
            process = self._processes.pop(pid, None)
            if process is None:
                raise UnknownProcessError(pid)
            for page in process.pages:
                frame = self.frames[page.frame_number]
                frame.pid = None
                frame.page = None
                self._free_frames.append(frame)
            process.pages.clear()
            process.instructions.clear()
            return process

    def fetch_instruction(self, pid: int, pc: int) -> str | None:
        """Return the instruction at the program counter, or None past the end."""
        process = self.get_process(pid)
        if 0 <= pc < len(process.instructions):
            return process.instructions[pc]
        return None

    def frame_for_page(self, pid: int, page_number: int) -> int | None:
        """Return the frame holding a page of a process, or None if it has no such page."""
        process = self.get_process(pid)
        return next(
            (page.frame_number for page in process.pages if page.page_number == page_number),
            None,
        )

    def resize_process(self, pid: int, new_size: int) -> int:
        """Grow or shrink a process to hold new_size bytes; return its page count."""
        with self.lock:
            process = self.get_process(pid)
            if new_size < 0:
                raise ValueError(f"size must not be negative: {new_size}")
            if new_size > self.memory_size:
                raise OutOfMemoryError(
                    f"PID {pid}: {new_size} bytes exceed the memory size {self.memory_size}"
                )
            wanted = -(-new_size // self.page_size)
            current = len(process.pages)
            if current < wanted:
                if len(self._free_frames) < wanted - current:
                    raise OutOfMemoryError(
                        f"PID {pid}: not enough free frames to grow to {wanted} pages"
                    )
                for page_number in range(current, wanted):
                    frame = self._free_frames.pop(0)
                    page = Page(page_number=page_number, frame_number=frame.number)
                    frame.pid = pid
                    frame.page = page
                    process.pages.append(page)
            elif current > wanted:
                for _ in range(current - wanted):
                    page = process.pages.pop(self._victim_index(process))
                    frame = self.frames[page.frame_number]
                    frame.pid = None
                    frame.page = None
                    self._free_frames.append(frame)
            return len(process.pages)

    @staticmethod
    def _victim_index(process: Process) -> int:
        return len(process.pages) - 1

    def touch_frame(self, frame_number: int) -> Page:
        """Record an access to the page held by a frame."""
        with self.lock:
            page = self._page_in_frame(frame_number)
            page.last_use = time.time()
            return page

    def next_physical_address(self, frame_number: int, pid: int) -> int:
        """Return the start address of the page following the one in the frame."""
        with self.lock:
            page = self._page_in_frame(frame_number)
            process = self.get_process(pid)
            following = page.page_number + 1
            if following >= len(process.pages):
                raise PagingError(f"PID {pid} has no page after page {page.page_number}")
            return process.pages[following].frame_number * self.page_size

    def _page_in_frame(self, frame_number: int) -> Page:
        if not 0 <= frame_number < len(self.frames):
            raise PagingError(f"frame {frame_number} does not exist")
        page = self.frames[frame_number].page
        if page is None:
            raise PagingError(f"frame {frame_number} holds no page")
        return page