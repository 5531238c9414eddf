import pytest

from memoria.paging import (
    OutOfMemoryError,
    PagedMemory,
    PagingError,
    UnknownProcessError,
)

PAGE = 16
FRAMES = 8


@pytest.fixture
def memory():
    return PagedMemory(PAGE * FRAMES, PAGE)


def test_all_frames_start_free(memory):
    assert memory.frame_count() == FRAMES
    assert memory.free_frame_count() == memory.frame_count()
    assert memory.free_frames == list(range(FRAMES))
    assert memory.memory == bytearray(PAGE * FRAMES)


def test_partial_frame_counts_as_a_frame():
    assert PagedMemory(PAGE + 1, PAGE).frame_count() == 2


@pytest.mark.parametrize("page_size", [0, -1])
def test_invalid_page_size_rejected(page_size):
    with pytest.raises(ValueError):
        PagedMemory(64, page_size)


def test_fetch_instruction(memory):
    memory.create_process(1, ["SET AX 1", "EXIT"])
    assert memory.fetch_instruction(1, 0) == "SET AX 1"
    assert memory.fetch_instruction(1, 1) == "EXIT"
    assert memory.fetch_instruction(1, 2) is None


def test_duplicate_pid_rejected(memory):
    memory.create_process(1, [])
    with pytest.raises(PagingError):
        memory.create_process(1, [])


def test_unknown_process(memory):
    with pytest.raises(UnknownProcessError):
        memory.fetch_instruction(9, 0)
    with pytest.raises(UnknownProcessError):
        memory.kill_process(9)
    with pytest.raises(UnknownProcessError):
        memory.resize_process(9, PAGE)


def test_grow_assigns_pages_in_order(memory):
    memory.create_process(1, [])
    pages = memory.resize_process(1, PAGE * 3)
    process = memory.get_process(1)
    assert pages == 3
    assert [p.page_number for p in process.pages] == [0, 1, 2]
    assert [p.frame_number for p in process.pages] == [0, 1, 2]
    assert memory.free_frame_count() == FRAMES - 3
    assert all(memory.frames[p.frame_number].pid == 1 for p in process.pages)
    assert all(memory.frames[p.frame_number].page is p for p in process.pages)


def test_size_rounds_up_to_whole_pages(memory):
    memory.create_process(1, [])
    assert memory.resize_process(1, PAGE + 1) == 2
    assert memory.resize_process(1, 0) == 0


def test_resize_beyond_memory_size(memory):
    memory.create_process(1, [])
    memory.resize_process(1, PAGE)
    with pytest.raises(OutOfMemoryError):
        memory.resize_process(1, PAGE * FRAMES + 1)
    assert memory.get_process(1).size_in_pages == 1


def test_resize_without_free_frames(memory):
    memory.create_process(1, [])
    memory.create_process(2, [])
    memory.resize_process(1, PAGE * (FRAMES - 1))
    with pytest.raises(OutOfMemoryError):
        memory.resize_process(2, PAGE * 2)
    assert memory.get_process(2).size_in_pages == 0
    assert memory.free_frame_count() == 1


def test_shrink_releases_last_pages(memory):
    memory.create_process(1, [])
    memory.resize_process(1, PAGE * 4)
    assert memory.resize_process(1, PAGE * 2) == 2
    process = memory.get_process(1)
    assert [p.page_number for p in process.pages] == [0, 1]
    assert memory.free_frame_count() == FRAMES - 2
    assert memory.frames[3].page is None


def test_frame_for_page(memory):
    memory.create_process(1, [])
    memory.resize_process(1, PAGE * 2)
    process = memory.get_process(1)
    assert memory.frame_for_page(1, 1) == process.pages[1].frame_number
    assert memory.frame_for_page(1, 5) is None


def test_kill_returns_frames(memory):
    memory.create_process(1, ["EXIT"])
    memory.resize_process(1, PAGE * 3)
    memory.kill_process(1)
    assert memory.free_frame_count() == FRAMES
    assert sorted(memory.free_frames) == list(range(FRAMES))
    with pytest.raises(UnknownProcessError):
        memory.get_process(1)


def test_freed_frames_go_to_the_end(memory):
    memory.create_process(1, [])
    memory.resize_process(1, PAGE)
    memory.kill_process(1)
    assert memory.free_frames[-1] == 0
    memory.create_process(2, [])
    memory.resize_process(2, PAGE)
    assert memory.frame_for_page(2, 0) == 1


def test_touch_frame_updates_last_use(memory):
    memory.create_process(1, [])
    memory.resize_process(1, PAGE)
    frame = memory.frame_for_page(1, 0)
    page = memory.touch_frame(frame)
    assert page.last_use > 0
    assert memory.get_process(1).pages[0].last_use == page.last_use


def test_touch_unassigned_frame(memory):
    with pytest.raises(PagingError):
        memory.touch_frame(0)
    with pytest.raises(PagingError):
        memory.touch_frame(FRAMES)


def test_next_physical_address(memory):
    memory.create_process(1, [])
    memory.create_process(2, [])
    memory.resize_process(2, PAGE)
    memory.resize_process(1, PAGE * 2)
    first = memory.frame_for_page(1, 0)
    second = memory.frame_for_page(1, 1)
    assert memory.next_physical_address(first, 1) == second * PAGE
    with pytest.raises(PagingError):
        memory.next_physical_address(second, 1)