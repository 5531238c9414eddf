# memoria

`memoria` models the main memory of a small teaching operating system. It
holds one contiguous block of bytes split into fixed-size frames. Each process
gets a page table and a list of pseudocode instructions. Reads, writes and
copies can cross page boundaries.

The package is plain Python with no runtime dependencies.

## Modules

### `memoria.config`

- `parse_config(text)` reads `KEY=VALUE` lines and returns a frozen
  `MemoryConfig`. Blank lines and lines starting with `#` are skipped.
- The required keys are:
  - `PUERTO_ESCUCHA`, held as `port`
  - `TAM_MEMORIA`, held as `memory_size`
  - `TAM_PAGINA`, held as `page_size`
  - `PATH_INSTRUCCIONES`, held as `instructions_path`; one trailing `/` is removed
  - `RETARDO_RESPUESTA`, held as `response_delay` in milliseconds
- `MemoryConfig.response_delay_seconds` gives the delay in seconds.
- `load_config(path)` reads the file and parses it the same way. It also
  checks that a non-empty instructions path is an existing directory.
- `ConfigError`, a `ValueError`, is raised for any of these:
  - a line without `=`
  - a missing key
  - a value that is not an integer
  - a page size that is not positive
  - a negative memory size
  - a file that cannot be read
  - a missing instructions directory

### `memoria.pseudocode`

- `resolve_script_path(instructions_path, argument_path, relative)` builds the
  path of a process's script. A relative path is joined to the instructions
  directory with `/` when that directory is set. Otherwise the argument is
  returned unchanged.
- `parse_pseudocode(lines)` strips each line and drops the blank ones.
- `load_pseudocode_file(path)` reads a file and parses it the same way. It
  raises `PseudocodeError`, an `OSError`, if the file cannot be opened.

### `memoria.paging`

`PagedMemory(memory_size, page_size)` creates a zeroed `bytearray` and
`ceil(memory_size / page_size)` `Frame` records, all free at the start. It
raises `ValueError` for a page size that is not positive or a negative memory
size.

- `frame_count()` and `free_frame_count()` return the total and free numbers
  of frames. The `free_frames` property lists the free frame numbers in the
  order they will be handed out.
- `create_process(pid, instructions)` registers a `Process` with no pages. It
  raises `PagingError` if the PID is already in use.
- `get_process(pid)` returns the process.
- `kill_process(pid)` removes the process and returns its frames to the free
  list.
- `fetch_instruction(pid, pc)` returns the instruction at `pc`, or `None` when
  `pc` is out of range.
- `frame_for_page(pid, page_number)` returns the frame number that holds the
  page, or `None` when the process has no such page.
- `resize_process(pid, new_size)` grows or shrinks the page table to
  `ceil(new_size / page_size)` pages and returns the new page count.
  - Growing takes free frames from the front of the free list.
  - Shrinking removes the highest pages and appends their frames to the free
    list.
  - `OutOfMemoryError` is raised when `new_size` exceeds the memory size or
    when there are not enough free frames.
  - `ValueError` is raised for a negative size.
- `touch_frame(frame_number)` sets `last_use` on the page held by the frame
  and returns that `Page`.
- `next_physical_address(frame_number, pid)` returns the start address of the
  page that follows the page held by the frame.

An unknown PID raises `UnknownProcessError`. It is both a `PagingError` and a
`LookupError`, and its `pid` attribute holds the PID asked for. An operation
on a frame that does not exist or holds no page raises `PagingError`.

The lock `PagedMemory.lock` is re-entrant. It guards every change.

### `memoria.access`

`split_transfer(page_size, physical_addresses, size)` splits a transfer into
one `Chunk(address, length)` per address:

- The first chunk runs from its address to the end of its page, or less if the
  transfer is shorter.
- A middle chunk covers a whole page.
- The last chunk takes whatever is left.

It raises `ValueError` when any of these holds:

- the addresses are empty
- an address is negative
- there are too many addresses for the size
- the addresses do not cover the whole size

The other functions in this module move the bytes:

- `read_memory(memory, physical_addresses, size)` returns the bytes.
- `write_memory(memory, physical_addresses, data)` stores `data` and marks
  each page it touches as modified.
- `copy_memory(memory, sources, destinations, size)` reads from the sources,
  writes to the destinations and returns the copied bytes.

Each of these functions calls `touch_frame` on every page it reaches. The
frames involved must therefore be assigned to a process, or `PagingError` is
raised. `PagingError` is also raised for an access that runs past the end of
memory.

## Example

```python
from memoria.access import read_memory, split_transfer, write_memory
from memoria.paging import OutOfMemoryError, PagedMemory
from memoria.pseudocode import parse_pseudocode

memory = PagedMemory(memory_size=1024, page_size=32)
print(memory.frame_count())             # 32

script = parse_pseudocode(["SET AX 1\n", "\n", "  SUM AX BX  \n", "EXIT\n"])
memory.create_process(1, script)
print(memory.fetch_instruction(1, 1))   # SUM AX BX

memory.resize_process(1, 100)           # 4 pages, frames 0 to 3
print(memory.free_frame_count())        # 28
print(memory.frame_for_page(1, 0))      # 0

try:
    memory.resize_process(1, 4096)
except OutOfMemoryError:
    print("not enough memory")

# 40 bytes starting 8 bytes into frame 0, continuing in frame 1
print(split_transfer(32, [8, 32], 40))
# [Chunk(address=8, length=24), Chunk(address=32, length=16)]
write_memory(memory, [8, 32], b"x" * 40)
print(read_memory(memory, [8, 32], 40) == b"x" * 40)   # True

memory.kill_process(1)
print(memory.free_frame_count())        # 32
```

## What it does not do

The package provides only the in-process model. It has no server, no network
protocol for kernel, CPU or I/O clients, no delay applied to responses and no
command-line program. A caller that wants those has to build them on top of
`PagedMemory` and the functions in `memoria.access`.

## Running the tests

Install the `test` extra, then run `pytest` from the project directory.