# fastchess

Building blocks for a chess engine tournament manager. It uses only the standard
library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
python -m pytest
```

## Modules

- `fastchess.crc32`: CRC-32 (IEEE polynomial, computed with `zlib`).
  `calculate_crc32(filename)` checksums a file and returns `None` if it cannot be
  opened. For incremental checksums use `initial_crc32()`,
  `incremental_crc32(crc, data)` (accepts `str` or `bytes`) and `finalize_crc32(crc)`.
- `fastchess.strutils`: `starts_with` (false for an empty needle), `ends_with`,
  `contains` (works on a string or a sequence of strings), `split_string` (drops empty
  segments), `find_element(haystack, needle, kind)` (returns the element after
  `needle` converted by `kind`, or `None` if `needle` is absent) and `join` (each
  string is followed by the delimiter, including the last).
- `fastchess.fd_limit`: `max_system_file_descriptor_count()` returns the soft limit on
  open files (`-1` if unlimited or unavailable; raises `OSError` where the `resource`
  module does not exist). `min_file_descriptor_required(concurrency)` and
  `max_concurrency(available_fds)` estimate how many games fit in a descriptor budget.
- `fastchess.timeutil`: `datetime(fmt)` formats local time (or returns `None`),
  `datetime_iso()` gives `YYYY-MM-DDTHH:MM:SS +HHMM`, `datetime_precise()` gives
  `HH:MM:SS.ffffff`, and `duration(seconds)` formats seconds or a `timedelta` as
  `HH:MM:SS`.
- `fastchess.logger`: `Level` (`ALL`, `TRACE`, `WARN`, `INFO`, `ERR`, `FATAL`) and
  `Logger`. A `Logger` writes levelled, timestamped lines to a file opened with
  `open_file`; with `set_compress(True)` the file is gzip-compressed and its name gets
  a timestamp and `.gz` suffix. `print` writes to stdout and, when a file is open, to
  the log as well. `write_to_engine` and `read_from_engine` record engine traffic when
  `set_engine_coms(True)` is set. Messages use `str.format` placeholders.
- `fastchess.rand`: `mersenne_rand`, a shared `random.Random`; `seed(value)` reseeds
  it, and `random_uint64()` returns an unpredictable 64-bit integer.
- `fastchess.file_writer`: `FileWriter(filename, crc=False)` appends text from several
  threads. With `crc=True` it keeps a CRC-32 of the whole file (including what was
  already there), reports it after each write, and returns it from `crc32()`.
  It is a context manager.
- `fastchess.thread_vector`: `ThreadVector`, a list guarded by a reentrant lock, with
  `push`, `remove`, `remove_if` (returns the count removed), `lock`/`unlock` and use
  as a context manager.
- `fastchess.signals`: the `stop` and `abnormal_termination` events, `ProcessInformation`,
  the `process_list` of tracked processes, `write_to_open_pipes()` (writes a null byte
  to each process's input descriptor), `stop_processes()` (sends SIGINT, then SIGKILL)
  and `set_ctrl_c_handler()` (makes Ctrl+C set both events).
- `fastchess.scope_guard`: `ScopeEntry` and `ScopeGuard`, a context manager that
  releases its entry on exit.
- `fastchess.cache`: `CachedEntry` and `CachePool`. `get_entry(identifier, factory,
  *args, **kwargs)` reserves a free entry with that identifier or builds a new one;
  `delete_from_cache` drops a reserved entry.
- `fastchess.threadpool`: `ThreadPool`, a fixed set of worker threads. `enqueue`
  returns a `concurrent.futures.Future`; `kill` cancels queued work and joins the
  workers; `resize` restarts with a new worker count.

## Example

```python
from fastchess.crc32 import initial_crc32, incremental_crc32, finalize_crc32
from fastchess.timeutil import duration
from fastchess.threadpool import ThreadPool

crc = initial_crc32()
crc = incremental_crc32(crc, "Hello, ")
crc = incremental_crc32(crc, "world!")
assert finalize_crc32(crc) == 0xEBE6C6E6

print(duration(3725))  # 01:02:05

with ThreadPool(4) as pool:
    future = pool.enqueue(sum, [1, 2, 3])
    assert future.result() == 6
```

## What this package does not do

It has no command-line program and does not run tournaments. It does not start or
talk to chess engines, read opening books, write PGN or EPD files, or compute Elo or
SPRT statistics. It provides the supporting pieces only.