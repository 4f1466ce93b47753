# nobuild

`nobuild` is a small toolkit for writing build scripts in plain Python
instead of a separate build language. You put command lines together and
run them, one at a time or several in parallel. It also covers the file
work a build script needs, tells you when an output is out of date, and
logs what it does in a short, readable format.

It has no dependencies outside the standard library.

## Installation

```console
$ pip install .
```

To run the test suite as well:

```console
$ pip install ".[test]"
$ pytest
```

## Commands (`nobuild.cmd`)

A `Cmd` holds a list of arguments in its `args` attribute. Append to it and
then run it:

```python
from nobuild.cmd import Cmd
from nobuild.fs import mkdir_if_not_exists

mkdir_if_not_exists("build/")

cmd = Cmd()
cmd.append("cc", "-Wall", "-Wextra", "-o", "build/hello", "src/hello.c")
cmd.run_sync(reset=True)
```

- `append(*args)` adds arguments. Path-like objects are accepted.
- `extend(other)` adds the arguments of another `Cmd`, or of any iterable.
- `clear()` removes all arguments.
- `render()` returns the command as one line of text. Arguments that contain
  spaces are wrapped in single quotes. This is the line logged as
  `CMD: ...` before each run.
- `cc()`, `cc_flags(*args)`, `cc_output(path)` and `cc_inputs(*paths)` add
  the compiler (`cc`), the flags (`-Wall -Wextra` when none are given),
  `-o <path>` and the input files.

`run_sync` runs the command to completion. It raises `BuildError` if the
command is empty, cannot be started, exits with a non-zero code, or is
killed by a signal. With `reset=True` the arguments are cleared afterwards,
so you can reuse the same `Cmd` for the next step, and any redirect streams
that were passed in are closed.

### Redirecting standard streams

`stdin`, `stdout` and `stderr` each take a raw file descriptor, an open file,
or `None` to inherit the stream from the parent. `open_for_read(path)` opens
a file for reading. `open_for_write(path)` creates or truncates a file with
mode 0644.

```python
from nobuild.cmd import Cmd, open_for_write

out = open_for_write("echo_message.txt")
cmd = Cmd()
cmd.append("./echo", "Hello")
cmd.run_sync(stdout=out, reset=True)   # `out` is closed by reset=True
```

### Parallel builds

`run_async` takes the same arguments as `run_sync`. It starts the process
without waiting for it and returns a `Proc`. `Proc.wait()` blocks until the
process ends and raises `BuildError` unless the exit code was 0. Collect
processes in `Procs` and wait for all of them at once:

```python
from nobuild.cmd import Cmd, Procs

cmd = Cmd()
procs = Procs()
for name in ("foo", "bar", "baz"):
    cmd.cc()
    cmd.cc_flags()
    cmd.cc_output(f"build/{name}")
    cmd.cc_inputs(f"src/{name}.c")
    procs.append(cmd.run_async(reset=True))
procs.wait()
```

`Procs.wait()` waits for every process, even if some of them fail, and
empties the batch. If any process failed, it then raises one `BuildError`
that lists all the failures. `Procs.append_with_flush(proc, max_procs_count)`
adds a process and waits for the whole batch once it holds
`max_procs_count` processes.

## Files and directories (`nobuild.fs`)

- `mkdir_if_not_exists(path)` creates a directory with mode 0755. It returns
  `True` if the directory was created and `False` if it already existed.
- `copy_file(src, dst)` copies the contents and the permission bits of a file.
- `copy_directory_recursively(src, dst)` copies a tree.
- `read_entire_dir(parent)` returns the names of the entries in a directory.
- `read_entire_file(path)` returns `bytes`.
- `write_entire_file(path, data)` accepts `bytes`, or `str`, which is written
  as UTF-8.
- `get_file_type(path)` returns a `FileType`: `REGULAR`, `DIRECTORY`,
  `SYMLINK` or `OTHER`. Symlinks are followed.
- `delete_file(path)` removes a file or an empty directory.
- `rename(old, new)` replaces the target if it already exists.
- `file_exists(path)` returns a boolean.
- `get_current_dir()` and `set_current_dir(path)` read and change the
  working directory.
- `path_name(path)` returns the last component of a path, so
  `"/a/b/file.c"` gives `"file.c"`.

`needs_rebuild(output_path, input_paths)` returns `True` when the output is
missing or older than any of its inputs. Times are compared to the second.
A missing input raises `BuildError`. `needs_rebuild1(output, input)` does the
same for a single input.

```python
from nobuild.fs import needs_rebuild

if needs_rebuild("build/main", ["src/main.c", "src/util.h"]):
    ...
```

## Logging and errors (`nobuild.log`)

Operations log to standard error with an `[INFO]`, `[WARNING]` or `[ERROR]`
prefix. `log(level, fmt, *args)` formats with `%`. Messages below the
minimal level are dropped. `set_minimal_log_level(level)` changes that level
and returns the previous one. `LogLevel.NO_LOGS` silences everything:

```python
from nobuild.log import LogLevel, log, set_minimal_log_level

log(LogLevel.INFO, "building %s", "hello")
set_minimal_log_level(LogLevel.WARNING)
```

`Logger(minimal_level, stream)` is a separate logger that writes to a stream
of your choice. When no stream is given, it writes to `sys.stderr`.

When an operation fails, it raises `BuildError`.

## String views (`nobuild.stringview`)

`StringView` helps with simple parsing:

- `chop_by_delim(delim)` and `chop_left(n)` remove text from the front of the
  view and return the removed part.
- `trim`, `trim_left` and `trim_right` return new views with whitespace
  removed.
- `starts_with` and `ends_with` test the start and end of the view.

A view compares equal to another view or to a `str` that holds the same text.

```python
from nobuild.stringview import StringView

sv = StringView("key=value")
assert sv.chop_by_delim("=") == "key"
assert sv == "value"
```

## Sequence helpers (`nobuild.arrays`)

- `resize(items, size, fill=None)` grows or shrinks a list in place.
- `remove_unordered(items, index)` moves the last element into the removed
  slot and returns the removed element.
- `last(items)` returns the last element. It raises `IndexError` if the
  sequence is empty.

## The `nobuild` command (`nobuild.runner`)

The `nobuild` command is a runner for a collection of C test programs.
Run it from a directory that holds them as `tests/<name>.c`:

```console
$ nobuild list
$ nobuild test
$ nobuild test da_append sb_appendf
$ nobuild examples
```

- `test` compiles each test into `build/tests/<name>` and runs it inside its
  own `build/tests/<name>.cwd/` directory. With no names given, it runs every
  test that `list` shows. Running `nobuild` with no command is the same as
  `nobuild test`.
- `examples [dir]` goes through the example projects `001_basic_usage`,
  `005_parallel_build` and `010_nob_two_stage` under `dir` (`how_to` by
  default). In each one it compiles `nob.c` into `./nob` and runs it.

The command exits with status 1 on the first failure or on an unknown
command.

## What this package does not do

- It does not ship the C test programs or the example projects that
  `nobuild test` and `nobuild examples` build. These must already exist in
  the working directory.
- A build script written with this package does not detect changes to itself
  and rebuild itself. Use `needs_rebuild` for your own outputs.