"""Building command lines and running them as child processes."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import IO, Any, Union

from nobuild.log import BuildError, LogLevel, log

# A standard stream of a child: a raw descriptor, an open file, or None to inherit.
Redirect = Union[int, IO[Any], None]

DEFAULT_CC = "cc"
DEFAULT_CC_FLAGS = ("-Wall", "-Wextra")


def _render_arg(arg: str) -> str:
    return f"'{arg}'" if " " in arg else arg


def _close(stream: Redirect) -> None:
    if stream is None:
        return
    if isinstance(stream, int):
        os.close(stream)
    else:
        stream.close()


class Proc:
    """A running child process started by :meth:`Cmd.run_async`."""

    def __init__(self, popen: subprocess.Popen) -> None:
        self._popen = popen

    @property
    def pid(self) -> int:
        return self._popen.pid

    def wait(self) -> None:
        """Block until the process ends; raise BuildError unless it exited with 0."""
        code = self._popen.wait()
        if code < 0:
            raise BuildError(f"command process was terminated by signal {-code}")
        if code != 0:
            raise BuildError(f"command exited with exit code {code}")

    def __repr__(self) -> str:
        return f"Proc(pid={self.pid})"


@dataclass
class Procs:
    """A batch of processes that are waited for together."""

    procs: list[Proc] = field(default_factory=list)

    def append(self, proc: Proc) -> None:
        self.procs.append(proc)

    def wait(self) -> None:
        """Wait for every process and empty the batch.

        All processes are waited for even if some fail; afterwards a
        BuildError describing the failures is raised.
        """
        procs, self.procs = self.procs, []
        failures: list[str] = []
        for proc in procs:
            try:
                proc.wait()
            except BuildError as exc:
                failures.append(str(exc))
        if failures:
            raise BuildError("; ".join(failures))

    def append_with_flush(self, proc: Proc, max_procs_count: int) -> None:
        """Append ``proc``; once the batch holds ``max_procs_count``, wait for it."""
        self.append(proc)
        if len(self.procs) >= max_procs_count:
            self.wait()

    def __len__(self) -> int:
        return len(self.procs)

    def __iter__(self) -> Iterator[Proc]:
        return iter(self.procs)


@dataclass
class Cmd:
    """A command line: the program followed by its arguments."""

    args: list[str] = field(default_factory=list)

    def append(self, *args: str | os.PathLike[str]) -> None:
        self.args.extend(os.fspath(arg) for arg in args)

    def extend(self, other: Cmd | Iterable[str | os.PathLike[str]]) -> None:
        items = other.args if isinstance(other, Cmd) else other
        self.append(*items)

    def clear(self) -> None:
        self.args.clear()

    def render(self) -> str:
        """Return a shell-like rendering, quoting arguments that hold spaces."""
        return " ".join(_render_arg(arg) for arg in self.args)

    def run_async(
        self,
        *,
        stdin: Redirect = None,
        stdout: Redirect = None,
        stderr: Redirect = None,
        reset: bool = False,
    ) -> Proc:
        """Start the command and return its process without waiting.

        With ``reset`` the arguments are cleared and the given redirect
        streams are closed afterwards, whether or not the start succeeded.
        """
        try:
            return self._spawn(stdin, stdout, stderr)
        finally:
            if reset:
                self.args.clear()
                for stream in (stdin, stdout, stderr):
                    _close(stream)

    def run_sync(
        self,
        *,
        stdin: Redirect = None,
        stdout: Redirect = None,
        stderr: Redirect = None,
        reset: bool = False,
    ) -> None:
        """Run the command to completion; raise BuildError if it fails."""
        proc = self.run_async(stdin=stdin, stdout=stdout, stderr=stderr, reset=reset)
        proc.wait()

    def cc(self) -> None:
        """Append the C compiler."""
        self.append(DEFAULT_CC)

    def cc_flags(self, *args: str) -> None:
        """Append the given compiler flags, or the default warning flags."""
        self.append(*(args or DEFAULT_CC_FLAGS))

    def cc_output(self, output_path: str | os.PathLike[str]) -> None:
        self.append("-o", output_path)

    def cc_inputs(self, *args: str | os.PathLike[str]) -> None:
        self.append(*args)

    def _spawn(self, stdin: Redirect, stdout: Redirect, stderr: Redirect) -> Proc:
        if not self.args:
            raise BuildError("Could not run empty command")
        log(LogLevel.INFO, "CMD: %s", self.render())
        args = list(self.args)
        try:
            popen = subprocess.Popen(args, stdin=stdin, stdout=stdout, stderr=stderr)
        except OSError as exc:
            raise BuildError(
                f"Could not exec child process for {args[0]}: {exc.strerror}"
            ) from exc
        return Proc(popen)

    def __len__(self) -> int:
        return len(self.args)

    def __iter__(self) -> Iterator[str]:
        return iter(self.args)


def open_for_read(path: str | os.PathLike[str]) -> IO[bytes]:
    """Open a file for reading, to be handed to a command as its stdin."""
    path = os.fspath(path)
    try:
        return open(path, "rb")
    except OSError as exc:
        raise BuildError(f"Could not open file {path}: {exc.strerror}") from exc


def open_for_write(path: str | os.PathLike[str]) -> IO[bytes]:
    """Create or truncate a file (mode 0644) to receive a command's output."""
    path = os.fspath(path)
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        raise BuildError(f"could not open file {path}: {exc.strerror}") from exc
    return open(fd, "wb")