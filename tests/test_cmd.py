import sys

import pytest

from nobuild.cmd import Cmd, Procs, open_for_read, open_for_write
from nobuild.fs import read_entire_file, write_entire_file
from nobuild.log import BuildError
from nobuild.stringview import StringView


def python_cmd(code):
    cmd = Cmd()
    cmd.append(sys.executable, "-c", code)
    return cmd


def test_render_quotes_arguments_with_spaces():
    cmd = Cmd()
    cmd.append("cc", "-o", "main", "hello world.c")
    assert cmd.render() == "cc -o main 'hello world.c'"


def test_append_and_extend():
    first = Cmd()
    first.append("cc", "-Wall")
    second = Cmd()
    second.append("-o", "main")
    first.extend(second)
    first.extend(["main.c"])
    assert first.args == ["cc", "-Wall", "-o", "main", "main.c"]
    assert len(first) == 5


def test_cc_helpers_default_flags():
    cmd = Cmd()
    cmd.cc()
    cmd.cc_flags()
    cmd.cc_output("main")
    cmd.cc_inputs("main.c", "util.c")
    assert cmd.args == ["cc", "-Wall", "-Wextra", "-o", "main", "main.c", "util.c"]


def test_cc_flags_custom():
    cmd = Cmd()
    cmd.cc_flags("-I.", "-ggdb")
    assert cmd.args == ["-I.", "-ggdb"]


def test_redirect_stdout_async(tmp_path):
    message = "Hello"
    path = tmp_path / "echo_message.txt"
    fdout = open_for_write(path)
    cmd = python_cmd(f"print({message!r})")
    proc = cmd.run_async(stdout=fdout, reset=True)
    proc.wait()
    assert fdout.closed
    assert len(cmd) == 0
    actual = StringView(read_entire_file(path).decode())
    assert actual.trim() == message


def test_redirect_stdin_and_stdout_sync(tmp_path):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    write_entire_file(src, "abc")
    fin = open_for_read(src)
    fout = open_for_write(dst)
    cmd = python_cmd("import sys; sys.stdout.write(sys.stdin.read().upper())")
    cmd.run_sync(stdin=fin, stdout=fout)
    fin.close()
    fout.close()
    assert read_entire_file(dst) == b"ABC"
    assert len(cmd) == 3


def test_nonzero_exit_raises():
    cmd = python_cmd("import sys; sys.exit(3)")
    with pytest.raises(BuildError, match="exit code 3"):
        cmd.run_sync()


def test_empty_command_raises():
    with pytest.raises(BuildError, match="empty command"):
        Cmd().run_sync()


def test_missing_program_raises_and_resets():
    cmd = Cmd()
    cmd.append("definitely-not-a-real-program-xyz")
    with pytest.raises(BuildError, match="definitely-not-a-real-program-xyz"):
        cmd.run_sync(reset=True)
    assert cmd.args == []


def test_procs_append_with_flush_waits_at_limit():
    procs = Procs()
    procs.append_with_flush(python_cmd("pass").run_async(), 2)
    assert len(procs) == 1
    procs.append_with_flush(python_cmd("pass").run_async(), 2)
    assert len(procs) == 0


def test_procs_wait_reports_failure_and_empties():
    procs = Procs()
    procs.append(python_cmd("pass").run_async())
    procs.append(python_cmd("import sys; sys.exit(2)").run_async())
    with pytest.raises(BuildError, match="exit code 2"):
        procs.wait()
    assert len(procs) == 0


def test_open_for_read_missing_file(tmp_path):
    with pytest.raises(BuildError, match="Could not open file"):
        open_for_read(tmp_path / "missing.txt")


def test_open_for_write_truncates(tmp_path):
    path = tmp_path / "f.txt"
    write_entire_file(path, "old contents")
    f = open_for_write(path)
    f.write(b"new")
    f.close()
    assert read_entire_file(path) == b"new"