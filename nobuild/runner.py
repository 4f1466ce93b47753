"""Builds and runs the C test programs and the example build scripts."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from nobuild.cmd import Cmd
from nobuild.fs import get_current_dir, mkdir_if_not_exists, set_current_dir
from nobuild.log import BuildError, LogLevel, log

# Folders end with a forward slash.
BUILD_FOLDER = "build/"
TESTS_FOLDER = "tests/"
EXAMPLES_FOLDER = "how_to"

if sys.platform == "darwin":
    CC_FLAGS: tuple[str, ...] = ("-Wall", "-Wextra", "-Wswitch-enum", "-I.")
else:
    CC_FLAGS = (
        "-Wall",
        "-Wextra",
        "-Wswitch-enum",
        "-std=c99",
        "-D_POSIX_SOURCE",
        "-ggdb",
        "-I.",
    )

TEST_NAMES: list[str] = [
    "minimal_log_level",
    "nob_sv_end_with",
    "set_get_current_dir",
    "cmd_redirect",
    *(["win32_error"] if os.name == "nt" else []),
    "read_entire_dir",
    "da_resize",
    "da_last",
    "da_remove_unordered",
    "da_append",
    "sb_appendf",
    "da_foreach",
]

EXAMPLES: tuple[str, ...] = (
    "001_basic_usage",
    "005_parallel_build",
    "010_nob_two_stage",
)


def build_and_run_test(cmd: Cmd, test_name: str) -> None:
    """Compile ``tests/<name>.c`` and run it inside its own working directory."""
    bin_path = f"{BUILD_FOLDER}{TESTS_FOLDER}{test_name}"
    src_path = f"{TESTS_FOLDER}{test_name}.c"
    cmd.cc()
    cmd.cc_flags(*CC_FLAGS)
    cmd.cc_output(bin_path)
    cmd.cc_inputs(src_path)
    cmd.run_sync(reset=True)

    test_cwd_path = f"{bin_path}.cwd"
    mkdir_if_not_exists(test_cwd_path)
    previous = get_current_dir()
    set_current_dir(test_cwd_path)
    try:
        cmd.append(f"../{test_name}")
        cmd.run_sync(reset=True)
    finally:
        set_current_dir(previous)

    log(LogLevel.INFO, "--- %s finished ---", bin_path)


def build_examples(cmd: Cmd, examples_dir: str = EXAMPLES_FOLDER) -> None:
    """Bootstrap and run the build script of every example."""
    root = get_current_dir()
    for example in EXAMPLES:
        log(LogLevel.INFO, "--- %s ---", example)
        set_current_dir(os.path.join(examples_dir, example))
        try:
            cmd.cc()
            cmd.cc_output("./nob")
            cmd.cc_inputs("nob.c")
            cmd.run_sync(reset=True)

            cmd.append("./nob")
            cmd.run_sync(reset=True)
        finally:
            set_current_dir(root)


def _run(command: str, args: Sequence[str], program_name: str) -> int:
    cmd = Cmd()
    mkdir_if_not_exists(BUILD_FOLDER)
    mkdir_if_not_exists(BUILD_FOLDER + TESTS_FOLDER)

    if command == "test":
        for name in args or TEST_NAMES:
            build_and_run_test(cmd, name)
        return 0

    if command == "list":
        log(LogLevel.INFO, "Tests:")
        for name in TEST_NAMES:
            log(LogLevel.INFO, "    %s", name)
        log(LogLevel.INFO, "Use %s test <names...> to run individual tests", program_name)
        return 0

    if command == "examples":
        build_examples(cmd, args[0] if args else EXAMPLES_FOLDER)
        return 0

    log(LogLevel.ERROR, "Unknown command %s", command)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: ``test [names...]`` (default), ``list`` or ``examples [dir]``."""
    args = list(sys.argv[1:] if argv is None else argv)
    program_name = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "nobuild"
    command = args.pop(0) if args else "test"
    try:
        return _run(command, args, program_name)
    except BuildError as exc:
        log(LogLevel.ERROR, "%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())