"""Build scripts in plain Python: commands, processes, files, logging and a C test runner."""

__version__ = "1.20.2"
__all__ = ["arrays", "cmd", "fs", "log", "runner", "stringview"]