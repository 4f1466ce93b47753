"""File-system helpers for build scripts: directories, files, timestamps, cwd."""

from __future__ import annotations

import enum
import errno
import os
import shutil
import stat
from collections.abc import Iterable

from nobuild.log import BuildError, LogLevel, log


class FileType(enum.Enum):
    """Kind of a file-system entry."""

    REGULAR = 0
    DIRECTORY = 1
    SYMLINK = 2
    OTHER = 3


def mkdir_if_not_exists(path: str | os.PathLike[str]) -> bool:
    """Create a directory with mode 0755.

    Returns True if it was created and False if it already existed.
    Raises BuildError on any other failure.
    """
    path = os.fspath(path)
    try:
        os.mkdir(path, 0o755)
    except FileExistsError:
        log(LogLevel.INFO, "directory `%s` already exists", path)
        return False
    except OSError as exc:
        raise BuildError(f"could not create directory `{path}`: {exc.strerror}") from exc
    log(LogLevel.INFO, "created directory `%s`", path)
    return True


def copy_file(src_path: str | os.PathLike[str], dst_path: str | os.PathLike[str]) -> None:
    """Copy a file's contents and permission bits, truncating the destination."""
    src_path, dst_path = os.fspath(src_path), os.fspath(dst_path)
    log(LogLevel.INFO, "copying %s -> %s", src_path, dst_path)
    try:
        with open(src_path, "rb") as src:
            mode = stat.S_IMODE(os.fstat(src.fileno()).st_mode)
            fd = os.open(dst_path, os.O_CREAT | os.O_TRUNC | os.O_WRONLY, mode)
            with open(fd, "wb") as dst:
                shutil.copyfileobj(src, dst, 32 * 1024)
    except OSError as exc:
        name = exc.filename or src_path
        raise BuildError(f"could not copy {src_path} to {dst_path}: {name}: {exc.strerror}") from exc


def copy_directory_recursively(
    src_path: str | os.PathLike[str], dst_path: str | os.PathLike[str]
) -> None:
    """Copy a directory tree. Symlinks are skipped with a warning."""
    src_path, dst_path = os.fspath(src_path), os.fspath(dst_path)
    file_type = get_file_type(src_path)
    if file_type is FileType.DIRECTORY:
        mkdir_if_not_exists(dst_path)
        for child in read_entire_dir(src_path):
            if child in (".", ".."):
                continue
            copy_directory_recursively(f"{src_path}/{child}", f"{dst_path}/{child}")
    elif file_type is FileType.REGULAR:
        copy_file(src_path, dst_path)
    elif file_type is FileType.SYMLINK:
        log(LogLevel.WARNING, "Copying symlinks is not supported yet")
    else:
        raise BuildError(f"Unsupported type of file {src_path}")


def read_entire_dir(parent: str | os.PathLike[str]) -> list[str]:
    """Return the names of the entries of a directory."""
    parent = os.fspath(parent)
    try:
        return os.listdir(parent)
    except OSError as exc:
        raise BuildError(f"Could not open directory {parent}: {exc.strerror}") from exc


def write_entire_file(path: str | os.PathLike[str], data: bytes | str) -> None:
    """Write ``data`` to ``path``, replacing any previous contents."""
    path = os.fspath(path)
    if isinstance(data, str):
        data = data.encode("utf-8")
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as exc:
        raise BuildError(f"Could not write file {path}: {exc.strerror}") from exc


def read_entire_file(path: str | os.PathLike[str]) -> bytes:
    """Return the whole contents of a file."""
    path = os.fspath(path)
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as exc:
        raise BuildError(f"Could not read file {path}: {exc.strerror}") from exc


def get_file_type(path: str | os.PathLike[str]) -> FileType:
    """Classify the entry at ``path`` (symlinks are followed)."""
    path = os.fspath(path)
    try:
        mode = os.stat(path).st_mode
    except OSError as exc:
        raise BuildError(f"Could not get stat of {path}: {exc.strerror}") from exc
    if stat.S_ISREG(mode):
        return FileType.REGULAR
    if stat.S_ISDIR(mode):
        return FileType.DIRECTORY
    if stat.S_ISLNK(mode):
        return FileType.SYMLINK
    return FileType.OTHER


def delete_file(path: str | os.PathLike[str]) -> None:
    """Remove a file (or an empty directory)."""
    path = os.fspath(path)
    log(LogLevel.INFO, "deleting %s", path)
    try:
        if os.path.isdir(path) and not os.path.islink(path):
            os.rmdir(path)
        else:
            os.remove(path)
    except OSError as exc:
        raise BuildError(f"Could not delete file {path}: {exc.strerror}") from exc


def rename(old_path: str | os.PathLike[str], new_path: str | os.PathLike[str]) -> None:
    """Rename ``old_path`` to ``new_path``, replacing an existing target."""
    old_path, new_path = os.fspath(old_path), os.fspath(new_path)
    log(LogLevel.INFO, "renaming %s -> %s", old_path, new_path)
    try:
        os.replace(old_path, new_path)
    except OSError as exc:
        raise BuildError(f"could not rename {old_path} to {new_path}: {exc.strerror}") from exc


def needs_rebuild(
    output_path: str | os.PathLike[str],
    input_paths: Iterable[str | os.PathLike[str]],
) -> bool:
    """Tell whether ``output_path`` is missing or older than any input.

    Modification times are compared at one-second resolution. A missing
    input raises BuildError, since it is needed for building.
    """
    output_path = os.fspath(output_path)
    try:
        output_time = int(os.stat(output_path).st_mtime)
    except FileNotFoundError:
        return True
    except OSError as exc:
        raise BuildError(f"could not stat {output_path}: {exc.strerror}") from exc

    for input_path in input_paths:
        input_path = os.fspath(input_path)
        try:
            input_time = int(os.stat(input_path).st_mtime)
        except OSError as exc:
            raise BuildError(f"could not stat {input_path}: {exc.strerror}") from exc
        if input_time > output_time:
            return True
    return False


def needs_rebuild1(
    output_path: str | os.PathLike[str], input_path: str | os.PathLike[str]
) -> bool:
    """Single-input form of :func:`needs_rebuild`."""
    return needs_rebuild(output_path, [input_path])


def file_exists(path: str | os.PathLike[str]) -> bool:
    """Tell whether ``path`` exists; errors other than absence raise BuildError."""
    path = os.fspath(path)
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except OSError as exc:
        if exc.errno == errno.ENOENT:
            return False
        raise BuildError(f"Could not check if file {path} exists: {exc.strerror}") from exc
    return True


def get_current_dir() -> str:
    """Return the current working directory."""
    try:
        return os.getcwd()
    except OSError as exc:
        raise BuildError(f"could not get current directory: {exc.strerror}") from exc


def set_current_dir(path: str | os.PathLike[str]) -> None:
    """Change the current working directory."""
    path = os.fspath(path)
    try:
        os.chdir(path)
    except OSError as exc:
        raise BuildError(f"could not set current directory to {path}: {exc.strerror}") from exc


def path_name(path: str) -> str:
    """Return the last component of ``path``: "/a/b/file.c" -> "file.c"."""
    separators = "/\\" if os.name == "nt" else "/"
    cut = max(path.rfind(sep) for sep in separators)
    return path[cut + 1:]