"""A mutable view over a string that can be chopped and trimmed in place."""

from __future__ import annotations

# Characters treated as whitespace by the C locale's isspace().
_WHITESPACE = " \t\n\v\f\r"


class StringView:
    """A string that is consumed from the left by chopping operations.

    ``chop_by_delim`` and ``chop_left`` shrink the view and return the part
    that was removed. The trimming operations return new views and leave
    this one untouched.
    """

    __slots__ = ("data",)

    def __init__(self, data: str = "") -> None:
        self.data = str(data)

    def chop_by_delim(self, delim: str) -> StringView:
        """Remove and return everything before the first ``delim``.

        The delimiter itself is dropped. If it does not occur, the whole
        view is returned and this view becomes empty.
        """
        if len(delim) != 1:
            raise ValueError("delimiter must be a single character")
        head, found, tail = self.data.partition(delim)
        self.data = tail if found else ""
        return StringView(head)

    def chop_left(self, n: int) -> StringView:
        """Remove and return the first ``n`` characters (fewer if shorter)."""
        if n < 0:
            raise ValueError("cannot chop a negative number of characters")
        head, self.data = self.data[:n], self.data[n:]
        return StringView(head)

    def trim_left(self) -> StringView:
        """Return a view without leading whitespace."""
        return StringView(self.data.lstrip(_WHITESPACE))

    def trim_right(self) -> StringView:
        """Return a view without trailing whitespace."""
        return StringView(self.data.rstrip(_WHITESPACE))

    def trim(self) -> StringView:
        """Return a view without leading and trailing whitespace."""
        return self.trim_left().trim_right()

    def starts_with(self, prefix: str | StringView) -> bool:
        """Tell whether the view begins with ``prefix``."""
        return self.data.startswith(str(prefix))

    def ends_with(self, suffix: str | StringView) -> bool:
        """Tell whether the view ends with ``suffix``."""
        return self.data.endswith(str(suffix))

    def __str__(self) -> str:
        return self.data

    def __repr__(self) -> str:
        return f"StringView({self.data!r})"

    def __len__(self) -> int:
        return len(self.data)

    def __bool__(self) -> bool:
        return bool(self.data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringView):
            return self.data == other.data
        if isinstance(other, str):
            return self.data == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]