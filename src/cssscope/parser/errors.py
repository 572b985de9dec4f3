"""Parser error types."""

from __future__ import annotations


def line_col(source: str, offset: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of *offset* within *source*."""
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, column


class ParseError(Exception):
    """Raised when scoped CSS source cannot be rewritten."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class UnclosedScopeBlock(ParseError):
    """An opening ``SCOPE`` marker has no matching ``END`` marker."""

    def __init__(self, scope_name: str, offset: int, source: str):
        self.scope_name = scope_name
        self.offset = offset
        line, column = line_col(source, offset)
        super().__init__(
            f"unclosed scope block {scope_name!r} at line {line}, column {column}",
            line=line,
            column=column,
        )


class UnterminatedComment(ParseError):
    """A ``/*`` comment never reaches its closing ``*/``.

    Only raised when strict comment handling is enabled.
    """

    def __init__(self, offset: int, source: str):
        self.offset = offset
        line, column = line_col(source, offset)
        super().__init__(
            f"unterminated comment at line {line}, column {column}",
            line=line,
            column=column,
        )
