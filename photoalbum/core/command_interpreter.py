"""Command Interpreter - runs a textual command script against a PhotoAlbum.

Invariants:
    - Blank lines and lines starting with '#' are skipped
    - The first token picks the command (case-insensitive); the rest are its
      fixed positional arguments
    - The first failing line halts the batch: later lines are not even read,
      earlier lines stay applied (no rollback)
    - Every halt is reported once, as a BatchResult carrying the line number,
      the line and the error - never a silent skip
    - A `shape` line either applies completely or not at all

Design Decisions:
    - parse_command is pure (text -> Command value); execute() is the only
      place that touches the album
    - Explicit verb -> parser dict: every command visible in one place
    - BatchResult instead of raising: the host decides whether a halt is
      fatal (raise_for_error() for callers that want an exception)
"""

import logging
import math
import re
from collections.abc import Iterable
from dataclasses import dataclass

from photoalbum.core.album import PhotoAlbum
from photoalbum.core.domain_types import COLOR_CHANNEL_MAX, BatchStatus, ShapeKind
from photoalbum.core.errors import (
    CommandBatchError,
    CommandFormatError,
    DuplicateNameError,
    InvalidColorError,
    PhotoAlbumError,
)
from photoalbum.core.shape import validate_color, validate_dimensions

logger = logging.getLogger(__name__)

_FLOAT_TOKEN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
_INT_TOKEN = re.compile(r"[+-]?\d+")


# ─── Command Values ──────────────────────────────────────────────

@dataclass(frozen=True)
class AddShapeCommand:
    name: str
    shape_type: str
    x: float
    y: float
    first: float
    second: float
    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class MoveCommand:
    name: str
    x: float
    y: float


@dataclass(frozen=True)
class ColorCommand:
    name: str
    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class ResizeCommand:
    name: str
    first: float
    second: float


@dataclass(frozen=True)
class RemoveCommand:
    name: str


@dataclass(frozen=True)
class SnapshotCommand:
    description: str = ""


Command = (
    AddShapeCommand | MoveCommand | ColorCommand
    | ResizeCommand | RemoveCommand | SnapshotCommand
)


# ─── Parsing ─────────────────────────────────────────────────────

def _float(token: str, line_number: int | None, verb: str) -> float:
    if not _FLOAT_TOKEN.fullmatch(token):
        raise CommandFormatError(
            f"'{verb}': expected a number, got {token!r}", line_number, verb,
        )
    value = float(token)
    if not math.isfinite(value):
        raise CommandFormatError(
            f"'{verb}': number out of range, got {token!r}", line_number, verb,
        )
    return value


def _int(token: str, line_number: int | None, verb: str) -> int:
    if not _INT_TOKEN.fullmatch(token):
        raise CommandFormatError(
            f"'{verb}': expected an integer, got {token!r}", line_number, verb,
        )
    try:
        return int(token)
    except ValueError as e:
        # int() refuses strings past sys.get_int_max_str_digits()
        raise CommandFormatError(
            f"'{verb}': integer too long", line_number, verb,
        ) from e


def _tokens(rest: str, count: int, line_number: int | None, verb: str) -> list[str]:
    tokens = rest.split()
    if len(tokens) != count:
        raise CommandFormatError(
            f"'{verb}' takes {count} argument(s), got {len(tokens)}",
            line_number, verb,
        )
    return tokens


def _parse_shape(rest: str, n: int | None) -> AddShapeCommand:
    name, shape_type, x, y, first, second, r, g, b = _tokens(rest, 9, n, "shape")
    return AddShapeCommand(
        name, shape_type,
        _float(x, n, "shape"), _float(y, n, "shape"),
        _float(first, n, "shape"), _float(second, n, "shape"),
        _int(r, n, "shape"), _int(g, n, "shape"), _int(b, n, "shape"),
    )


def _parse_move(rest: str, n: int | None) -> MoveCommand:
    name, x, y = _tokens(rest, 3, n, "move")
    return MoveCommand(name, _float(x, n, "move"), _float(y, n, "move"))


def _parse_color(rest: str, n: int | None) -> ColorCommand:
    name, r, g, b = _tokens(rest, 4, n, "color")
    return ColorCommand(
        name, _int(r, n, "color"), _int(g, n, "color"), _int(b, n, "color"),
    )


def _parse_resize(rest: str, n: int | None) -> ResizeCommand:
    name, first, second = _tokens(rest, 3, n, "resize")
    return ResizeCommand(name, _float(first, n, "resize"), _float(second, n, "resize"))


def _parse_remove(rest: str, n: int | None) -> RemoveCommand:
    (name,) = _tokens(rest, 1, n, "remove")
    return RemoveCommand(name)


def _parse_snapshot(rest: str, n: int | None) -> SnapshotCommand:
    return SnapshotCommand(rest.strip())


_PARSERS = {
    "shape": _parse_shape,
    "move": _parse_move,
    "color": _parse_color,
    "resize": _parse_resize,
    "remove": _parse_remove,
    "snapshot": _parse_snapshot,
}


def is_skippable(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def parse_command(line: str, line_number: int | None = None) -> Command:
    """Parse one non-blank, non-comment line. Raises CommandFormatError."""
    parts = line.strip().split(None, 1)
    if not parts:
        raise CommandFormatError("empty command line", line_number)
    verb = parts[0].lower()
    rest = parts[1] if len(parts) > 1 else ""
    parser = _PARSERS.get(verb)
    if parser is None:
        raise CommandFormatError(f"unknown command '{parts[0]}'", line_number, verb)
    return parser(rest, line_number)


def _channels(red: int, green: int, blue: int) -> tuple[float, float, float]:
    try:
        return (
            red / COLOR_CHANNEL_MAX, green / COLOR_CHANNEL_MAX, blue / COLOR_CHANNEL_MAX,
        )
    except OverflowError as e:
        raise InvalidColorError(red, green, blue) from e


# ─── Batch Result ────────────────────────────────────────────────

@dataclass(frozen=True)
class BatchResult:
    """Outcome of one batch: completed, or halted at a specific line."""
    status: BatchStatus
    commands_executed: int
    lines_read: int
    line_number: int | None = None
    line: str | None = None
    error: PhotoAlbumError | None = None

    @property
    def ok(self) -> bool:
        return self.status is BatchStatus.COMPLETED

    def raise_for_error(self) -> None:
        """Raise CommandBatchError (chained to the cause) if the batch halted."""
        if self.error is None:
            return
        raise CommandBatchError(
            self.line_number or 0, self.line or "", self.error,
        ) from self.error


# ─── Interpreter ─────────────────────────────────────────────────

class CommandInterpreter:
    """Applies command scripts to one album, halting on the first error."""

    def __init__(self, album: PhotoAlbum):
        self._album = album

    def execute(self, command: Command) -> None:
        album = self._album
        match command:
            case AddShapeCommand():
                self._add_shape(command)
            case MoveCommand(name=name, x=x, y=y):
                album.move(name, x, y)
            case ColorCommand(name=name, red=r, green=g, blue=b):
                album.set_color(name, *_channels(r, g, b))
            case ResizeCommand(name=name, first=first, second=second):
                album.resize(name, first, second)
            case RemoveCommand(name=name):
                album.remove_shape(name)
            case SnapshotCommand(description=description):
                album.take_snapshot(description)
            case _:
                raise TypeError(f"Not a command: {command!r}")

    def _add_shape(self, command: AddShapeCommand) -> None:
        # Everything that can fail is checked before the shape exists
        if command.name in self._album.store:
            raise DuplicateNameError(command.name)
        kind = ShapeKind.parse(command.shape_type)
        color = validate_color(*_channels(command.red, command.green, command.blue))
        first, second = validate_dimensions(command.first, command.second)

        shape = self._album.add_shape(command.name, kind)
        shape.set_color(*color)
        shape.resize(first, second)
        shape.move(command.x, command.y)

    def run(self, lines: Iterable[str]) -> BatchResult:
        """Run lines in order; stop at the first failing one."""
        executed = 0
        lines_read = 0
        for line_number, line in enumerate(lines, start=1):
            lines_read = line_number
            if is_skippable(line):
                continue
            text = line.strip()
            try:
                self.execute(parse_command(text, line_number))
            except PhotoAlbumError as e:
                if e.context.line_number is None:
                    e.context.line_number = line_number
                if e.context.command is None:
                    e.context.command = text
                logger.warning(
                    "Command batch halted at line %d: %s", line_number, e.message,
                    extra={
                        "line_number": line_number, "command": text,
                        "error_code": e.code,
                    },
                )
                return BatchResult(
                    BatchStatus.HALTED, executed, lines_read,
                    line_number=line_number, line=text, error=e,
                )
            executed += 1
        logger.info("Command batch completed (%d commands)", executed)
        return BatchResult(BatchStatus.COMPLETED, executed, lines_read)

    def run_text(self, script: str) -> BatchResult:
        return self.run(script.splitlines())
