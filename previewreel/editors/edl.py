"""EDL editor — writes and reads mpv EDL playlists.

Format reference: https://github.com/mpv-player/mpv/blob/master/DOCS/edl-mpv.rst

Each clip line is ``<file>,<start>,<length>``. File names are written with
mpv's length specifier (``%<bytes>%<name>``) so that commas and other
special characters in a path never need quoting.
"""

from pathlib import Path
from typing import Iterable, Protocol

from previewreel.models import Clip

EDL_HEADER = "# mpv EDL v0"

# Undecodable filename bytes survive as lone surrogates; round-trip them as-is.
_FS_ERRORS = "surrogateescape"


class EdlFormatError(ValueError):
    """Raised when a playlist does not follow the mpv EDL syntax."""
    pass


class _ClipLike(Protocol):
    path: object
    start: int
    length: int


def _is_decimal(text: str) -> bool:
    return text.isascii() and text.isdigit()


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8", _FS_ERRORS))


def escape_path(path: str | Path) -> str:
    raw = str(path)
    return f"%{_byte_length(raw)}%{raw}"


def _line_end(text: str, pos: int) -> int:
    end = text.find("\n", pos)
    return len(text) if end == -1 else end


def _read_prefix(text: str, pos: int) -> tuple[int, int]:
    """Parse ``%<n>%`` at *pos*; return ``(n, index of the first path character)``."""
    end = text.find("%", pos + 1)
    if end == -1 or not _is_decimal(text[pos + 1:end]):
        raise EdlFormatError(f"bad length prefix in {text[pos:_line_end(text, pos)]!r}")
    return int(text[pos + 1:end]), end + 1


def _skip_bytes(text: str, pos: int, n: int) -> int:
    """Index just past the characters starting at *pos* that encode to *n* bytes."""
    start, remaining = pos, n
    while remaining > 0:
        if pos >= len(text):
            raise EdlFormatError(f"path shorter than its declared {n} bytes: {text[start:]!r}")
        remaining -= _byte_length(text[pos])
        pos += 1
    if remaining < 0:
        raise EdlFormatError(f"length prefix {n} splits a character in {text[start:pos]!r}")
    return pos


def unescape_path(field: str) -> tuple[str, str]:
    """Split a length-prefixed path off the front of *field*.

    Returns ``(path, remainder)``; the remainder starts right after the path.
    """
    if not field.startswith("%"):
        raise EdlFormatError(f"path is not length-prefixed: {field!r}")
    n, path_start = _read_prefix(field, 0)
    path_end = _skip_bytes(field, path_start, n)
    return field[path_start:path_end], field[path_end:]


def encode_edl(entries: Iterable[_ClipLike]) -> str:
    """Serialize clips into EDL text. Same entries in, same text out."""
    lines = [EDL_HEADER]
    for entry in entries:
        lines.append(f"{escape_path(entry.path)},{entry.start},{entry.length}")
    return "\n".join(lines) + "\n"


def write_edl(output_path: Path, entries: Iterable[_ClipLike]) -> Path:
    """Write the playlist to *output_path*, replacing whatever was there."""
    output_path = Path(output_path)
    with open(output_path, "w", encoding="utf-8", errors=_FS_ERRORS, newline="\n") as f:
        f.write(encode_edl(entries))
    return output_path


def _parse_int(value: str, line: str) -> int:
    value = value.strip()
    if not _is_decimal(value):
        raise EdlFormatError(f"expected a whole number of seconds, got {value!r} in {line!r}")
    return int(value)


def _make_clip(path: str, fields: list[str], line: str) -> Clip:
    if len(fields) != 2:
        raise EdlFormatError(f"expected <file>,<start>,<length> in {line!r}")
    return Clip(path=path, start=_parse_int(fields[0], line), length=_parse_int(fields[1], line))


def _split_remainder(rest: str, line: str) -> list[str]:
    if not rest.startswith(","):
        raise EdlFormatError(f"missing field separator after path in {line!r}")
    return rest[1:].split(",")


def parse_line(line: str) -> Clip:
    if line.startswith("%"):
        path, rest = unescape_path(line)
        return _make_clip(path, _split_remainder(rest, line), line)
    path, *fields = line.split(",")
    return _make_clip(path, fields, line)


def parse_edl(text: str) -> list[Clip]:
    """Parse playlist text produced by :func:`encode_edl`.

    Comment lines (``#``) and blank lines after the header are skipped.
    A length-prefixed path is read by its byte count, so it may itself
    contain newlines.
    """
    header_end = _line_end(text, 0)
    if text[:header_end].strip() != EDL_HEADER:
        raise EdlFormatError(f"missing {EDL_HEADER!r} header")

    clips: list[Clip] = []
    pos = header_end + 1
    while pos < len(text):
        if text.startswith("%", pos):
            n, path_start = _read_prefix(text, pos)
            path_end = _skip_bytes(text, path_start, n)
            line_end = _line_end(text, path_end)
            line = text[pos:line_end]
            fields = _split_remainder(text[path_end:line_end], line)
            clips.append(_make_clip(text[path_start:path_end], fields, line))
        else:
            line_end = _line_end(text, pos)
            line = text[pos:line_end]
            if line.strip() and not line.startswith("#"):
                clips.append(parse_line(line))
        pos = line_end + 1
    return clips


def read_edl(path: Path) -> list[Clip]:
    # newline="" keeps carriage returns inside paths intact
    with open(path, encoding="utf-8", errors=_FS_ERRORS, newline="") as f:
        return parse_edl(f.read())
