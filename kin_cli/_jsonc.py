"""JSON-with-comments document reading.

Identity documents are hand-edited, so they may carry ``//`` line comments
and ``/* ... */`` block comments. Comments are stripped before decoding;
comment markers inside string literals are left alone.
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, NamedTuple

logger = logging.getLogger(__name__)


class DocumentRead(NamedTuple):
    """Outcome of reading one document.

    ``data`` is the comment-stripped bytes; ``document`` the decoded JSON
    value when ``parseable`` is true.
    """

    data: bytes
    found: bool
    parseable: bool
    document: Any = None


Reader = Callable[[str | Path], DocumentRead]


def strip_comments(text: str) -> str:
    """Remove ``//`` and ``/* */`` comments outside string literals.

    Line structure is preserved: a block comment spanning several lines
    drops those lines and keeps whatever follows ``*/``.
    """
    result: list[str] = []
    in_block = False

    for line in text.split("\n"):
        if in_block:
            end = line.find("*/")
            if end < 0:
                continue
            line = line[end + 2:]
            in_block = False

        cleaned: list[str] = []
        in_string = False
        escaped = False
        i = 0
        while i < len(line):
            ch = line[i]
            if escaped:
                cleaned.append(ch)
                escaped = False
                i += 1
                continue
            if ch == "\\":
                cleaned.append(ch)
                escaped = True
                i += 1
                continue
            if ch == '"':
                in_string = not in_string
                cleaned.append(ch)
                i += 1
                continue
            if not in_string and line.startswith("//", i):
                break
            if not in_string and line.startswith("/*", i):
                end = line.find("*/", i + 2)
                if end < 0:
                    in_block = True
                    break
                i = end + 2
                continue
            cleaned.append(ch)
            i += 1

        result.append("".join(cleaned))

    return "\n".join(result)


def read_document(path: str | Path) -> DocumentRead:
    """Read and decode a JSONC document without raising.

    A missing file, a directory, or an unusable path (e.g. one with a NUL
    byte) yields ``found=False``. Non-UTF-8 bytes, invalid JSON, or JSON the
    decoder refuses (oversized integers, runaway nesting) yield
    ``parseable=False``.
    """
    path = Path(path).expanduser()
    try:
        raw = path.read_bytes()
    except (OSError, ValueError) as e:
        logger.debug(f"Document not readable at {path}: {e}")
        return DocumentRead(b"", found=False, parseable=False)

    try:
        text = strip_comments(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        logger.debug(f"Document at {path} is not UTF-8: {e}")
        return DocumentRead(raw, found=True, parseable=False)

    data = text.encode("utf-8")
    try:
        document = json.loads(text)
    except (ValueError, RecursionError) as e:
        logger.debug(f"Document at {path} is not valid JSON: {e}")
        return DocumentRead(data, found=True, parseable=False)

    return DocumentRead(data, found=True, parseable=True, document=document)
