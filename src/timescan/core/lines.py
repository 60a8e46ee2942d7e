"""Line readers used by the scanner.

Both readers stop quietly at the first read or decode error and log it; the
lines already produced stay valid.
"""

from __future__ import annotations

import gzip
import io
import logging
from collections.abc import AsyncIterator, Iterable, Iterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import IO

import aiofiles
from aiofiles.threadpool import wrap

logger = logging.getLogger(__name__)

LineSource = IO[bytes] | IO[str] | Iterable[bytes] | Iterable[str] | bytes | str


def _strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _decode(raw: bytes | str, *, encoding: str, decode_errors: str) -> str:
    if isinstance(raw, bytes):
        return raw.decode(encoding, errors=decode_errors)
    return raw


def _raw_lines(source: LineSource) -> Iterable[bytes] | Iterable[str]:
    if isinstance(source, bytes):
        return io.BytesIO(source)
    if isinstance(source, str):
        return io.StringIO(source, newline="\n")
    return source


def iter_lines(
    source: LineSource,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "strict",
) -> Iterator[str]:
    """Yield decoded lines without their line terminator.

    `source` can be a binary or text file object, any iterable of lines, or a
    whole bytes/str blob.
    """
    it = iter(_raw_lines(source))
    line_no = 0
    while True:
        try:
            raw = next(it)
            line = _decode(raw, encoding=encoding, decode_errors=decode_errors)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Stopped reading after %d lines: %s", line_no, e)
            return
        line_no += 1
        yield _strip_eol(line)


@asynccontextmanager
async def _open_binary(path: Path):
    """Open a file for async binary reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        af = wrap(gzip.open(path, mode="rb"))
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, mode="rb") as f:
            yield f


async def aiter_lines(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "strict",
) -> AsyncIterator[str]:
    """Async counterpart of `iter_lines` for files on disk."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {path}")

    line_no = 0
    async with _open_binary(path) as f:
        it = f.__aiter__()
        while True:
            try:
                raw = await it.__anext__()
                line = raw.decode(encoding, errors=decode_errors)
            except StopAsyncIteration:
                return
            except (OSError, EOFError, UnicodeDecodeError) as e:
                logger.warning("Stopped reading %s after %d lines: %s", path, line_no, e)
                return
            line_no += 1
            yield _strip_eol(line)
