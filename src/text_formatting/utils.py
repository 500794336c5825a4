from __future__ import annotations

import os
import re
import stat
import tempfile
import time
import unicodedata
from pathlib import Path


TAG_RE = re.compile(r"<[^>]+>")
SLUG_DISALLOWED_RE = re.compile(r"[^a-z0-9\s-]")
SLUG_SEPARATOR_RE = re.compile(r"[\s_]+")
SLUG_DASHES_RE = re.compile(r"-{2,}")
BLANK_RUN_RE = re.compile(r"\n{3,}")

# "&" must be first when escaping and "&amp;" last when unescaping.
_ESCAPES: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)
_UNESCAPES: tuple[tuple[str, str], ...] = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&nbsp;", " "),
    ("&amp;", "&"),
)


def escape_html(text: str) -> str:
    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text


def unescape_html(text: str) -> str:
    for entity, char in _UNESCAPES:
        text = text.replace(entity, char)
    return text


def strip_tags(fragment: str) -> str:
    return TAG_RE.sub("", fragment)


def slugify(title: str) -> str:
    """Turn free text into a ``[a-z0-9-]`` token suitable for URLs and filenames.

    Accented letters keep their base letter, everything else outside the
    allowed set is dropped. The result may be empty.
    """

    value = unicodedata.normalize("NFD", title.lower())
    value = "".join(char for char in value if not unicodedata.combining(char))
    value = SLUG_DISALLOWED_RE.sub("", value).strip()
    value = SLUG_SEPARATOR_RE.sub("-", value)
    value = SLUG_DASHES_RE.sub("-", value)
    return value.strip("-")


def collapse_blank_lines(text: str) -> str:
    return BLANK_RUN_RE.sub("\n\n", text).strip()


def elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


# Read once at import; os.umask can only be queried by setting it.
UMASK = _current_umask()


def _target_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        return 0o666 & ~UMASK


def atomic_write(path: Path, data: str, encoding: str = "utf-8") -> None:
    """Replace *path* with *data* without exposing a partially written file.

    An existing file keeps its permission bits; a new one gets the mode a
    plain ``open()`` would have given it.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    mode = _target_mode(path)
    tmp = tempfile.NamedTemporaryFile("w", delete=False, dir=path.parent, encoding=encoding, newline="")
    tmp_path = Path(tmp.name)
    try:
        with tmp:
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
