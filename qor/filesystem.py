"""Path-string helpers and simple file lookup and loading."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional, Union

PathLike = Union[str, os.PathLike]


def _last_sep(path: str) -> int:
    return max(path.rfind("\\"), path.rfind("/"))


def get_file_name(path: str) -> str:
    """The last component of a path, extension included."""
    split = _last_sep(path)
    return path[split + 1:] if split >= 0 else path


def get_path(path: str) -> str:
    """Everything up to and including the last separator, or ""."""
    split = _last_sep(path)
    return path[:split + 1] if split >= 0 else ""


def get_extension(path: str) -> str:
    """Text after the last dot, or ""."""
    split = path.rfind(".")
    return path[split + 1:] if split >= 0 else ""


def cut_extension(path: str) -> str:
    """Text before the last dot; "" when there is no dot."""
    split = path.rfind(".")
    return path[:split] if split >= 0 else ""


def cut_internal(path: str) -> str:
    """Drop an embedded path such as the ":inner.txt" in "file.zip:inner.txt"."""
    split = path.find(":", 2)
    return path[:split] if split >= 0 else path


def has_internal(path: str) -> bool:
    return path.find(":", 2) >= 0


def get_internal(path: str) -> str:
    split = path.find(":", 2)
    return path[split + 1:] if split >= 0 else ""


def change_extension(path: str, ext: str) -> str:
    return cut_extension(path) + "." + ext


def get_file_name_no_ext(path: str) -> str:
    return cut_extension(get_file_name(path))


def get_file_name_no_internal(path: str) -> str:
    """File name of the outer path followed by ":" and the embedded path."""
    internals = get_internal(path)
    return get_file_name(cut_internal(path)) + ":" + internals


def has_extension(path: str, ext: Optional[str] = None) -> bool:
    """With ``ext``, test case-insensitively for it; else test for any extension."""
    if ext is not None:
        if ext and not ext.startswith("."):
            ext = "." + ext
        return path.lower().endswith(ext.lower())
    dot = path.rfind(".")
    if dot < 0:
        return False
    sep = _last_sep(path)
    if sep < 0:
        return True
    return dot > sep


def path_compare(a: PathLike, b: PathLike) -> bool:
    """Whether two paths name the same file; raises if neither exists."""
    stats = []
    for p in (a, b):
        try:
            stats.append(os.stat(p))
        except FileNotFoundError:
            stats.append(None)
    first, second = stats
    if first is None and second is None:
        raise FileNotFoundError(f"neither {a!s} nor {b!s} exists")
    if first is None or second is None:
        return False
    return os.path.samestat(first, second)


def locate(
    fn: str,
    paths: Iterable[PathLike],
    extensions: Iterable[str] = (),
) -> Optional[Path]:
    """Find ``fn`` in the search paths, trying extensions if it has none.

    A name that already contains a separator or ":" is returned as is.
    Returns None when nothing is found.
    """
    if any(ch in fn for ch in ("\\", "/", ":")):
        return Path(fn)
    extensions = list(extensions)
    for search_path in paths:
        path = Path(search_path) / fn
        if not path.suffix:
            for ext in extensions:
                candidate = path.with_suffix("." + ext)
                if candidate.exists():
                    return candidate
        elif path.exists():
            return path
    return None


def file_to_buffer(fn: PathLike) -> bytes:
    """File contents followed by a NUL byte; empty if the file can't be read."""
    try:
        with open(fn, "rb") as handle:
            return handle.read() + b"\0"
    except OSError:
        return b""


def file_to_string(fn: PathLike) -> str:
    """File contents as text; empty if the file can't be read."""
    try:
        with open(fn, encoding="utf-8", errors="replace", newline="") as handle:
            return handle.read()
    except OSError:
        return ""