"""Document assembly and output writing.

The output document is the fixed header, then (optionally) the base
document, then each resolved module in argument order. Every included
fragment is followed by SEPARATOR. File contents are copied verbatim.
"""

import os
import tempfile
from collections.abc import Callable
from dataclasses import dataclass, field

from handbook_combiner.catalog import Resolution, resolve_modules
from handbook_combiner.config import BASE_DOCUMENT, DOCUMENT_HEADER, SEPARATOR
from handbook_combiner.utils import count_lines


@dataclass
class CombineResult:
    """Assembled document plus per-module resolution status."""

    content: str
    resolutions: list[Resolution] = field(default_factory=list)
    base_included: bool = False

    @property
    def missing(self) -> list[str]:
        return [r.reference for r in self.resolutions if not r.found]

    @property
    def line_count(self) -> int:
        return count_lines(self.content)


def _read_verbatim(path: str) -> str:
    # newline="" keeps CRLF as-is; surrogateescape round-trips non-UTF-8 bytes
    with open(path, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
        return f.read()


def read_base_document(root: str) -> str | None:
    """Return the base document's contents, or None if it doesn't exist."""
    path = os.path.join(root, BASE_DOCUMENT)
    if not os.path.isfile(path):
        return None
    return _read_verbatim(path)


def build_document(
    root: str,
    references: list[str],
    include_base: bool = True,
    on_resolve: Callable[[Resolution], None] | None = None,
) -> CombineResult:
    """Assemble the combined document from module references.

    Unresolved references are recorded in the result and skipped; they never
    abort the run. *on_resolve* is called for the base document (when
    included) and for every reference, in output order.
    """
    parts = [DOCUMENT_HEADER]
    result = CombineResult(content="")

    if include_base:
        base = read_base_document(root)
        if base is not None:
            parts.append(base)
            parts.append(SEPARATOR)
            result.base_included = True
            if on_resolve:
                on_resolve(Resolution(BASE_DOCUMENT, os.path.join(root, BASE_DOCUMENT)))

    for resolution in resolve_modules(root, references):
        result.resolutions.append(resolution)
        if on_resolve:
            on_resolve(resolution)
        if not resolution.found:
            continue
        parts.append(_read_verbatim(resolution.path))
        parts.append(SEPARATOR)

    result.content = "".join(parts)
    return result


def write_document(path: str, content: str) -> None:
    """Write *content* to *path*, fully replacing any existing file.

    Creates the parent directory if needed. The content goes to a temp file
    in the same directory first and is moved into place with os.replace, so
    the target is never left half-written.
    """
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    fd, temp_path = tempfile.mkstemp(dir=directory, prefix=".handbook-", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
            f.write(content)
        os.chmod(temp_path, 0o644)
        os.replace(temp_path, path)
    except BaseException:
        try:
            os.remove(temp_path)
        except OSError:
            pass
        raise


def combine(
    root: str,
    references: list[str],
    output: str,
    include_base: bool = True,
    on_resolve: Callable[[Resolution], None] | None = None,
) -> CombineResult:
    """Build the combined document and write it to *output*."""
    result = build_document(root, references, include_base=include_base, on_resolve=on_resolve)
    write_document(output, result.content)
    return result
