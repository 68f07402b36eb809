"""Module catalog: reference normalization, path resolution, and listing.

A module reference is either namespaced ("languages/typescript"), a full
skill path ("skills/languages/typescript"), or bare ("typescript"). Bare
references are probed across namespaces in PROBE_ORDER, never in
filesystem enumeration order, so resolution is deterministic.
"""

import os
from dataclasses import dataclass

from handbook_combiner.config import (
    MODULE_EXTENSION,
    NAMESPACE_DIRS,
    PROBE_ORDER,
    SKILLS_PREFIX,
)


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one module reference."""

    reference: str
    path: str | None

    @property
    def found(self) -> bool:
        return self.path is not None


def normalize_reference(reference: str) -> str:
    """Normalize a module reference for lookup.

    Pure function: trims whitespace, converts backslashes to slashes, drops a
    leading './', and strips one trailing '.md' extension.
    """
    ref = reference.strip().replace("\\", "/")
    while ref.startswith("./"):
        ref = ref[2:]
    if ref.endswith(MODULE_EXTENSION):
        ref = ref[: -len(MODULE_EXTENSION)]
    return ref


def _is_safe_reference(ref: str) -> bool:
    """Reject empty, absolute, or parent-traversing references."""
    if not ref or os.path.isabs(ref):
        return False
    return all(part not in ("", "..") for part in ref.split("/"))


def split_namespace(ref: str) -> tuple[str, str] | None:
    """Split 'namespace/name' into its parts if the prefix is a known namespace.

    Pure function: returns None for bare references and unknown prefixes.
    """
    namespace, sep, name = ref.partition("/")
    if sep and namespace in NAMESPACE_DIRS and name:
        return namespace, name
    return None


def candidate_paths(root: str, reference: str) -> list[str]:
    """Return the file paths a reference could resolve to, in priority order.

    Pure function over strings: nothing is checked on disk.
    """
    ref = normalize_reference(reference)
    if not _is_safe_reference(ref):
        return []

    filename = ref + MODULE_EXTENSION
    split = split_namespace(ref)
    if split:
        namespace, name = split
        return [os.path.join(root, NAMESPACE_DIRS[namespace], name + MODULE_EXTENSION)]
    if ref.startswith(SKILLS_PREFIX):
        return [os.path.join(root, filename)]
    return [os.path.join(root, NAMESPACE_DIRS[ns], filename) for ns in PROBE_ORDER]


def resolve_module_path(root: str, reference: str) -> str | None:
    """Resolve a module reference to an existing file under *root*.

    Returns the first candidate path that is a regular file, or None.
    """
    for path in candidate_paths(root, reference):
        if os.path.isfile(path):
            return path
    return None


def resolve_modules(root: str, references: list[str]) -> list[Resolution]:
    """Resolve every reference in order. Duplicates are kept."""
    return [Resolution(ref, resolve_module_path(root, ref)) for ref in references]


def list_modules(root: str) -> dict[str, list[str]]:
    """List resolvable modules grouped by namespace.

    Returns {namespace: ["namespace/name", ...]} in PROBE_ORDER, each list
    sorted. Missing namespace directories yield an empty list.
    """
    catalog: dict[str, list[str]] = {}
    for namespace in PROBE_ORDER:
        directory = os.path.join(root, NAMESPACE_DIRS[namespace])
        try:
            filenames = sorted(os.listdir(directory))
        except OSError:
            filenames = []
        catalog[namespace] = [
            f"{namespace}/{name[: -len(MODULE_EXTENSION)]}"
            for name in filenames
            if name.endswith(MODULE_EXTENSION)
            and os.path.isfile(os.path.join(directory, name))
        ]
    return catalog
