"""Configuration constants for the handbook module combiner.

The handbook is a fixed directory taxonomy: each namespace maps to one
directory under the handbook root, and a module is any ``<name>.md`` file
inside it. There is no manifest; membership is file presence.

DOCUMENT_HEADER is an English rewording of the handbook's original Korean
header (same title, same trailing rule); the wording is deliberate.
"""

# ---------------------------------------------------------------------------
# Namespace taxonomy
# ---------------------------------------------------------------------------

# Namespace -> directory relative to the handbook root.
NAMESPACE_DIRS = {
    "languages": "skills/languages",
    "frameworks": "skills/frameworks",
    "infra": "skills/infra",
    "practices": "skills/practices",
    "agents": "agents",
}

# Bare references ("typescript") are probed in this order; first match wins.
PROBE_ORDER = ("languages", "frameworks", "infra", "practices", "agents")

# Headings used by --list, in PROBE_ORDER.
NAMESPACE_TITLES = {
    "languages": "📦 Skills - Languages",
    "frameworks": "📦 Skills - Frameworks",
    "infra": "📦 Skills - Infra",
    "practices": "📦 Skills - Practices",
    "agents": "🤖 Agents",
}

# Full skill paths ("skills/languages/python") resolve directly under the root.
SKILLS_PREFIX = "skills/"

MODULE_EXTENSION = ".md"


# ---------------------------------------------------------------------------
# Output document
# ---------------------------------------------------------------------------

BASE_DOCUMENT = "base/CLAUDE.md"

DEFAULT_OUTPUT = "output/CLAUDE.md"

ROOT_ENV_VAR = "HANDBOOK_ROOT"

DOCUMENT_HEADER = """\
# Project Instructions

This document was generated by combining handbook modules.

---

"""

SEPARATOR = "\n---\n\n"
