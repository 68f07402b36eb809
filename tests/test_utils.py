"""Tests for path resolution, line counting, logging, and version reporting."""

import os
import subprocess

from handbook_combiner import version as version_mod
from handbook_combiner.utils import count_lines, log, printable, resolve_path


# --- resolve_path ---

def test_resolve_path_returns_absolute_path():
    """Relative path is resolved against the cwd."""
    result = resolve_path("output/CLAUDE.md")
    assert result == os.path.join(os.getcwd(), "output", "CLAUDE.md")


def test_resolve_path_uses_base_for_relative_paths(tmp_path):
    result = resolve_path("output/CLAUDE.md", base=str(tmp_path))
    assert result == str(tmp_path / "output" / "CLAUDE.md")


def test_resolve_path_ignores_base_for_absolute_paths(tmp_path):
    target = str(tmp_path / "elsewhere" / "CLAUDE.md")
    assert resolve_path(target, base="/somewhere/else") == target


def test_resolve_path_expands_home():
    result = resolve_path("~/my-project/CLAUDE.md")
    assert result.startswith(os.path.expanduser("~"))
    assert "~" not in result


def test_resolve_path_normalizes_path():
    result = resolve_path("./foo/../bar")
    assert ".." not in result
    assert result.endswith("bar")


# --- count_lines ---

def test_count_lines_counts_newlines():
    assert count_lines("a\nb\nc\n") == 3


def test_count_lines_ignores_unterminated_last_line():
    assert count_lines("a\nb") == 1


def test_count_lines_empty():
    assert count_lines("") == 0


# --- log ---

def test_log_appends_plain_message_to_file(tmp_path):
    log_file = tmp_path / "combine.log"
    log("✓ Adding: [weird] name", style="green", log_file=str(log_file))
    log("second", log_file=str(log_file))
    assert log_file.read_text(encoding="utf-8") == "✓ Adding: [weird] name\nsecond\n"


def test_log_never_raises_on_unwritable_file(tmp_path):
    log("message", log_file=str(tmp_path / "missing-dir" / "combine.log"))


def test_log_replaces_undecodable_bytes(tmp_path):
    log_file = tmp_path / "combine.log"
    name = b"caf\xe9".decode("utf-8", "surrogateescape")
    log(f"✗ Not found: {name}", log_file=str(log_file))
    assert log_file.read_text(encoding="utf-8") == "✗ Not found: caf�\n"


# --- printable ---

def test_printable_leaves_valid_text_alone():
    assert printable("✓ Adding: café") == "✓ Adding: café"


def test_printable_replaces_surrogate_escapes():
    assert printable(b"\xffname".decode("utf-8", "surrogateescape")) == "�name"


# --- version ---

def test_version_without_checkout_is_package_version(monkeypatch):
    monkeypatch.setattr(version_mod, "package_version", lambda: "1.2.3")
    monkeypatch.setattr(version_mod, "source_checkout", lambda: None)
    assert version_mod.get_version() == "1.2.3"


def test_package_version_falls_back_when_not_installed(monkeypatch):
    def _missing(name):
        raise version_mod.PackageNotFoundError(name)

    monkeypatch.setattr(version_mod, "version", _missing)
    assert version_mod.package_version() == "0+unknown"


def test_source_checkout_requires_git_and_pyproject(tmp_path):
    assert version_mod.source_checkout(str(tmp_path)) is None
    (tmp_path / ".git").mkdir()
    assert version_mod.source_checkout(str(tmp_path)) is None
    (tmp_path / "pyproject.toml").write_text("[project]\n", encoding="utf-8")
    assert version_mod.source_checkout(str(tmp_path)) == str(tmp_path)


def test_version_in_checkout_without_git_binary_is_package_version(tmp_path, monkeypatch):
    def _no_git(*args, **kwargs):
        raise FileNotFoundError("git")

    monkeypatch.setattr(version_mod, "package_version", lambda: "1.2.3")
    monkeypatch.setattr(subprocess, "run", _no_git)
    assert version_mod.get_version(str(tmp_path)) == "1.2.3"


def test_version_in_checkout_appends_build_info(tmp_path, monkeypatch):
    answers = {
        "rev-parse": "3a7f2c1",
        "rev-list": "59",
        "log": "2026-02-13",
        "status": "",
    }

    def _fake_run(cmd, **kwargs):
        return subprocess.CompletedProcess(cmd, 0, stdout=answers[cmd[3]] + "\n", stderr="")

    monkeypatch.setattr(version_mod, "package_version", lambda: "1.2.3")
    monkeypatch.setattr(subprocess, "run", _fake_run)
    assert version_mod.get_version(str(tmp_path)) == "1.2.3 build 59 (2026-02-13 g3a7f2c1)"
