"""Tests for the command-line handling of :mod:`docinspect.gui.main`."""

from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for GUI tests", exc_type=ImportError)

from docinspect.config import LOCAL_AUTHORITY
from docinspect.gui.main import main, parse_reference


def test_parse_reference_accepts_uris() -> None:
    reference = parse_reference("content://com.example.docs/document/7")

    assert reference.authority == "com.example.docs"
    assert reference.document_id == "7"


def test_parse_reference_treats_plain_text_as_path(tmp_path: Path) -> None:
    reference = parse_reference(str(tmp_path / "notes.txt"))

    assert reference.authority == LOCAL_AUTHORITY
    assert reference.local_path() == (tmp_path / "notes.txt").absolute()


def test_main_rejects_invalid_provider_file(tmp_path: Path) -> None:
    broken = tmp_path / "providers.json"
    broken.write_text("[]", encoding="utf-8")

    assert main(["docinspect-gui", "--providers", str(broken)]) == 2
