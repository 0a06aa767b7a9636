"""Shared fixtures for md-to-html tests."""

import pytest

from .helpers import StubRenderer


@pytest.fixture
def stub_renderer(tmp_path):
    out_dir = tmp_path / "svg"
    out_dir.mkdir()
    return StubRenderer(out_dir)


@pytest.fixture
def failing_renderer(tmp_path):
    return StubRenderer(tmp_path, succeed=False)


@pytest.fixture
def fake_mmdc(tmp_path):
    """An existing file the renderer accepts as the Mermaid CLI."""
    path = tmp_path / "bin" / "mmdc"
    path.parent.mkdir()
    path.write_text("#!/bin/sh\n", encoding="utf-8")
    path.chmod(0o755)
    return path
