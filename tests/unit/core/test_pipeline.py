"""Unit tests for core/pipeline.py"""

import json

import pytest
from structlog.testing import capture_logs

from docblock.core.compiler import Compiler
from docblock.core.pipeline import compile_file, discover_files, run_compile


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory so relative paths are isolated."""
    monkeypatch.chdir(tmp_path)


def test_discover_files_single(tmp_path):
    f = tmp_path / "doc.md"
    f.write_text("# Hello")
    assert discover_files(f) == [f]


def test_discover_files_dir(tmp_path):
    """discover_files finds .md and .mdx files recursively and skips others."""
    (tmp_path / "a.md").write_text("a")
    (tmp_path / "notes.txt").write_text("text")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.mdx").write_text("b")
    assert discover_files(tmp_path) == [tmp_path / "a.md", sub / "b.mdx"]


def test_compile_file_assigns_routes(tmp_path, compiler):
    f = tmp_path / "Button Docs.md"
    f.write_text("@# Button\nText\n@## Props\n@param x the x\n")
    doc = compile_file(f, compiler)
    assert doc.slug == "button-docs"
    assert [getattr(n, "route", None) for n in doc.block.contents if not isinstance(n, str)] == [
        "button", "button/props", None,
    ]


def test_compile_file_slug_from_metadata(tmp_path, sample_block):
    f = tmp_path / "anything.md"
    f.write_text(sample_block)
    assert compile_file(f, Compiler()).slug == "button"


def test_run_compile_writes_json(tmp_path, compiler):
    (tmp_path / "hello.md").write_text("Intro\n\n@param {\"type\": \"int\"} n count\n")
    results = run_compile("hello.md", compiler, tmp_path / "dist")
    assert len(results) == 1
    src, out_file = results[0]
    assert src.name == "hello.md"
    data = json.loads(out_file.read_text())
    assert data["slug"] == "hello"
    assert data["block"]["metadata"] == {}
    tag = data["block"]["contents"][1]
    assert tag["tag"] == "param"
    assert tag["options"] == {"kind": "parsed", "values": {"type": "int"}}
    assert "raw" not in tag


def test_run_compile_wraps_failures(tmp_path, compiler):
    (tmp_path / "bad.md").write_text("---\ntitle: [oops\n---\nbody\n")
    with pytest.raises(RuntimeError, match="Failed to compile"):
        run_compile(str(tmp_path), compiler, tmp_path / "dist")


def test_run_compile_warns_on_slug_collision(tmp_path, compiler):
    """Two files with the same slug are both compiled and the overwrite is logged."""
    for sub in ("a", "b"):
        (tmp_path / sub).mkdir()
        (tmp_path / sub / "index.md").write_text(f"From {sub}\n")
    with capture_logs() as logs:
        results = run_compile(str(tmp_path), compiler, tmp_path / "dist")
    assert len(results) == 2
    collisions = [e for e in logs if e["event"] == "slug_collision"]
    assert len(collisions) == 1
    assert collisions[0]["slug"] == "index"
    assert collisions[0]["log_level"] == "warning"
