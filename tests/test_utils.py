import os
import stat
from pathlib import Path

import pytest

from text_formatting.utils import atomic_write, escape_html, slugify, strip_tags, unescape_html


def test_escape_html_replaces_reserved_characters() -> None:
    assert escape_html("""Tom's "x" & <y>""") == "Tom&#39;s &quot;x&quot; &amp; &lt;y&gt;"


def test_escape_html_does_not_double_escape() -> None:
    assert escape_html("&lt;") == "&amp;lt;"


def test_unescape_html_decodes_six_entities() -> None:
    assert unescape_html("&amp;&lt;&gt;&quot;&#39;&nbsp;") == "&<>\"' "


def test_unescape_html_decodes_once() -> None:
    assert unescape_html("&amp;lt;") == "&lt;"


def test_escape_then_unescape_is_identity() -> None:
    samples = ["", "abc", "&", "<a>", "&amp;", "'\"'", "x&y<z>\"q'", "&lt;&gt;", "AND&&<<>>"]
    for sample in samples:
        assert unescape_html(escape_html(sample)) == sample


def test_strip_tags_keeps_text() -> None:
    assert strip_tags('<p class="x">Hello <b>World</b></p>') == "Hello World"
    assert strip_tags("a <> b") == "a <> b"


def test_slugify_basic() -> None:
    assert slugify("Hello, World! (2024)") == "hello-world-2024"
    assert slugify("My Blog Post!") == "my-blog-post"


def test_slugify_strips_accents_and_collapses_dashes() -> None:
    assert slugify("Café au Lait -- A Recipe") == "cafe-au-lait-a-recipe"
    assert slugify("Crème brûlée") == "creme-brulee"


def test_slugify_collapses_whitespace() -> None:
    assert slugify("   Multiple   Spaces   Here   ") == "multiple-spaces-here"
    assert slugify("tab\tand\nnewline") == "tab-and-newline"


def test_slugify_may_be_empty() -> None:
    assert slugify("") == ""
    assert slugify("!!!") == ""
    assert slugify("日本語") == ""


def test_slugify_trims_edge_dashes() -> None:
    assert slugify("-- Draft --") == "draft"


def test_slugify_output_is_idempotent_and_restricted() -> None:
    samples = [
        "Hello, World! (2024)",
        "  __--__ ",
        "Ω≈ç√ maths",
        "Crème brûlée 2.0",
        "a - - b",
        "ÀÉÎÕÜ",
        "---x---",
        "release_notes v1",
    ]
    for sample in samples:
        slug = slugify(sample)
        assert slugify(slug) == slug
        assert all(char in "abcdefghijklmnopqrstuvwxyz0123456789-" for char in slug)
        assert "--" not in slug
        assert not slug.startswith("-")
        assert not slug.endswith("-")


def mode_of(path: Path) -> int:
    return stat.S_IMODE(path.stat().st_mode)


def test_atomic_write_new_file_gets_default_mode(tmp_path: Path) -> None:
    reference = tmp_path / "reference.md"
    reference.write_text("x", encoding="utf-8")
    target = tmp_path / "nested" / "note.md"
    atomic_write(target, "# Note")
    assert target.read_text(encoding="utf-8") == "# Note"
    assert mode_of(target) == mode_of(reference)


def test_atomic_write_keeps_existing_mode(tmp_path: Path) -> None:
    target = tmp_path / "note.md"
    target.write_text("old", encoding="utf-8")
    target.chmod(0o640)
    atomic_write(target, "new")
    assert target.read_text(encoding="utf-8") == "new"
    assert mode_of(target) == 0o640


def test_atomic_write_cleans_up_after_failure(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = tmp_path / "note.md"
    target.write_text("old", encoding="utf-8")

    def refuse(src: object, dst: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", refuse)
    with pytest.raises(OSError):
        atomic_write(target, "new")
    assert sorted(path.name for path in tmp_path.iterdir()) == ["note.md"]
    assert target.read_text(encoding="utf-8") == "old"
