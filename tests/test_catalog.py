import pytest

from docnav.ingest.catalog import CatalogConfig, MarkdownCatalog, parse_front_matter
from docnav.ingest.utils import slug_from_path
from docnav.models.tree import MalformedSlugError


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_scan_derives_nested_slugs_and_defaults(tmp_path):
    _write(tmp_path / "intro.md", "---\ntitle: Intro\nindex: 2\n---\n# Hello\n")
    _write(tmp_path / "guide" / "setup.md", "---\ntitle: Setup\ndescription: Install it\n---\nBody\n")
    _write(tmp_path / "guide" / "advanced" / "tuning.md", "No front matter here.\n")
    _write(tmp_path / "guide" / "notes.txt", "ignored")
    _write(tmp_path / ".drafts" / "wip.md", "---\ntitle: WIP\n---\n")

    documents = MarkdownCatalog(tmp_path).scan()

    by_slug = {doc.slug: doc for doc in documents}
    assert [doc.slug for doc in documents] == sorted(by_slug)
    assert set(by_slug) == {"intro", "guide/setup", "guide/advanced/tuning"}
    assert by_slug["intro"].title == "Intro"
    assert by_slug["intro"].index == 2
    assert by_slug["guide/setup"].description == "Install it"
    assert by_slug["guide/setup"].index == 0
    assert by_slug["guide/advanced/tuning"].title == "Untitled"


def test_scan_tolerates_bad_front_matter(tmp_path):
    _write(tmp_path / "broken.md", "---\ntitle: [unclosed\n---\nBody\n")
    _write(tmp_path / "list.md", "---\n- a\n- b\n---\nBody\n")
    _write(tmp_path / "odd.md", "---\ntitle: Odd\nindex: first\n---\n")

    documents = {doc.slug: doc for doc in MarkdownCatalog(tmp_path).scan()}

    assert documents["broken"].title == "Untitled"
    assert documents["list"].title == "Untitled"
    assert documents["odd"].title == "Odd"
    assert documents["odd"].index == 0


def test_load_returns_body_without_front_matter(tmp_path):
    _write(tmp_path / "guide" / "setup.md", "---\ntitle: Setup\ntags: [install]\n---\n# Setup\n\nSteps.\n")
    catalog = MarkdownCatalog(tmp_path)

    loaded = catalog.load("guide/setup")

    assert loaded.document.slug == "guide/setup"
    assert loaded.document.title == "Setup"
    assert loaded.body == "# Setup\n\nSteps.\n"
    assert loaded.to_public_dict()["metadata"]["tags"] == ["install"]


def test_load_rejects_missing_and_escaping_slugs(tmp_path):
    docs_dir = tmp_path / "docs"
    _write(docs_dir / "intro.md", "Intro")
    _write(tmp_path / "secret.md", "Secret")
    catalog = MarkdownCatalog(docs_dir)

    with pytest.raises(FileNotFoundError):
        catalog.load("missing")
    with pytest.raises(MalformedSlugError):
        catalog.load("../secret")
    with pytest.raises(MalformedSlugError):
        catalog.load("guide//setup")


def test_scan_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        MarkdownCatalog(tmp_path / "nope").scan()


def test_custom_pattern_limits_scan(tmp_path):
    _write(tmp_path / "top.md", "Top")
    _write(tmp_path / "nested" / "deep.md", "Deep")

    documents = MarkdownCatalog(tmp_path, CatalogConfig(pattern="*.md")).scan()

    assert [doc.slug for doc in documents] == ["top"]


def test_parse_front_matter_without_block():
    metadata, body = parse_front_matter("# Title\n---\nnot front matter\n")

    assert metadata == {}
    assert body.startswith("# Title")


def test_slug_from_path_keeps_dots_in_stem(tmp_path):
    assert slug_from_path(tmp_path / "release" / "v1.2.md", tmp_path) == "release/v1.2"


def test_scan_skips_file_that_is_not_utf8(tmp_path, caplog):
    _write(tmp_path / "intro.md", "---\ntitle: Intro\n---\n")
    _write(tmp_path / "guide" / "setup.md", "---\ntitle: Setup\n---\n")
    (tmp_path / "guide" / "legacy.md").write_bytes(b"---\ntitle: Caf\xe9\n---\n\xff\xfe body\n")

    with caplog.at_level("WARNING", logger="docnav.ingest.catalog"):
        documents = MarkdownCatalog(tmp_path).scan()

    assert [doc.slug for doc in documents] == ["guide/setup", "intro"]
    assert "legacy.md" in caplog.text
