import pytest

from staticdoc.domain.models import CodeSample, Document, Paragraph
from staticdoc.services.document_renderer import DocumentRenderer
from staticdoc.services.page_reader import PageReader, PageStructureError


def test_read_recovers_parts(renderer: DocumentRenderer, reader: PageReader, small_doc: Document):
    page = reader.read(renderer.to_html(small_doc))
    assert page.headings == ["Tabs & <Spaces>"]
    assert page.timestamps == ["Jan 1st, 2020"]
    assert page.stylesheets == ["../styles.css"]
    assert page.blocks == list(small_doc.blocks)


def test_code_sample_text_is_byte_for_byte(
    renderer: DocumentRenderer, reader: PageReader, small_doc: Document
):
    page = reader.read(renderer.to_html(small_doc))
    assert [c.text for c in page.code_samples()] == [c.text for c in small_doc.code_samples()]


def test_language_label_read_back(renderer: DocumentRenderer, reader: PageReader):
    doc = Document(title="T", published="d", blocks=(CodeSample("x := 1", language="go"),))
    page = reader.read(renderer.to_html(doc))
    assert page.blocks == [CodeSample("x := 1", language="go")]


def test_to_document_rebuilds_equal_document(
    renderer: DocumentRenderer, reader: PageReader, small_doc: Document
):
    assert reader.to_document(renderer.to_html(small_doc)) == small_doc


def test_plain_text_flattening(renderer: DocumentRenderer, reader: PageReader, small_doc: Document):
    text = reader.to_plain_text(renderer.to_html(small_doc))
    assert text.startswith("Tabs & <Spaces>\n\nJan 1st, 2020\n\nCall `run()` first.\n\n")
    assert small_doc.code_samples()[0].text in text
    assert "<code>" not in text and "<p>" not in text
    assert text.endswith("Then stop.\n")


def test_blocks_outside_article_are_ignored(reader: PageReader):
    html = (
        "<html><head><link rel='stylesheet' href='../styles.css'></head><body>"
        "<p>nav</p><article><h1>T</h1><time>d</time><p>body</p></article>"
        "<pre>footer</pre></body></html>"
    )
    page = reader.read(html)
    assert page.blocks == [Paragraph("body")]


@pytest.mark.parametrize(
    "html,label",
    [
        ("<link rel=stylesheet href=a.css><article><time>d</time></article>", "heading"),
        ("<link rel=stylesheet href=a.css><article><h1>T</h1><h1>U</h1><time>d</time></article>", "heading"),
        ("<link rel=stylesheet href=a.css><article><h1>T</h1></article>", "timestamp"),
        ("<article><h1>T</h1><time>d</time></article>", "stylesheet"),
    ],
)
def test_to_document_requires_exactly_one(reader: PageReader, html: str, label: str):
    with pytest.raises(PageStructureError, match=label):
        reader.read(html).to_document()


def test_non_stylesheet_links_ignored(reader: PageReader):
    page = reader.read('<link rel="icon" href="f.ico"><link rel="stylesheet" href="s.css">')
    assert page.stylesheets == ["s.css"]


@pytest.mark.parametrize(
    "text",
    [
        "# Setup first",
        "1. install Go",
        "* bullet *emphasis*",
        "Two\n\nparas",
        "Use <T> generics",
        "  lead and trail  ",
        "&amp; stays literal",
        "Call `f(a < b)` now",
        "``a`b`` spans",
        "`` `x` ``",
        "` padded `",
        "lone ` tick",
        "",
    ],
)
def test_paragraph_round_trips_as_one_block(renderer: DocumentRenderer, reader: PageReader, text: str):
    doc = Document(title="T", published="d", blocks=(Paragraph(text), CodeSample("x")))
    page = reader.read(renderer.to_html(doc))
    assert page.headings == ["T"]
    assert page.blocks == [Paragraph(text), CodeSample("x")]
    assert reader.to_document(renderer.to_html(doc)) == doc
