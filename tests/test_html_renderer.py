"""Tests for the HTML renderer and segment dispatch."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from wiretext.html_renderer import (
    is_separator_row,
    parse_table_cells,
    render_html_document,
    render_row,
    semantic_tag,
    split_cells,
)
from wiretext.parser import parse_wiretext
from wiretext.segments import escape_html, inline_text_html, segment_html


def _soup(source: str) -> BeautifulSoup:
    return BeautifulSoup(render_html_document(parse_wiretext(source)), "lxml")


class TestSegmentHtml:
    """Tests for segment_html function."""

    @pytest.mark.parametrize(
        ("segment", "expected"),
        [
            ("# Title", "<h1>Title</h1>"),
            ("## Sub", "<h2>Sub</h2>"),
            ("###### Tiny", "<h6>Tiny</h6>"),
            ("---", "<hr />"),
            ("- item", "<ul><li>item</li></ul>"),
            ("2. step", "<ol><li>step</li></ol>"),
            (
                "[x] Done",
                '<label class="wt-choice"><input type="checkbox" checked />Done</label>',
            ),
            ("[]", '<label class="wt-choice"><input type="checkbox" /></label>'),
            (
                "( ) Maybe",
                '<label class="wt-choice"><input type="radio" />Maybe</label>',
            ),
            (
                "(X) Yes",
                '<label class="wt-choice"><input type="radio" checked />Yes</label>',
            ),
            ('!!"Create account"', '<button class="wt-btn primary">Create account</button>'),
            ("!!Send", '<button class="wt-btn primary">Send</button>'),
            ('!"Save draft"', '<button class="wt-btn">Save draft</button>'),
            ("!Cancel", '<button class="wt-btn">Cancel</button>'),
            (
                'Notes: ^^ "Write here"',
                '<div class="wt-input"><label>Notes</label>'
                '<textarea placeholder="Write here"></textarea></div>',
            ),
            (
                "^^",
                '<div class="wt-input"><label>text</label>'
                '<textarea placeholder=""></textarea></div>',
            ),
            (
                "Start: ^date",
                '<div class="wt-input"><label>Start</label>'
                '<input type="date" placeholder="" /></div>',
            ),
            (
                'Nick: ^handle "@you"',
                '<div class="wt-input"><label>Nick</label>'
                '<input type="text" placeholder="@you" /></div>',
            ),
            (
                "^email",
                '<div class="wt-input"><label>email</label>'
                '<input type="email" placeholder="" /></div>',
            ),
            (
                '^first_name "Ada"',
                '<div class="wt-input"><label>first name</label>'
                '<input type="text" placeholder="Ada" /></div>',
            ),
            ("i:settings", '<span class="wt-icon">settings</span>'),
            ("`(New)`", '<span class="wt-badge">New</span>'),
            ("_Home_", '<a href="#" class="wt-link">Home</a>'),
        ],
    )
    def test_widgets(self, segment: str, expected: str) -> None:
        """Each marker maps to its widget fragment."""
        assert segment_html(segment) == expected

    def test_empty_segment(self) -> None:
        """Blank segments render nothing."""
        assert segment_html("   ") == ""

    def test_heading_wins_over_checkbox(self) -> None:
        """Headings are tried before choice widgets."""
        assert segment_html("# [x] task") == "<h1>[x] task</h1>"

    def test_spaced_bang_is_a_paragraph(self) -> None:
        """A bang followed by whitespace is not a button."""
        assert segment_html("!! spaced") == "<p>!! spaced</p>"

    def test_icon_with_label_is_a_paragraph(self) -> None:
        """Only a lone icon marker becomes an icon chip."""
        assert segment_html('i:new "New thread"') == "<p>i:new &quot;New thread&quot;</p>"

    def test_paragraph_escapes_text(self) -> None:
        """Plain text is entity-escaped."""
        assert (
            segment_html("Hello <world> & 'you'")
            == "<p>Hello &lt;world&gt; &amp; &#x27;you&#x27;</p>"
        )

    def test_button_label_is_escaped(self) -> None:
        """Button labels are escaped too."""
        assert segment_html("!<b>") == '<button class="wt-btn">&lt;b&gt;</button>'


class TestInlineTextHtml:
    """Tests for inline_text_html and escape_html functions."""

    def test_links_and_badges_in_running_text(self) -> None:
        """Underscore spans become links, backtick-paren spans badges."""
        assert inline_text_html("See _docs_ now `(beta)`") == (
            'See <a href="#" class="wt-link">docs</a> now '
            '<span class="wt-badge">beta</span>'
        )

    def test_escape_html(self) -> None:
        """All five special characters are escaped."""
        assert escape_html("&<>\"'") == "&amp;&lt;&gt;&quot;&#x27;"


class TestRowsAndCells:
    """Tests for cell splitting and row rendering."""

    def test_split_cells_respects_quotes(self) -> None:
        """Pipes inside double quotes are not separators."""
        assert split_cells('[] "a | b" | !Go') == ['[] "a | b"', "!Go"]

    def test_split_cells_drops_empty_cells(self) -> None:
        """Empty cells between pipes disappear."""
        assert split_cells("a || b |") == ["a", "b"]

    def test_parse_table_cells(self) -> None:
        """Table rows split on every pipe between the outer ones."""
        assert parse_table_cells(" | Name | Email | ") == ["Name", "Email"]

    @pytest.mark.parametrize(
        ("cells", "expected"),
        [
            (["---", ":---", "---:", ":----:"], True),
            (["--", "---"], False),
            (["---", "x"], False),
        ],
    )
    def test_is_separator_row(self, cells: list[str], expected: bool) -> None:
        """Separator cells are runs of at least three dashes."""
        assert is_separator_row(cells) is expected

    def test_row_with_cells(self) -> None:
        """Pipe-separated segments become side-by-side cells."""
        assert render_row("!Cancel | !!Send") == (
            '<div class="wt-row">'
            '<div class="wt-cell"><button class="wt-btn">Cancel</button></div>'
            '<div class="wt-cell"><button class="wt-btn primary">Send</button></div>'
            "</div>"
        )

    def test_row_without_cells_grows(self) -> None:
        """A single segment takes the full row."""
        assert render_row("Hello") == (
            '<div class="wt-row"><div class="wt-cell wt-grow"><p>Hello</p></div></div>'
        )


class TestRenderHtmlDocument:
    """Tests for render_html_document function."""

    def test_document_shell(self) -> None:
        """The document has a head with styles and a root container."""
        html = render_html_document(parse_wiretext("hello"))

        assert html.startswith("<!doctype html><html><head><meta charset=\"utf-8\" />")
        assert "<style>" in html
        assert html.endswith("</body></html>")
        soup = BeautifulSoup(html, "lxml")
        assert soup.body.find("div", class_="root") is not None

    def test_form_widgets(self) -> None:
        """Headings, inputs and buttons come out of one section."""
        html = render_html_document(parse_wiretext('=main\n  # Title\n  ^email\n  !!"Go"'))

        assert html.count("<h1>Title</h1>") == 1
        assert html.count('<input type="email"') == 1
        assert html.count('<button class="wt-btn primary">Go</button>') == 1

    def test_unknown_caret_field(self) -> None:
        """Unknown fields are text inputs with a humanized label."""
        soup = _soup("^first_name")

        field = soup.find("div", class_="wt-input")
        assert field.label.get_text() == "first name"
        assert field.input["type"] == "text"

    def test_semantic_section_tags(self) -> None:
        """Known section names pick their HTML tag, case-insensitively."""
        soup = _soup("=Header\n  x\n=nav\n  y\n=sidebar\n  z")

        header = soup.find("header")
        assert header["data-wt"] == "Header"
        assert header["class"] == ["section"]
        assert soup.find("nav")["data-wt"] == "nav"
        assert soup.find("section")["data-wt"] == "sidebar"

    def test_semantic_tag(self) -> None:
        """Unknown names fall back to section."""
        assert semantic_tag("ASIDE") == "aside"
        assert semantic_tag("threads") == "section"

    def test_ratioed_section(self, columns_source: str) -> None:
        """Ratioed sections grow by their numerator and get a frame."""
        html = render_html_document(parse_wiretext(columns_source))

        assert (
            '<div class="group"><section class="section frame" style="flex:1 1 0%" '
            'data-wt="left">' in html
        )
        soup = BeautifulSoup(html, "lxml")
        assert len(soup.select("div.group > section.frame")) == 2

    def test_section_name_is_escaped(self) -> None:
        """The raw name is escaped in the data attribute."""
        html = render_html_document(parse_wiretext('=a"b'))

        assert 'data-wt="a&quot;b"' in html

    def test_table_with_separator(self, table_source: str) -> None:
        """A separator row is consumed; the rest are body rows."""
        soup = _soup(table_source)

        tables = soup.find_all("table", class_="wt-table")
        assert len(tables) == 1
        table = tables[0]
        assert [th.get_text() for th in table.thead.find_all("th")] == ["Name", "Email", "Status"]
        rows = table.tbody.find_all("tr")
        assert len(rows) == 2
        badge = rows[0].find("span", class_="wt-badge")
        assert badge.get_text() == "Active"

    def test_table_without_separator(self) -> None:
        """Without dashes the second row is an ordinary body row."""
        soup = _soup("| A | B |\n| c | d |\n| e | f |")

        table = soup.find("table")
        assert len(table.thead.find_all("tr")) == 1
        assert [td.get_text() for td in table.tbody.find_all("td")] == ["c", "d", "e", "f"]

    def test_single_table_row(self) -> None:
        """A lone table row is a header-only table."""
        soup = _soup("| Only | Header |")

        table = soup.find("table")
        assert len(table.thead.find_all("th")) == 2
        assert table.tbody.find_all("tr") == []

    def test_table_runs_are_split_by_other_rows(self) -> None:
        """Only consecutive table rows merge."""
        soup = _soup("| A |\n| b |\nbetween\n| C |")

        tables = soup.find_all("table")
        assert len(tables) == 2
        assert soup.find("p").get_text() == "between"

    def test_checkbox_cells(self, form_source: str) -> None:
        """Quoted checkbox labels survive as escaped text."""
        html = render_html_document(parse_wiretext(form_source))

        assert (
            '<label class="wt-choice"><input type="checkbox" />&quot;I agree to terms&quot;</label>'
            in html
        )
        soup = BeautifulSoup(html, "lxml")
        assert [label.get_text() for label in soup.select(".wt-input label")] == [
            "first name",
            "last name",
            "email",
            "password",
        ]

    def test_rendering_is_deterministic(self, nested_source: str) -> None:
        """The same tree always renders the same document."""
        tree = parse_wiretext(nested_source)

        assert render_html_document(tree) == render_html_document(tree)
