"""
Testy segmentacji bloków (md_parser.segmenter.segment).

Używa krótkich tekstów syntetycznych; scenariusz end-to-end odpowiada
typowej odpowiedzi modelu (nagłówek, akapit, lista, blok kodu).
"""

import pytest

from data_model import Bold, BulletList, Code, CodeBlock, Document, Heading, Italic, Paragraph, Text
from md_parser import segment


# =============================================================================
# FIXTURE: odpowiedź modelu
# =============================================================================

ANSWER_TEXT = """\
# Title
Some **bold** and `code`.
- item1
- item2

```text
raw
```"""


def _covered_lines(document: Document) -> list[int]:
    covered: list[int] = []
    for block in document:
        covered.extend(range(block.line_start, block.line_end))
    return covered


# =============================================================================
# Scenariusz end-to-end
# =============================================================================

class TestEndToEnd:

    def test_answer_document(self):
        document = segment(ANSWER_TEXT)
        assert document == Document((
            Heading(level=1, content=(Text("Title"),)),
            Paragraph(content=(
                Text("Some "), Bold("bold"), Text(" and "), Code("code"), Text("."),
            )),
            BulletList(items=((Text("item1"),), (Text("item2"),))),
            CodeBlock(language="text", lines=("raw",)),
        ))

    def test_line_ranges(self):
        document = segment(ANSWER_TEXT)
        ranges = [(b.line_start, b.line_end) for b in document]
        assert ranges == [(0, 1), (1, 2), (2, 4), (5, 8)]


# =============================================================================
# Nagłówki
# =============================================================================

class TestHeadings:

    @pytest.mark.parametrize("line,level,rest", [
        ("# one", 1, "one"),
        ("## two", 2, "two"),
        ("### three", 3, "three"),
    ])
    def test_heading_levels(self, line, level, rest):
        assert segment(line) == Document((Heading(level=level, content=(Text(rest),)),))

    def test_level_three_is_not_split(self):
        (block,) = segment("### x")
        assert isinstance(block, Heading)
        assert block.level == 3

    def test_four_hashes_is_paragraph(self):
        (block,) = segment("#### x")
        assert isinstance(block, Paragraph)

    def test_hash_without_space_is_paragraph(self):
        (block,) = segment("#hashtag")
        assert block == Paragraph(content=(Text("#hashtag"),))

    def test_heading_content_is_inline_parsed(self):
        (block,) = segment("## A *b*")
        assert block.content == (Text("A "), Italic("b"))

    def test_heading_flushes_paragraph(self):
        document = segment("para\n# Head\nmore")
        assert [b.kind for b in document] == ["paragraph", "heading", "paragraph"]


# =============================================================================
# Akapity
# =============================================================================

class TestParagraphs:

    def test_lines_joined_with_newline(self):
        (block,) = segment("one\ntwo")
        assert block == Paragraph(content=(Text("one\ntwo"),))

    def test_emphasis_across_lines(self):
        (block,) = segment("a **b\nc** d")
        assert block.content == (Text("a "), Bold("b\nc"), Text(" d"))

    def test_blank_line_separates_paragraphs(self):
        document = segment("one\n\n   \ntwo")
        assert document == Document((
            Paragraph(content=(Text("one"),)),
            Paragraph(content=(Text("two"),)),
        ))

    @pytest.mark.parametrize("text", ["", "   ", "\n\n", " \n\t\n "])
    def test_blank_input_gives_empty_document(self, text):
        assert segment(text) == Document()
        assert len(segment(text)) == 0


# =============================================================================
# Listy
# =============================================================================

class TestLists:

    def test_blank_line_splits_list(self):
        document = segment("- a\n- b\n\n- c")
        assert document == Document((
            BulletList(items=((Text("a"),), (Text("b"),))),
            BulletList(items=((Text("c"),),)),
        ))

    def test_mixed_markers_in_one_run(self):
        (block,) = segment("- a\n* b")
        assert block.items == ((Text("a"),), (Text("b"),))

    def test_items_are_inline_parsed_independently(self):
        (block,) = segment("- **a\n- b**")
        assert block.items == ((Text("**a"),), (Text("b**"),))

    def test_list_flushes_paragraph(self):
        document = segment("intro\n- a\noutro")
        assert [b.kind for b in document] == ["paragraph", "bullet_list", "paragraph"]

    def test_bold_at_line_start_is_not_bullet(self):
        (block,) = segment("**bold** start")
        assert block == Paragraph(content=(Bold("bold"), Text(" start")))

    def test_dash_without_space_is_paragraph(self):
        (block,) = segment("-not a list")
        assert isinstance(block, Paragraph)

    def test_empty_item(self):
        (block,) = segment("- ")
        assert block.items == ((),)


# =============================================================================
# Bloki kodu
# =============================================================================

class TestFences:

    def test_lines_inside_fence_are_verbatim(self):
        text = "```\n# not heading\n- not list\n\n**not bold**\n```"
        (block,) = segment(text)
        assert block == CodeBlock(
            language="",
            lines=("# not heading", "- not list", "", "**not bold**"),
        )

    def test_language_tag(self):
        (block,) = segment("```python\nx = 1\n```")
        assert block.language == "python"
        assert block.lines == ("x = 1",)

    def test_indented_fence(self):
        (block,) = segment("  ```sh \nls\n  ```")
        assert block == CodeBlock(language="sh", lines=("ls",))

    def test_fence_flushes_paragraph(self):
        document = segment("text\n```\ncode\n```\nafter")
        assert [b.kind for b in document] == ["paragraph", "code_block", "paragraph"]

    def test_unterminated_fence_closes_at_end(self):
        document = segment("intro\n```js\nlet a;\n\nlet b;")
        assert document == Document((
            Paragraph(content=(Text("intro"),)),
            CodeBlock(language="js", lines=("let a;", "", "let b;")),
        ))
        assert document[1].line_end == 5

    def test_empty_fence(self):
        (block,) = segment("```\n```")
        assert block == CodeBlock(language="", lines=())

    def test_language_reset_after_close(self):
        document = segment("```py\na\n```\n```\nb\n```")
        assert [b.language for b in document] == ["py", ""]


# =============================================================================
# Pokrycie linii
# =============================================================================

COVERAGE_CASES = [
    ANSWER_TEXT,
    "a\nb\n\n# h\n- x\n* y\nc\n```\n\n```\nd",
    "\n\n# only heading\n\n",
    "```\nunterminated\n- x",
    "- a\n\n- b\n## c\n### d\ntext\n  \nmore",
]


@pytest.mark.parametrize("text", COVERAGE_CASES)
def test_every_non_blank_line_in_exactly_one_block(text):
    lines = text.split("\n")
    document = segment(text)
    covered = _covered_lines(document)

    assert len(covered) == len(set(covered))
    assert covered == sorted(covered)
    non_blank = [i for i, line in enumerate(lines) if line.strip()]
    assert set(non_blank) <= set(covered)
    for i in set(covered) - set(non_blank):
        # puste linie zużywa tylko blok kodu
        assert any(isinstance(b, CodeBlock) and b.line_start <= i < b.line_end for b in document)
