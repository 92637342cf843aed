from md2smol import (
    Blockquote,
    CodeBlock,
    Document,
    Heading,
    Link,
    List,
    Paragraph,
    RenderOptions,
    Text,
    default_options,
    render_gemini,
    render_markdown,
)
from md2smol.renderers import GeminiRenderer


def test_full_default_output(rich_document):
    output = render_gemini(rich_document)
    assert output.split("\n") == [
        "## Status report",
        "",
        "Read alpha, then beta and alpha again with x = 1.",
        "=> https://a.example alpha",
        "=> https://b.example beta",
        "=> https://a.example alpha again",
        "",
        "* Item 1",
        "* Item 2",
        "",
        "1. First",
        "2. Second",
        "",
        "```python",
        "def f():",
        "    return  1",
        "```",
        "",
        "> Quoted gamma",
        "=> https://c.example gamma",
        "",
        "---",
        "",
        "Done.",
    ]


def test_sample_markdown_defaults(sample_markdown):
    output = render_markdown(sample_markdown, "gemini")
    lines = output.split("\n")
    assert "# Main Heading" in lines
    assert "## Subheading" in lines
    assert "### List Example" in lines
    assert "* Item 1" in lines
    assert "=> https://example.com link" in lines
    assert "```" in lines
    assert "code block\nwith multiple lines" in output


def test_heading_markers_match_level():
    for level in range(1, 7):
        document = Document((Heading(level, (Text("Title"),)),))
        assert render_gemini(document) == "#" * level + " Title"


def test_link_lines_ignore_link_options(link_document):
    for options in (
        default_options("gemini").replace(preserve_links=False),
        RenderOptions(preserve_links=True),
    ):
        output = render_gemini(link_document, options)
        assert output.split("\n")[-2:] == ["See link.", "=> https://example.com link"]


def test_every_link_gets_its_own_line():
    document = Document((
        Paragraph((Link("https://x", (Text("x"),)), Text(" "), Link("https://x", (Text("x"),)))),
        Paragraph((Link("https://x", (Text("x"),)),)),
    ))
    assert render_gemini(document) == "x x\n=> https://x x\n=> https://x x\n\nx\n=> https://x x"


def test_link_without_text():
    document = Document((Paragraph((Text("see "), Link("https://x", ()))),))
    assert render_gemini(document) == "see\n=> https://x"


def test_links_inside_lists_follow_the_whole_list():
    document = Document((
        List(False, (
            (Paragraph((Link("https://one", (Text("one"),)),)),),
            (Paragraph((Link("https://two", (Text("two"),)),)),),
        )),
    ))
    assert render_gemini(document) == "* one\n* two\n=> https://one one\n=> https://two two"


def test_preformatted_lines_inside_quotes_stay_unprefixed():
    document = Document((Blockquote((Paragraph((Text("look"),)), CodeBlock("x\n"))),))
    assert render_gemini(document) == "> look\n>\n```\nx\n```"


def test_code_block_as_first_list_block_keeps_fence_at_line_start():
    document = Document((List(False, ((CodeBlock("x"),),)),))
    assert render_gemini(document) == "*\n```\nx\n```"


def test_nested_lists_are_flattened():
    inner = List(False, ((Paragraph((Text("child"),)),),))
    document = Document((List(False, ((Paragraph((Text("parent"),)), inner),)),))
    assert render_gemini(document) == "* parent\n* child"


def test_wrapping_only_with_positive_width():
    text = " ".join(["word"] * 30)
    document = Document((Paragraph((Text(text),)),))
    assert render_gemini(document) == text
    wrapped = render_gemini(document, default_options("gemini").replace(width=20))
    assert max(len(line) for line in wrapped.split("\n")) <= 20


def test_gemini_keeps_no_footnote_registry(link_document):
    renderer = GeminiRenderer(default_options("gemini"))
    assert renderer.render(link_document).endswith("=> https://example.com link")
    assert len(renderer.links) == 0
    assert renderer._link_count() == 1
