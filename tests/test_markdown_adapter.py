from md2smol import (
    Blockquote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    LineBreak,
    Link,
    List,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
    check_structure,
    extract_text,
    parse_markdown,
)
from md2smol.parsers import from_tokens


def test_heading():
    document = parse_markdown("## Hello World")
    assert document == Document((Heading(2, (Text("Hello World"),)),))


def test_inline_nodes():
    document = parse_markdown("*a* **b** `c` [d](https://d.example)")
    (paragraph,) = document.blocks
    kinds = [type(node) for node in paragraph.inline if not isinstance(node, Text)]
    assert kinds == [Emphasis, Strong, Code, Link]
    link = paragraph.inline[-1]
    assert link == Link("https://d.example", (Text("d"),))


def test_lists():
    bullets, numbers = parse_markdown("* one\n* two\n\n3. three\n4. four\n").blocks
    assert isinstance(bullets, List) and not bullets.ordered
    assert len(bullets.items) == 2
    assert isinstance(bullets.items[0][0], Paragraph)
    assert isinstance(numbers, List) and numbers.ordered
    assert numbers.start == 3


def test_fenced_code_keeps_language_and_literal():
    (block,) = parse_markdown("```python\nprint(1)\n  x\n```\n").blocks
    assert block == CodeBlock("print(1)\n  x\n", "python")


def test_blockquote_and_break():
    quote, rule = parse_markdown("> quoted\n\n---\n").blocks
    assert isinstance(quote, Blockquote)
    assert extract_text(Document(quote.children)) == "quoted"
    assert isinstance(rule, ThematicBreak)


def test_soft_and_hard_breaks():
    soft = parse_markdown("a\nb")
    assert extract_text(soft) == "a b"
    (hard,) = parse_markdown("a  \nb").blocks
    assert any(isinstance(node, LineBreak) for node in hard.inline)


def test_image_becomes_link():
    (paragraph,) = parse_markdown("![alt](pic.png)").blocks
    assert paragraph.inline == (Link("pic.png", (Text("alt"),)),)


def test_parsed_documents_are_well_formed(sample_markdown):
    check_structure(parse_markdown(sample_markdown))


def test_unknown_containers_are_flattened():
    tokens = [
        {"type": "blank_line"},
        {
            "type": "admonition",
            "children": [{"type": "paragraph", "children": [{"type": "text", "raw": "hi"}]}],
        },
        {"type": "block_html", "raw": "<div></div>"},
    ]
    assert from_tokens(tokens) == Document((Paragraph((Text("hi"),)),))
