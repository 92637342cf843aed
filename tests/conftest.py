import pytest

from md2smol import (
    Blockquote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    Link,
    List,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
)


SAMPLE_MARKDOWN = """# Main Heading

This is a paragraph with **bold** and *italic* text.

## Subheading

Here's a [link](https://example.com) and some `inline code`.

### List Example

* Item 1
* Item 2
* Item 3

Ordered list:

1. First
2. Second
3. Third

```
code block
with multiple lines
```

> This is a blockquote
> with multiple lines

---

Final paragraph.
"""


@pytest.fixture
def sample_markdown():
    return SAMPLE_MARKDOWN


@pytest.fixture
def link_document():
    return Document((
        Heading(1, (Text("Hello World"),)),
        Paragraph((Text("See "), Link("https://example.com", (Text("link"),)), Text("."))),
    ))


@pytest.fixture
def rich_document():
    return Document((
        Heading(2, (Text("Status "), Emphasis((Text("report"),)))),
        Paragraph((
            Text("Read "),
            Strong((Link("https://a.example", (Text("alpha"),)),)),
            Text(", then "),
            Link("https://b.example", (Text("beta"),)),
            Text(" and "),
            Link("https://a.example", (Text("alpha again"),)),
            Text(" with "),
            Code("x = 1"),
            Text("."),
        )),
        List(False, (
            (Paragraph((Text("Item 1"),)),),
            (Paragraph((Text("Item 2"),)),),
        )),
        List(True, (
            (Paragraph((Text("First"),)),),
            (Paragraph((Text("Second"),)),),
        )),
        CodeBlock("def f():\n    return  1\n", "python"),
        Blockquote((Paragraph((Text("Quoted "), Link("https://c.example", (Text("gamma"),)))),)),
        ThematicBreak(),
        Paragraph((Text("Done."),)),
    ))
