"""Pytest configuration and shared fixtures for the adf2md test suite.

This module provides shared fixtures and test configuration used across
the entire test suite.
"""

import pytest

from adf2md.ast import (
    Blockquote,
    BulletList,
    CodeBlock,
    Doc,
    Emoji,
    Expand,
    HardBreak,
    Heading,
    InlineCard,
    ListItem,
    Media,
    MediaSingle,
    Mention,
    NestedExpand,
    OrderedList,
    Panel,
    Paragraph,
    Rule,
    Strong,
    Table,
    TableCell,
    TableHeader,
    TableRow,
    Text,
    UnknownNode,
)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")


@pytest.fixture
def sample_markdown() -> str:
    """Provide sample Markdown covering every construct the parser maps.

    Returns
    -------
    str
        Markdown document used across multiple tests.

    """
    return """# Sample Document

This is a **sample document** with *italic text* and some `inline code`.

## Lists

- Item 1
- Item 2
  - Nested item

3. Third
4. Fourth

> Quoted text

```python
def hello_world():
    print("Hello, World!")
```

---

| Header 1 | Header 2 |
| --- | --- |
| Row 1 | Data 1 |
"""


@pytest.fixture
def every_node_doc() -> Doc:
    """Provide a document containing every modelled node kind.

    Returns
    -------
    Doc
        Document exercising all node kinds plus an unknown one.

    """
    return Doc(
        content=[
            Heading(level=2, content=[Text(text="Title", marks=[Strong()])]),
            Paragraph(
                content=[
                    Text(text="Hi "),
                    Mention(id="abc", text="@Ada"),
                    Text(text=" "),
                    Emoji(short_name=":smile:"),
                    HardBreak(),
                    InlineCard(url="https://example.com/browse/PROJ-1"),
                ]
            ),
            BulletList(content=[ListItem(content=[Paragraph(content=[Text(text="one")])])]),
            OrderedList(order=2, content=[ListItem(content=[Paragraph(content=[Text(text="two")])])]),
            CodeBlock(language="python", content=[Text(text="x = 1")]),
            Blockquote(content=[Paragraph(content=[Text(text="quoted")])]),
            Rule(),
            Table(
                content=[
                    TableRow(content=[TableHeader(content=[Paragraph(content=[Text(text="H")])])]),
                    TableRow(content=[TableCell(content=[Paragraph(content=[Text(text="C")])])]),
                ]
            ),
            Panel(panel_type="note", content=[Paragraph(content=[Text(text="panel")])]),
            Expand(title="More", content=[Paragraph(content=[Text(text="hidden")])]),
            NestedExpand(content=[Paragraph(content=[Text(text="nested")])]),
            MediaSingle(content=[Media(id="img-1", media_type="file")]),
            Media(id="img-2"),
            UnknownNode(type="layoutSection", content=[Paragraph(content=[Text(text="layout")])]),
        ]
    )
