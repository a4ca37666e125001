"""Recover visible text from the intermediate markup produced by docx converters."""

import re
from html.parser import HTMLParser

_BLOCK_TAGS = frozenset(
    {"p", "div", "tr", "table", "li", "ul", "ol", "blockquote", "pre",
     "h1", "h2", "h3", "h4", "h5", "h6"}
)
_CELL_TAGS = frozenset({"td", "th"})
_HIDDEN_TAGS = frozenset({"head", "script", "style", "title"})
_BLANK_RUN_RE = re.compile(r"\n{3,}")


class _VisibleTextParser(HTMLParser):
    """Collects character data, turning block and cell boundaries into whitespace.

    Inside a table cell block boundaries collapse to a space so that each
    table row stays on one line with cells separated by tabs.
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.chunks: list[str] = []
        self._cell_depth = 0
        self._hidden_depth = 0

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in _HIDDEN_TAGS:
            self._hidden_depth += 1
        elif tag in _CELL_TAGS:
            self._cell_depth += 1
        elif tag == "br":
            self._break()

    def handle_endtag(self, tag: str) -> None:
        if tag in _HIDDEN_TAGS:
            self._hidden_depth = max(0, self._hidden_depth - 1)
        elif tag in _CELL_TAGS:
            self._cell_depth = max(0, self._cell_depth - 1)
            self.chunks.append("\t")
        elif tag in _BLOCK_TAGS:
            self._break()

    def handle_data(self, data: str) -> None:
        if not self._hidden_depth:
            self.chunks.append(data)

    def _break(self) -> None:
        self.chunks.append(" " if self._cell_depth else "\n")


def _normalize_line(line: str) -> str:
    cells = [" ".join(cell.split()) for cell in line.split("\t")]
    while cells and not cells[-1]:
        cells.pop()
    return "\t".join(cells)


def strip_markup(markup: str) -> str:
    """Remove all tags from ``markup`` and return its visible text.

    Entities are unescaped, paragraphs end up on their own lines and table
    cells are tab separated. Runs of blank lines collapse to one.
    """
    parser = _VisibleTextParser()
    parser.feed(markup)
    parser.close()
    lines = [_normalize_line(line) for line in "".join(parser.chunks).split("\n")]
    return _BLANK_RUN_RE.sub("\n\n", "\n".join(lines)).strip()
