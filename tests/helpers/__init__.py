"""Test helper utilities."""

from html.parser import HTMLParser


class TableParser(HTMLParser):
    """Collect the cells of a rendered table, grouped by section.

    ``sections["thead"]`` is a list of rows; each row is a list of cells;
    each cell is a dict with ``tag``, ``attrs``, ``text`` and ``links``.
    """

    SECTIONS = ("thead", "tbody", "tfoot")

    def __init__(self):
        super().__init__()
        self.sections = {name: [] for name in self.SECTIONS}
        self.tables = 0
        self._section = None
        self._cell = None

    def handle_starttag(self, tag, attrs):
        attrs = dict(attrs)
        if tag == "table":
            self.tables += 1
        elif tag in self.SECTIONS:
            self._section = tag
        elif tag == "tr" and self._section:
            self.sections[self._section].append([])
        elif tag in ("td", "th") and self._section and self._cell is None:
            self._cell = {"tag": tag, "attrs": attrs, "text": "", "links": []}
            self.sections[self._section][-1].append(self._cell)
        elif tag == "a" and self._cell is not None:
            self._cell["links"].append(attrs)

    def handle_endtag(self, tag):
        if tag in self.SECTIONS:
            self._section = None
        elif self._cell is not None and tag == self._cell["tag"]:
            self._cell["text"] = self._cell["text"].strip()
            self._cell = None

    def handle_data(self, data):
        if self._cell is not None:
            self._cell["text"] += data


def parse_table(markup):
    parser = TableParser()
    parser.feed(str(markup))
    parser.close()
    return parser.sections


def cell_texts(row):
    return [cell["text"] for cell in row]
