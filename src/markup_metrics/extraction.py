from __future__ import annotations

import logging
from html.parser import HTMLParser

logger = logging.getLogger(__name__)


class _HTMLTextExtractor(HTMLParser):
    """
    Collect reader-visible text from an HTML document.

    ``HTMLParser`` is a pure tokenizer: nothing is executed or fetched. Text
    inside head, title, script, style and template elements is dropped; everything
    else is kept in document order with its original whitespace.
    """

    HIDDEN_TAGS = {"head", "script", "style", "template", "title"}
    # Tags that may appear inside head without implicitly closing it.
    HEAD_TAGS = {
        "base",
        "link",
        "meta",
        "noscript",
        "script",
        "style",
        "template",
        "title",
    }
    BLOCK_TAGS = {
        "address",
        "article",
        "aside",
        "blockquote",
        "br",
        "dd",
        "div",
        "dl",
        "dt",
        "figcaption",
        "figure",
        "footer",
        "form",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "header",
        "hr",
        "li",
        "main",
        "nav",
        "ol",
        "p",
        "pre",
        "section",
        "table",
        "td",
        "th",
        "tr",
        "ul",
    }

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._chunks: list[str] = []
        self._hidden_depth: dict[str, int] = {}
        self._pending_break = False

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if "head" in self._hidden_depth and tag not in self.HEAD_TAGS:
            # Body content implicitly closes an open head.
            self._hidden_depth.pop("head", None)
        if tag in self.HIDDEN_TAGS:
            self._hidden_depth[tag] = self._hidden_depth.get(tag, 0) + 1
        if tag in self.BLOCK_TAGS:
            self._pending_break = True

    def handle_endtag(self, tag: str) -> None:
        if tag in self.HIDDEN_TAGS:
            depth = self._hidden_depth.get(tag, 0) - 1
            if depth > 0:
                self._hidden_depth[tag] = depth
            else:
                self._hidden_depth.pop(tag, None)
        if tag in self.BLOCK_TAGS:
            self._pending_break = True

    def handle_data(self, data: str) -> None:
        if set(self._hidden_depth) == {"head"} and data.strip():
            self._hidden_depth.pop("head")
        if self._hidden_depth or not data:
            return
        if (
            self._pending_break
            and self._chunks
            and not self._chunks[-1][-1:].isspace()
            and not data[:1].isspace()
        ):
            self._chunks.append(" ")
        self._pending_break = False
        self._chunks.append(data)

    def parse_marked_section(self, i: int, report: int = 1) -> int:
        try:
            return super().parse_marked_section(i, report)
        except AssertionError as exc:
            logger.warning("Skipping malformed marked section (%s).", exc)
            end = self.rawdata.find("]]>", i + 3)
            if end < 0:
                return -1
            return end + 3

    def get_text(self) -> str:
        return "".join(self._chunks)


def extract_text(document: str) -> str:
    """
    Return the reader-visible text of a markup document.

    Malformed markup is tolerated; when the tokenizer gives up on a
    pathological input the text gathered up to that point is returned.
    """
    document = document.lstrip("\ufeff")
    if not document:
        return ""
    parser = _HTMLTextExtractor()
    try:
        parser.feed(document)
        parser.close()
    except (AssertionError, ValueError) as exc:
        logger.warning("Markup tokenizer stopped early (%s); using partial text.", exc)
    return parser.get_text()
