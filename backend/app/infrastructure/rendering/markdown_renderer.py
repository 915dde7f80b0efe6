"""Regex-based Markdown → HTML renderer for article content.

Not a Markdown parser: a fixed sequence of substitutions where each step runs
on the output of the previous one. The order matters: bold must run before
italic because ``*`` is a prefix of ``**``, and line breaks run last so the
multi-line patterns (fenced code) still see newlines.

Raw HTML in the content is passed through unescaped; articles are written by
a single trusted author.
"""

import re

from app.application.interfaces import MarkdownRenderer

_FLAGS = re.MULTILINE | re.IGNORECASE

# Line content stops at either line terminator, so CRLF text keeps its "\r" outside the tags
_LINE = r"[^\r\n]*"

# (pattern, replacement) pairs, applied top to bottom.
_SUBSTITUTIONS: list[tuple[re.Pattern[str], str]] = [
    # Headers (longest marker first)
    (re.compile(rf"^### ({_LINE})", _FLAGS), r"<h3>\1</h3>"),
    (re.compile(rf"^## ({_LINE})", _FLAGS), r"<h2>\1</h2>"),
    (re.compile(rf"^# ({_LINE})", _FLAGS), r"<h1>\1</h1>"),
    # Emphasis
    (re.compile(rf"\*\*({_LINE})\*\*", _FLAGS), r"<strong>\1</strong>"),
    (re.compile(rf"\*({_LINE})\*", _FLAGS), r"<em>\1</em>"),
    # Code
    (re.compile(r"```([\s\S]*?)```", _FLAGS), r"<pre><code>\1</code></pre>"),
    (re.compile(r"`([^`]*)`", _FLAGS), r"<code>\1</code>"),
    # Links
    (re.compile(r"\[([^\]]*)\]\(([^)]*)\)", _FLAGS), r'<a href="\2">\1</a>'),
    # Line breaks
    (re.compile(r"\n", _FLAGS), "<br>"),
]


class RegexMarkdownRenderer(MarkdownRenderer):
    """Implements the MarkdownRenderer port with ordered regex substitutions."""

    def render(self, content: str) -> str:
        html = content
        for pattern, replacement in _SUBSTITUTIONS:
            html = pattern.sub(replacement, html)
        return html
