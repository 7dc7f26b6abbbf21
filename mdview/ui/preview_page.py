from __future__ import annotations
import html
from dataclasses import dataclass, field
from typing import Optional

from mdview.services.code_highlighter import CodeHighlighter
from mdview.services.markdown_service import MarkdownService, container_class
from mdview.ui.theme import DARK_THEME, ThemeColors, build_stylesheet


@dataclass
class PreviewPage:
    """Standalone HTML page hosting rendered markdown.

    This is the display surface: it owns the container element, the
    stylesheet and the compact mode. The markup itself comes from
    MarkdownService unchanged, apart from optional code colouring.
    """

    service: MarkdownService = field(default_factory=MarkdownService)
    theme: ThemeColors = DARK_THEME
    highlight_code: bool = False
    highlighter: Optional[CodeHighlighter] = None

    def body(self, content: str, compact: bool = False) -> str:
        markup = self.service.render(content, compact=compact)
        if self.highlight_code:
            markup = (self.highlighter or CodeHighlighter()).highlight_blocks(markup)
        return f'<div class="{container_class(compact)}">{markup}</div>'

    def build(self, content: str, title: str = "Untitled", compact: bool = False) -> str:
        return (
            "<!DOCTYPE html>\n"
            '<html lang="en">\n'
            "<head>\n"
            '<meta charset="utf-8">\n'
            f"<title>{html.escape(title)}</title>\n"
            f"<style>\n{build_stylesheet(self.theme)}</style>\n"
            "</head>\n"
            f'<body style="background: {self.theme.background}; margin: 2em;">\n'
            f"{self.body(content, compact=compact)}\n"
            "</body>\n"
            "</html>\n"
        )
