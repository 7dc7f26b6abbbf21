from __future__ import annotations
import html
import logging
import re
from dataclasses import dataclass, field
from typing import List

from mdview.config import RenderOptions
from mdview.services.markdown_rules import RuleTable, rules_for

logger = logging.getLogger(__name__)

CONTAINER_CLASS = "markdown-renderer"

# Private-use delimiters around stashed code spans when protect_code is on
_STASH_OPEN = "\ue000"
_STASH_CLOSE = "\ue001"
_re_stash = re.compile(f"{_STASH_OPEN}([0-9]+){_STASH_CLOSE}")


def container_class(compact: bool) -> str:
    return f"{CONTAINER_CLASS} compact" if compact else CONTAINER_CLASS


def _apply_chain(content: str, rules: RuleTable, protect_code: bool) -> str:
    stash: List[str] = []

    def park(rule_output: str) -> str:
        stash.append(rule_output)
        return f"{_STASH_OPEN}{len(stash) - 1}{_STASH_CLOSE}"

    text = content
    for rule in rules:
        if protect_code and rule.protects:
            text = rule.pattern.sub(lambda m, r=rule: park(r.expand(m)), text)
        else:
            text = rule.apply(text)

    if not stash:
        return text

    def restore(m: re.Match) -> str:
        index = int(m.group(1))
        return stash[index] if index < len(stash) else m.group(0)

    return _re_stash.sub(restore, text)


def render(
    content: str, compact: bool = False, options: RenderOptions | None = None
) -> str:
    """Render dialect markdown into display markup.

    Total over every string: unmatched or malformed syntax is passed through
    literally. ``compact`` is a display-surface mode and does not change the
    rules; it is accepted here so callers can forward one flag set.
    """
    if not content:
        return ""
    opts = options or RenderOptions()
    source = html.escape(content, quote=False) if opts.escape_html else content
    rendered = _apply_chain(source, rules_for(opts.escape_html), opts.protect_code)
    logger.debug(
        "Rendered %d chars into %d chars (compact=%s, escape_html=%s, protect_code=%s)",
        len(content),
        len(rendered),
        compact,
        opts.escape_html,
        opts.protect_code,
    )
    return rendered


@dataclass
class MarkdownService:
    """Converts note markdown into markup for the preview surface.

    Holds only the render options; every call is independent, so a single
    instance may be shared across callers and threads.
    """

    options: RenderOptions = field(default_factory=RenderOptions)

    def render(self, content: str, compact: bool = False) -> str:
        return render(content, compact=compact, options=self.options)

    def to_html(self, content: str, compact: bool = False) -> str:
        """Render and wrap in the ``markdown-renderer`` container element."""
        body = self.render(content, compact=compact)
        return f'<div class="{container_class(compact)}">{body}</div>'
