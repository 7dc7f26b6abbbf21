from __future__ import annotations
import re
from typing import Tuple

from mdview.models.rule import TransformationRule, line_rule, run_rule, span_rule

# Output tokens (use these names; do not hard-code markup elsewhere)
PARAGRAPH_BREAK = '<div class="md-paragraph-break"></div>'
LINE_BREAK = "<br/>"
BULLET_GLYPH = "•"

RuleTable = Tuple[TransformationRule, ...]


def _heading(m: re.Match) -> str:
    level = len(m.group(1))
    return f'<div class="md-h{level}">{m.group(2)}</div>'


def _numbered_item(m: re.Match) -> str:
    # The source numeral is the label; lists are never renumbered.
    return (
        '<div class="md-list-item">'
        f'<span class="md-number">{m.group(1)}.</span>{m.group(2)}</div>'
    )


def build_rules(escape_html: bool = False) -> RuleTable:
    """Return the ordered rule chain.

    Order is load-bearing: every rule runs over the output of the previous
    ones. Code comes first, headings are matched by hash count in one rule,
    bold precedes italic, and newline handling runs last.

    With ``escape_html`` the source has already had ``>`` turned into
    ``&gt;``, so the quote marker is matched in its escaped form.
    """
    quote_marker = "&gt; " if escape_html else "> "
    return (
        span_rule(
            "fenced_code",
            "```",
            r'<pre class="md-code-block">\1</pre>',
            body="[^`]",
            protects=True,
        ),
        span_rule(
            "inline_code",
            "`",
            r'<code class="md-inline-code">\1</code>',
            body="[^`]",
            protects=True,
        ),
        line_rule("heading", "(#{1,4}) ", _heading),
        line_rule("block_quote", quote_marker, r'<div class="md-blockquote">\1</div>'),
        line_rule(
            "bullet_item",
            "[-*] ",
            r'<div class="md-list-item"><span class="md-bullet">'
            + BULLET_GLYPH
            + r"</span>\1</div>",
        ),
        line_rule("numbered_item", r"([0-9]+)\. ", _numbered_item),
        span_rule("bold", "**", r'<strong class="md-bold">\1</strong>'),
        span_rule("italic", "*", r'<em class="md-italic">\1</em>'),
        line_rule("separator", "---", '<hr class="md-separator" />', body=None),
        run_rule("paragraph_break", r"\n{3,}", PARAGRAPH_BREAK),
        run_rule("paragraph_break_pair", r"\n{2}", PARAGRAPH_BREAK),
        run_rule("line_break", r"\n", LINE_BREAK),
    )


DEFAULT_RULES: RuleTable = build_rules()
ESCAPED_RULES: RuleTable = build_rules(escape_html=True)


def rules_for(escape_html: bool) -> RuleTable:
    return ESCAPED_RULES if escape_html else DEFAULT_RULES
