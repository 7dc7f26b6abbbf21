from __future__ import annotations
import html
import logging
import re
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from pygments import lex
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, guess_lexer
from pygments.token import Token
from pygments.util import ClassNotFound

from mdview.services.markdown_rules import LINE_BREAK

logger = logging.getLogger(__name__)

_re_block = re.compile(r'<pre class="md-code-block">(.*?)</pre>', re.DOTALL)
_re_lang = re.compile(r"[\w+#.-]+")

# Ordered: more specific token types first
_TOKEN_CLASSES: Tuple[Tuple[Any, str], ...] = (
    (Token.Comment, "cmt"),
    (Token.Keyword, "kw"),
    (Token.Name.Function, "func"),
    (Token.Name.Class, "class"),
    (Token.Name.Builtin, "builtin"),
    (Token.Name.Decorator, "deco"),
    (Token.Name, "name"),
    (Token.Literal.String, "str"),
    (Token.Literal.Number, "num"),
    (Token.Operator, "op"),
    (Token.Punctuation, "punc"),
)

CODE_TOKEN_CLASSES = tuple(f"md-code-{suffix}" for _, suffix in _TOKEN_CLASSES)


def css_class_for(tok_type: Any) -> Optional[str]:
    for parent, suffix in _TOKEN_CLASSES:
        if tok_type in parent:
            return f"md-code-{suffix}"
    return None


@dataclass
class CodeHighlighter:
    """Colours fenced code blocks in rendered markup using pygments tokens.

    Works on the transformer output, so it has to undo the line-break
    markers the newline rules put inside ``<pre>`` bodies. Blocks it cannot
    read back as plain code are returned untouched.
    """

    max_block_chars: int = 20000
    guess_sample_chars: int = 4000

    def highlight_blocks(self, markup: str) -> str:
        return _re_block.sub(self._highlight_match, markup)

    def _highlight_match(self, m: re.Match) -> str:
        body = m.group(1)
        highlighted = self.highlight_body(body)
        if highlighted is None:
            return m.group(0)
        return f'<pre class="md-code-block">{highlighted}</pre>'

    def highlight_body(self, body: str) -> Optional[str]:
        uses_breaks = LINE_BREAK in body
        raw = body.replace(LINE_BREAK, "\n")
        if "<" in raw:
            # Some later rule wrote markup into the block; leave it alone
            logger.debug("Skipping code block containing markup")
            return None
        code = html.unescape(raw)
        if len(code) > self.max_block_chars:
            logger.debug("Skipping code block of %d chars", len(code))
            return None

        lang_line, code = self._split_language(code)
        lexer = self._lexer_for(lang_line, code)
        if lexer is None:
            return None

        parts = []
        if lang_line is not None:
            parts.append(f'<span class="md-code-lang">{html.escape(lang_line)}</span>\n')
        for tok_type, tok_text in lex(code, lexer):
            if not tok_text:
                continue
            escaped = html.escape(tok_text, quote=False)
            css = css_class_for(tok_type)
            if css and not tok_text.isspace():
                parts.append(f'<span class="{css}">{escaped}</span>')
            else:
                parts.append(escaped)
        out = "".join(parts)
        return out.replace("\n", LINE_BREAK) if uses_breaks else out

    def _split_language(self, code: str) -> Tuple[Optional[str], str]:
        if "\n" not in code:
            return None, code
        first, rest = code.split("\n", 1)
        name = first.strip()
        if not _re_lang.fullmatch(name):
            return None, code
        try:
            get_lexer_by_name(name)
        except ClassNotFound:
            return None, code
        return first, rest

    def _lexer_for(self, lang_line: Optional[str], code: str) -> Optional[Lexer]:
        options = {"stripnl": False, "ensurenl": False}
        if lang_line is not None:
            return get_lexer_by_name(lang_line.strip(), **options)
        if not code.strip():
            return None
        try:
            return guess_lexer(code[: self.guess_sample_chars], **options)
        except ClassNotFound:
            logger.debug("No lexer matches code block")
            return None
