from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Callable, Union

Replacement = Union[str, Callable[[re.Match], str]]


@dataclass(frozen=True)
class TransformationRule:
    """A single (matcher, replacement) step of the markdown rule chain.

    Attributes:
        name: Stable identifier, used in logs and tests.
        pattern: Compiled matcher.
        replacement: Either a ``re`` template string or a callable that
            receives the match and returns the substituted text.
        anchored: True for block-level rules that match whole ``\\n``-delimited
            lines; False for inline rules that match anywhere.
        lazy: True when the captured body is matched shortest-first.
        protects: True when the output is a code span whose body may be
            shielded from later rules.
    """

    name: str
    pattern: re.Pattern
    replacement: Replacement
    anchored: bool = False
    lazy: bool = False
    protects: bool = False

    def expand(self, match: re.Match) -> str:
        if callable(self.replacement):
            return self.replacement(match)
        return match.expand(self.replacement)

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.expand, text)


def line_rule(
    name: str,
    prefix: str,
    replacement: Replacement,
    body: str | None = "(.+)",
) -> TransformationRule:
    """Build a block-level rule matching ``prefix`` + ``body`` over a full line.

    ``prefix`` and ``body`` are regex fragments. Pass ``body=None`` for rules
    where the whole line is the marker (for example ``---``).
    """
    source = f"^{prefix}{body or ''}$"
    return TransformationRule(
        name=name,
        pattern=re.compile(source, re.MULTILINE),
        replacement=replacement,
        anchored=True,
    )


def span_rule(
    name: str,
    delimiter: str,
    replacement: Replacement,
    body: str = ".",
    lazy: bool = True,
    protects: bool = False,
) -> TransformationRule:
    """Build an inline rule for text wrapped in ``delimiter`` on both sides.

    ``body`` is the character class the wrapped text is made of; ``lazy``
    selects shortest-match so that two spans on one line stay separate.
    """
    quantifier = "+?" if lazy else "+"
    fence = re.escape(delimiter)
    return TransformationRule(
        name=name,
        pattern=re.compile(f"{fence}({body}{quantifier}){fence}"),
        replacement=replacement,
        lazy=lazy,
        protects=protects,
    )


def run_rule(name: str, pattern: str, replacement: Replacement) -> TransformationRule:
    """Build an unanchored rule from a raw pattern (used for newline runs)."""
    return TransformationRule(
        name=name, pattern=re.compile(pattern), replacement=replacement
    )
