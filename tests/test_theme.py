import pytest

from mdview.services.code_highlighter import CODE_TOKEN_CLASSES
from mdview.ui.theme import DARK_THEME, LIGHT_THEME, build_stylesheet, get_theme

RULE_CLASSES = [
    "md-h1",
    "md-h2",
    "md-h3",
    "md-h4",
    "md-blockquote",
    "md-list-item",
    "md-bullet",
    "md-number",
    "md-bold",
    "md-italic",
    "md-inline-code",
    "md-code-block",
    "md-separator",
    "md-paragraph-break",
]


def test_get_theme_by_name():
    assert get_theme("dark") is DARK_THEME
    assert get_theme("LIGHT") is LIGHT_THEME
    with pytest.raises(ValueError):
        get_theme("neon")


@pytest.mark.parametrize("theme", [DARK_THEME, LIGHT_THEME])
def test_stylesheet_covers_every_emitted_class(theme):
    css = build_stylesheet(theme)
    for cls in RULE_CLASSES + list(CODE_TOKEN_CLASSES) + ["md-code-lang"]:
        assert f".{cls}" in css
    assert ".markdown-renderer.compact" in css
    assert theme.heading_fg in css
