from mdview.models.rule import line_rule, run_rule, span_rule
from mdview.services.markdown_rules import (
    DEFAULT_RULES,
    ESCAPED_RULES,
    build_rules,
    rules_for,
)


def test_rule_order_is_fixed():
    assert [r.name for r in DEFAULT_RULES] == [
        "fenced_code",
        "inline_code",
        "heading",
        "block_quote",
        "bullet_item",
        "numbered_item",
        "bold",
        "italic",
        "separator",
        "paragraph_break",
        "paragraph_break_pair",
        "line_break",
    ]
    # Escaped table differs only in the quote marker
    assert [r.name for r in ESCAPED_RULES] == [r.name for r in DEFAULT_RULES]


def test_matching_parameters_are_explicit():
    by_name = {r.name: r for r in DEFAULT_RULES}
    for name in ("heading", "block_quote", "bullet_item", "numbered_item", "separator"):
        assert by_name[name].anchored
    for name in ("fenced_code", "inline_code", "bold", "italic"):
        assert not by_name[name].anchored
        assert by_name[name].lazy
    assert by_name["fenced_code"].protects and by_name["inline_code"].protects
    assert not by_name["bold"].protects


def test_rules_for_selects_table():
    assert rules_for(False) is DEFAULT_RULES
    assert rules_for(True) is ESCAPED_RULES
    assert build_rules(escape_html=True)[3].pattern.pattern == "^&gt; (.+)$"


def test_span_rule_lazy_vs_greedy():
    lazy = span_rule("i", "*", r"<i>\1</i>")
    greedy = span_rule("i", "*", r"<i>\1</i>", lazy=False)
    assert lazy.apply("*a* b *c*") == "<i>a</i> b <i>c</i>"
    assert greedy.apply("*a* b *c*") == "<i>a* b *c</i>"


def test_line_rule_is_anchored_per_line():
    rule = line_rule("quote", "> ", r"[\1]")
    assert rule.apply("> a\nx > b\n> c") == "[a]\nx > b\n[c]"


def test_line_rule_without_body_matches_whole_line():
    rule = line_rule("sep", "---", "<hr/>", body=None)
    assert rule.apply("---\n--- x") == "<hr/>\n--- x"


def test_callable_replacement():
    rule = run_rule("count", r"a+", lambda m: str(len(m.group(0))))
    assert rule.apply("aaa-b-a") == "3-b-1"
