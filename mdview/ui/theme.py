from __future__ import annotations
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class ThemeColors:
    """Defines a set of colors for the preview surface and markdown classes."""

    # Page
    background: str
    foreground: str
    muted_fg: str
    border: str

    # Markdown classes
    heading_fg: str
    inline_code_bg: str
    code_block_bg: str
    blockquote_fg: str
    blockquote_bar: str
    list_item_fg: str
    list_marker_fg: str

    # Code syntax colors
    code_kw_fg: str
    code_name_fg: str
    code_builtin_fg: str
    code_str_fg: str
    code_num_fg: str
    code_cmt_fg: str
    code_op_fg: str
    code_punc_fg: str
    code_func_fg: str
    code_class_fg: str
    code_deco_fg: str


# Slightly muted dark theme
DARK_THEME = ThemeColors(
    background="#111827",  # gray-900
    foreground="#e5e7eb",  # gray-200
    muted_fg="#9ca3af",  # gray-400
    border="#374151",  # gray-700
    heading_fg="#93c5fd",  # blue-300
    inline_code_bg="#1f2937",  # gray-800
    code_block_bg="#0f172a",  # slate-900
    blockquote_fg="#9ca3af",  # gray-400
    blockquote_bar="#4b5563",  # gray-600
    list_item_fg="#d1d5db",  # gray-300
    list_marker_fg="#93c5fd",  # blue-300
    code_kw_fg="#c084fc",  # purple-400
    code_name_fg="#e5e7eb",  # gray-200 (default text)
    code_builtin_fg="#60a5fa",  # blue-400
    code_str_fg="#34d399",  # emerald-400
    code_num_fg="#fbbf24",  # amber-400
    code_cmt_fg="#6b7280",  # gray-500
    code_op_fg="#f472b6",  # pink-400
    code_punc_fg="#9ca3af",  # gray-400
    code_func_fg="#93c5fd",  # blue-300
    code_class_fg="#fca5a5",  # red-300
    code_deco_fg="#d8b4fe",  # purple-300
)

LIGHT_THEME = ThemeColors(
    background="#ffffff",
    foreground="#1f2937",  # gray-800
    muted_fg="#6b7280",  # gray-500
    border="#e5e7eb",  # gray-200
    heading_fg="#1d4ed8",  # blue-700
    inline_code_bg="#f3f4f6",  # gray-100
    code_block_bg="#f9fafb",  # gray-50
    blockquote_fg="#4b5563",  # gray-600
    blockquote_bar="#d1d5db",  # gray-300
    list_item_fg="#374151",  # gray-700
    list_marker_fg="#2563eb",  # blue-600
    code_kw_fg="#7e22ce",  # purple-700
    code_name_fg="#1f2937",  # gray-800
    code_builtin_fg="#1d4ed8",  # blue-700
    code_str_fg="#047857",  # emerald-700
    code_num_fg="#b45309",  # amber-700
    code_cmt_fg="#9ca3af",  # gray-400
    code_op_fg="#be185d",  # pink-700
    code_punc_fg="#4b5563",  # gray-600
    code_func_fg="#2563eb",  # blue-600
    code_class_fg="#b91c1c",  # red-700
    code_deco_fg="#9333ea",  # purple-600
)

THEMES: Dict[str, ThemeColors] = {"dark": DARK_THEME, "light": LIGHT_THEME}


def get_theme(name: str) -> ThemeColors:
    try:
        return THEMES[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown theme {name!r}; expected one of {sorted(THEMES)}"
        ) from None


def build_stylesheet(theme: ThemeColors) -> str:
    """Return CSS for every class the markdown rules and highlighter emit.

    ``.markdown-renderer.compact`` tightens font size and spacing; it is the
    only place the compact flag has an effect.
    """
    t = theme
    return f"""\
.markdown-renderer {{
  color: {t.foreground};
  background: {t.background};
  font-size: 15px;
  line-height: 1.75;
  word-break: break-word;
}}
.markdown-renderer.compact {{
  font-size: 13px;
  line-height: 1.6;
}}
.markdown-renderer .md-h1,
.markdown-renderer .md-h2,
.markdown-renderer .md-h3,
.markdown-renderer .md-h4 {{
  color: {t.heading_fg};
  font-weight: 700;
  margin: 0.8em 0 0.4em;
}}
.markdown-renderer .md-h1 {{ font-size: 1.6em; }}
.markdown-renderer .md-h2 {{ font-size: 1.4em; }}
.markdown-renderer .md-h3 {{ font-size: 1.2em; }}
.markdown-renderer .md-h4 {{ font-size: 1.05em; }}
.markdown-renderer.compact .md-h1,
.markdown-renderer.compact .md-h2,
.markdown-renderer.compact .md-h3,
.markdown-renderer.compact .md-h4 {{
  margin: 0.4em 0 0.2em;
}}
.markdown-renderer .md-blockquote {{
  color: {t.blockquote_fg};
  border-left: 3px solid {t.blockquote_bar};
  padding-left: 12px;
  margin: 0.5em 0;
}}
.markdown-renderer .md-list-item {{
  color: {t.list_item_fg};
  padding-left: 1.4em;
  text-indent: -1em;
}}
.markdown-renderer .md-bullet,
.markdown-renderer .md-number {{
  color: {t.list_marker_fg};
  font-weight: 700;
  margin-right: 0.4em;
}}
.markdown-renderer .md-bold {{ font-weight: 700; }}
.markdown-renderer .md-italic {{ font-style: italic; }}
.markdown-renderer .md-inline-code {{
  background: {t.inline_code_bg};
  border-radius: 3px;
  padding: 0 4px;
  font-family: Consolas, "SFMono-Regular", monospace;
}}
.markdown-renderer .md-code-block {{
  background: {t.code_block_bg};
  border: 1px solid {t.border};
  border-radius: 4px;
  padding: 10px 14px;
  overflow-x: auto;
  white-space: pre-wrap;
  font-family: Consolas, "SFMono-Regular", monospace;
}}
.markdown-renderer.compact .md-code-block {{ padding: 6px 10px; }}
.markdown-renderer .md-separator {{
  border: none;
  border-top: 1px solid {t.border};
  margin: 1em 0;
}}
.markdown-renderer .md-paragraph-break {{ height: 0.8em; }}
.markdown-renderer.compact .md-paragraph-break {{ height: 0.4em; }}
.markdown-renderer .md-code-lang {{ color: {t.muted_fg}; text-decoration: underline; }}
.markdown-renderer .md-code-kw {{ color: {t.code_kw_fg}; }}
.markdown-renderer .md-code-name {{ color: {t.code_name_fg}; }}
.markdown-renderer .md-code-builtin {{ color: {t.code_builtin_fg}; }}
.markdown-renderer .md-code-str {{ color: {t.code_str_fg}; }}
.markdown-renderer .md-code-num {{ color: {t.code_num_fg}; }}
.markdown-renderer .md-code-cmt {{ color: {t.code_cmt_fg}; }}
.markdown-renderer .md-code-op {{ color: {t.code_op_fg}; }}
.markdown-renderer .md-code-punc {{ color: {t.code_punc_fg}; }}
.markdown-renderer .md-code-func {{ color: {t.code_func_fg}; }}
.markdown-renderer .md-code-class {{ color: {t.code_class_fg}; }}
.markdown-renderer .md-code-deco {{ color: {t.code_deco_fg}; }}
"""
