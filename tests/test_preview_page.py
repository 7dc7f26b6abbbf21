from mdview.config import RenderOptions
from mdview.services.markdown_service import MarkdownService
from mdview.ui.preview_page import PreviewPage
from mdview.ui.theme import LIGHT_THEME


def test_build_standalone_page():
    page = PreviewPage(theme=LIGHT_THEME)
    doc = page.build("# Hi", title="My <Note>", compact=True)
    assert doc.startswith("<!DOCTYPE html>")
    assert "<title>My &lt;Note&gt;</title>" in doc
    assert '<div class="markdown-renderer compact"><div class="md-h1">Hi</div></div>' in doc
    assert LIGHT_THEME.background in doc


def test_body_without_highlighting_matches_service():
    page = PreviewPage()
    assert page.body("`x`") == MarkdownService().to_html("`x`")


def test_body_with_highlighting():
    page = PreviewPage(
        service=MarkdownService(options=RenderOptions(protect_code=True)),
        highlight_code=True,
    )
    body = page.body("```python\nimport os\n```")
    assert '<span class="md-code-kw">import</span>' in body
    assert body.startswith('<div class="markdown-renderer">')
