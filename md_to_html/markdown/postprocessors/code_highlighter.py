# md_to_html/markdown/postprocessors/code_highlighter.py

HIGHLIGHTER_KEY = "code_highlighter"
HIGHLIGHT_STYLES_KEY = "highlight_styles"


def highlight_code_blocks(html: str, context: dict) -> str:
    """
    Run the CodeBlockHighlighter found in ``context["code_highlighter"]``.

    The stylesheet the highlighter produced is stored in
    ``context["highlight_styles"]`` for the document shell. Without a
    highlighter in the context the HTML is returned untouched.
    """
    highlighter = context.get(HIGHLIGHTER_KEY)
    if highlighter is None:
        context[HIGHLIGHT_STYLES_KEY] = ""
        return html

    result = highlighter.highlight(html)
    context[HIGHLIGHT_STYLES_KEY] = result.styles
    return result.html
