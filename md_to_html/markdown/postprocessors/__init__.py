# md_to_html/markdown/postprocessors/__init__.py

from .code_highlighter import highlight_code_blocks
from .diagram_embedder import embed_diagrams

POSTPROCESSORS = [
    embed_diagrams,  # Replace mermaid placeholders with inline SVG
    highlight_code_blocks,  # Pygments markup for <pre><code class="language-X">
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
