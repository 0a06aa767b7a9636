"""
md-to-html - Markdown to HTML converter.

Converts markdown files with mermaid diagrams to a self-contained HTML
document. Diagrams are rendered to SVG with the Mermaid CLI and embedded
inline; fenced code blocks are highlighted with Pygments.
"""

from .converter import MarkdownToHtmlConverter, convert_file
from .diagrams.renderer import MermaidRenderer

__version__ = "1.0.0"

__all__ = ["MarkdownToHtmlConverter", "MermaidRenderer", "convert_file", "__version__"]
