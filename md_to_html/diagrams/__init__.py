# md_to_html/diagrams/__init__.py

from .extractor import MERMAID_FENCE_PATTERN, DiagramRecord, extract_mermaid_diagrams
from .renderer import MERMAID_RENDER_TIMEOUT_SECONDS, MermaidRenderer, RenderOutcome

__all__ = [
    "MERMAID_FENCE_PATTERN",
    "MERMAID_RENDER_TIMEOUT_SECONDS",
    "DiagramRecord",
    "MermaidRenderer",
    "RenderOutcome",
    "extract_mermaid_diagrams",
]
