# md_to_html/markdown/renderer.py

import logging

import pypandoc

from ..exceptions import MarkdownEngineError
from .config import get_pandoc_config
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors

logger = logging.getLogger(__name__)


def pandoc_to_html(text):
    """Convert markdown text to an HTML fragment with Pandoc."""
    pandoc_config = get_pandoc_config()

    try:
        return pypandoc.convert_text(
            text,
            to=pandoc_config["to"],
            format=pandoc_config["from"],
            extra_args=pandoc_config["extra_args"],
            filters=pandoc_config.get("filters", []),
        )
    except (RuntimeError, OSError) as e:
        logger.error(f"Pandoc conversion failed: {e}", extra={"error": str(e)})
        raise MarkdownEngineError(f"Pandoc conversion failed: {e}") from e


def render_markdown(text, context=None, engine=None):
    """
    Main rendering function with pre/post processing pipeline

    Args:
        text: Raw markdown text
        context: Optional dict shared by the processors (diagram outcomes,
            code highlighter, collected styles)
        engine: Callable mapping markdown text to HTML; Pandoc by default

    Returns:
        HTML fragment
    """
    context = context if context is not None else {}
    engine = engine or pandoc_to_html

    # Pre-processing: diagram fences become placeholder tokens
    text = apply_preprocessors(text, context)

    html = engine(text)

    # Post-processing: placeholders become SVG, code blocks get highlighted
    html = apply_postprocessors(html, context)

    return html
