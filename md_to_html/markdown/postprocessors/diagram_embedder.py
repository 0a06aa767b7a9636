# md_to_html/markdown/postprocessors/diagram_embedder.py
"""
Postprocessor that puts rendered diagrams where their placeholders ended up.

    <p>MERMAID_PLACEHOLDER_3f9c...e1_diagram_0</p>
becomes
    <div style="max-width: 100%; margin: 1em 0;"><svg ...>...</svg></div>

A token alone in a paragraph takes the paragraph with it, so the block-level
markup is not nested inside ``<p>``. A diagram that was never rendered, or whose
SVG cannot be read, gets a visible notice instead so the reader can tell
something is missing.
"""

import logging
import re

from ..preprocessors.diagram_placeholders import (
    DIAGRAM_PLACEHOLDER_PREFIX_KEY,
    DIAGRAM_PLACEHOLDERS_KEY,
    PLACEHOLDER_PREFIX,
)

logger = logging.getLogger(__name__)

RENDER_FAILED_NOTICE = "<p><em>[Mermaid diagram - rendering failed]</em></p>"
READ_FAILED_NOTICE = "<p><em>[Mermaid diagram - failed to read SVG for {diagram_id}]</em></p>"
SVG_CONTAINER = '<div style="max-width: 100%; margin: 1em 0;">{svg}</div>'

# XML declaration and doctype are not allowed inside an HTML body
_SVG_PROLOG_PATTERN = re.compile(r"\A\s*(?:<\?xml[^>]*\?>\s*)?(?:<!DOCTYPE[^>]*>\s*)?", re.IGNORECASE)


def diagram_placeholder_pattern(prefix=PLACEHOLDER_PREFIX):
    """Match a token, together with its paragraph when it stands alone in one."""
    token = re.escape(prefix) + r"diagram_\d+\b"
    return re.compile(rf"<p>({token})</p>|({token})")


def diagram_html(outcome) -> str:
    """Markup that replaces one diagram placeholder."""
    if not outcome.artifact_path:
        return RENDER_FAILED_NOTICE

    try:
        svg_content = outcome.artifact_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(
            f"Failed to read SVG file {outcome.artifact_path} for {outcome.diagram_id}: {e}",
            extra={"diagram_id": outcome.diagram_id, "error": str(e)},
        )
        return READ_FAILED_NOTICE.format(diagram_id=outcome.diagram_id)

    return SVG_CONTAINER.format(svg=_SVG_PROLOG_PATTERN.sub("", svg_content, count=1))


def embed_diagrams(html: str, context: dict) -> str:
    """
    Replace each diagram placeholder once, in a single pass.

    Uses ``context["diagram_placeholders"]`` and the token prefix built by the
    placeholder preprocessor; tokens it does not know about are left alone.
    """
    placeholders = dict(context.get(DIAGRAM_PLACEHOLDERS_KEY) or {})
    if not placeholders:
        return html

    pattern = diagram_placeholder_pattern(
        context.get(DIAGRAM_PLACEHOLDER_PREFIX_KEY, PLACEHOLDER_PREFIX)
    )

    def replace(match):
        outcome = placeholders.pop(match.group(1) or match.group(2), None)
        if outcome is None:
            return match.group(0)
        return diagram_html(outcome)

    return pattern.sub(replace, html)
