# md_to_html/markdown/preprocessors/diagram_placeholders.py
"""
Preprocessor that swaps rendered mermaid fences for placeholder tokens.

Converts:
    ```mermaid
    flowchart LR
    A --> B
    ```
into:
    MERMAID_PLACEHOLDER_3f9c...e1_diagram_0

The token is plain text to Pandoc, so it comes out of the engine untouched and
the diagram_embedder postprocessor can put the SVG markup in its place without
Pandoc ever escaping it. The nonce in the prefix is drawn per run and is absent
from the input, so literal token text in the document is left alone.
"""

from typing import Dict, List, Tuple

from ...diagrams.extractor import MERMAID_FENCE_PATTERN
from ...diagrams.renderer import RenderOutcome
from ..placeholders import unique_prefix

PLACEHOLDER_PREFIX = "MERMAID_PLACEHOLDER_"

DIAGRAM_OUTCOMES_KEY = "diagram_outcomes"
DIAGRAM_PLACEHOLDERS_KEY = "diagram_placeholders"
DIAGRAM_PLACEHOLDER_PREFIX_KEY = "diagram_placeholder_prefix"


def diagram_placeholder(diagram_id: str, prefix: str = PLACEHOLDER_PREFIX) -> str:
    return f"{prefix}{diagram_id}"


def insert_diagram_placeholders(text: str, context: dict) -> str:
    """
    Replace every fence named in ``context["diagram_outcomes"]`` with a token.

    The outcomes are keyed by the start offset of their fence. Spans are
    recovered by re-scanning ``text`` and matching on that offset rather than
    trusting offsets cached at extraction time; an outcome whose offset does
    not start a fence is ignored.

    Stores ``{placeholder: RenderOutcome}`` in
    ``context["diagram_placeholders"]`` and the token prefix in
    ``context["diagram_placeholder_prefix"]`` for the embedding postprocessor.
    """
    outcomes: Dict[int, RenderOutcome] = context.get(DIAGRAM_OUTCOMES_KEY) or {}
    placeholders: Dict[str, RenderOutcome] = {}
    replacements: List[Tuple[int, int, str]] = []
    prefix = unique_prefix(PLACEHOLDER_PREFIX, text)

    for start_pos, outcome in outcomes.items():
        for match in MERMAID_FENCE_PATTERN.finditer(text):
            if match.start() == start_pos:
                placeholder = diagram_placeholder(outcome.diagram_id, prefix)
                placeholders[placeholder] = outcome
                replacements.append((match.start(), match.end(), placeholder))
                break

    context[DIAGRAM_PLACEHOLDERS_KEY] = placeholders
    context[DIAGRAM_PLACEHOLDER_PREFIX_KEY] = prefix

    # Back to front, so pending spans keep their offsets
    replacements.sort(key=lambda item: item[0], reverse=True)
    for start, end, placeholder in replacements:
        text = text[:start] + placeholder + text[end:]

    return text
