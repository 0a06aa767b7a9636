# md_to_html/diagrams/extractor.py
"""
Locate mermaid fences in raw markdown.

    # Title

    ```mermaid
    flowchart LR
    A --> B
    ```

yields one DiagramRecord("diagram_0", "flowchart LR\\nA --> B", start, end)
where markdown[start:end] is the whole fence, both delimiter lines included.
"""

import re
from dataclasses import dataclass
from typing import List

# Opening fence, optional trailing whitespace, newline, then the body up to the
# nearest closing fence.
MERMAID_FENCE_PATTERN = re.compile(r"```mermaid\s*\n(.*?)```", re.DOTALL)


@dataclass(frozen=True)
class DiagramRecord:
    diagram_id: str
    source_code: str
    start: int
    end: int


def extract_mermaid_diagrams(markdown: str) -> List[DiagramRecord]:
    """
    Return the mermaid diagrams of ``markdown`` in text order.

    Fences whose body is empty after trimming are skipped and do not consume
    an id, so ids are always ``diagram_0 .. diagram_{K-1}``.
    """
    diagrams: List[DiagramRecord] = []

    for match in MERMAID_FENCE_PATTERN.finditer(markdown):
        source_code = match.group(1).strip()
        if not source_code:
            continue

        diagrams.append(
            DiagramRecord(
                diagram_id=f"diagram_{len(diagrams)}",
                source_code=source_code,
                start=match.start(),
                end=match.end(),
            )
        )

    return diagrams
