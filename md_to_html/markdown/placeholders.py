# md_to_html/markdown/placeholders.py
"""
Placeholder token prefixes.

Both the diagram and the code block passes swap content for plain-text tokens
and substitute them back later. A prefix carries a per-pass nonce and is
checked against the text it will be inserted into, so a document that already
contains token-like text (documentation about this tool, for instance) cannot
capture a substitution.
"""

import uuid


def unique_prefix(base: str, text: str) -> str:
    """Return ``<base><nonce>_``, guaranteed not to occur in ``text``."""
    while True:
        prefix = f"{base}{uuid.uuid4().hex}_"
        if prefix not in text:
            return prefix
