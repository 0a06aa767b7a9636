# md_to_html/markdown/preprocessors/__init__.py

from .diagram_placeholders import insert_diagram_placeholders

PREPROCESSORS = [
    insert_diagram_placeholders,  # Must run on the original, unmodified text
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
