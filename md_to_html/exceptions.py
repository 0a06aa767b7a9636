# md_to_html/exceptions.py
"""
Exception hierarchy for md-to-html.

Everything raised here aborts the conversion. Per-item problems (a single
diagram that fails to render, a single code block that fails to highlight)
are not exceptions at the pipeline level: they are logged and replaced with a
fallback in place.
"""


class ConversionError(Exception):
    """Base class for all md-to-html errors."""


class DiagramRendererNotFoundError(ConversionError):
    """The Mermaid CLI could not be located."""


class MarkdownEngineError(ConversionError):
    """Pandoc failed to convert the markdown text."""


class HighlighterInitError(ConversionError):
    """The syntax highlighting engine could not be initialized."""


class UnsupportedLanguageError(ConversionError):
    """A code block declared a language the highlighter does not load."""

    def __init__(self, language: str):
        super().__init__(f"Language '{language}' is not supported by the highlighter")
        self.language = language
