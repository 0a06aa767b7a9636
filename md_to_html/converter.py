# md_to_html/converter.py
"""
Markdown to HTML converter.

Converts markdown with mermaid diagrams to a single HTML document with the
diagrams embedded as inline SVG and code blocks highlighted by Pygments.
"""

import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from .diagrams.extractor import DiagramRecord, extract_mermaid_diagrams
from .diagrams.renderer import MermaidRenderer, RenderOutcome
from .exceptions import ConversionError
from .markdown.document import wrap_in_html_document
from .markdown.highlighting import CodeBlockHighlighter
from .markdown.postprocessors.code_highlighter import HIGHLIGHT_STYLES_KEY, HIGHLIGHTER_KEY
from .markdown.preprocessors.diagram_placeholders import DIAGRAM_OUTCOMES_KEY
from .markdown.renderer import render_markdown


def default_output_path(markdown_file) -> Path:
    """``notes.md`` -> ``notes.html``, next to the input."""
    return Path(markdown_file).with_suffix(".html")


class MarkdownToHtmlConverter:
    """Converts markdown to HTML with syntax highlighting and mermaid diagrams."""

    def __init__(self, diagram_renderer, highlighter=None, markdown_engine=None, logger=None):
        """
        Args:
            diagram_renderer: Object with ``render(source_code, diagram_id)``
                returning an SVG path or None (normally a MermaidRenderer)
            highlighter: CodeBlockHighlighter; one is created if omitted
            markdown_engine: Callable mapping markdown to HTML; Pandoc if omitted
            logger: Logger for progress messages
        """
        self.diagram_renderer = diagram_renderer
        self.logger = logger or logging.getLogger(__name__)
        self.highlighter = highlighter or CodeBlockHighlighter(logger=self.logger)
        self.markdown_engine = markdown_engine

    def extract_mermaid_diagrams(self, markdown_content: str) -> List[DiagramRecord]:
        return extract_mermaid_diagrams(markdown_content)

    def render_diagrams(self, diagrams: List[DiagramRecord]) -> Dict[int, RenderOutcome]:
        """Render each diagram in turn; outcomes are keyed by fence start offset."""
        outcomes: Dict[int, RenderOutcome] = {}

        for diagram in diagrams:
            self.logger.debug(f"Rendering mermaid diagram {diagram.diagram_id}")
            image_path = self.diagram_renderer.render(diagram.source_code, diagram.diagram_id)

            if image_path:
                self.logger.info(
                    f"Rendered mermaid diagram {diagram.diagram_id} to {image_path}",
                    extra={"diagram_id": diagram.diagram_id, "image_path": str(image_path)},
                )
            else:
                self.logger.error(
                    f"Failed to render mermaid diagram {diagram.diagram_id}",
                    extra={"diagram_id": diagram.diagram_id},
                )
            outcomes[diagram.start] = RenderOutcome(diagram.diagram_id, image_path or None)

        return outcomes

    def convert_markdown_to_html(
        self, markdown_content: str, outcomes: Mapping[int, RenderOutcome]
    ) -> str:
        """
        Convert markdown to a complete HTML document.

        Args:
            markdown_content: Original markdown text
            outcomes: Render outcomes keyed by the start offset of their fence

        Returns:
            Complete HTML document
        """
        context = {
            DIAGRAM_OUTCOMES_KEY: outcomes,
            HIGHLIGHTER_KEY: self.highlighter,
        }

        html = render_markdown(markdown_content, context, engine=self.markdown_engine)

        return wrap_in_html_document(html, context.get(HIGHLIGHT_STYLES_KEY, ""))

    def convert(self, markdown_file, output_file=None) -> Path:
        """
        Convert a markdown file to HTML.

        Args:
            markdown_file: Input markdown file path
            output_file: Output HTML path; defaults to the input path with an
                ``.html`` extension

        Returns:
            Path of the written HTML file

        Raises:
            ConversionError: if the output path is the input file
            OSError: if the input cannot be read or the output written
        """
        markdown_file = Path(markdown_file)
        output = Path(output_file) if output_file else default_output_path(markdown_file)
        if output.resolve() == markdown_file.resolve():
            raise ConversionError(f"Output path {output} would overwrite the input file")

        markdown_content = markdown_file.read_text(encoding="utf-8")

        diagrams = self.extract_mermaid_diagrams(markdown_content)
        self.logger.info(f"Found {len(diagrams)} mermaid diagrams in {markdown_file}")

        outcomes = self.render_diagrams(diagrams)
        html_content = self.convert_markdown_to_html(markdown_content, outcomes)

        output.write_text(html_content, encoding="utf-8")

        self.logger.info(
            f"Converted {markdown_file} to {output} ({len(diagrams)} diagrams)",
            extra={"input": str(markdown_file), "output": str(output)},
        )
        return output


def convert_file(markdown_file, output_file=None, mmdc_path=None, logger=None) -> Path:
    """
    Convert one file with a fresh renderer.

    The renderer's temporary directory is removed however the conversion ends.
    """
    with MermaidRenderer(mmdc_path=mmdc_path, logger=logger) as renderer:
        converter = MarkdownToHtmlConverter(renderer, logger=logger)
        return converter.convert(markdown_file, output_file)
