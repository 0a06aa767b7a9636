# md_to_html/markdown/highlighting.py
"""
Syntax highlighting for rendered code blocks.

Works on the HTML Pandoc produced, not on the markdown:

    <pre><code class="language-python">print(&quot;hi&quot;)
    </code></pre>

is decoded back to ``print("hi")``, run through Pygments and replaced with
the ``<div class="highlight">`` markup Pygments generates. Blocks are first
swapped for placeholders and only substituted once every block has been
processed, so highlighted output is never scanned again. The placeholder prefix
carries a nonce that does not occur in the input HTML.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional

from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name

from ..exceptions import HighlighterInitError, UnsupportedLanguageError
from .placeholders import unique_prefix

HIGHLIGHT_THEME = "default"
HIGHLIGHT_CSS_CLASS = "highlight"

# Language tag -> Pygments lexer alias
SUPPORTED_LANGUAGES = {
    "typescript": "typescript",
    "tsx": "typescript",
    "javascript": "javascript",
    "jsx": "javascript",
    "json": "json",
    "jsonc": "json",
    "markdown": "markdown",
    "yaml": "yaml",
    "bash": "bash",
    "shell": "bash",
    "python": "python",
    "go": "go",
    "rust": "rust",
    "java": "java",
    "c": "c",
    "cpp": "cpp",
    "csharp": "csharp",
    "php": "php",
    "ruby": "ruby",
    "swift": "swift",
    "kotlin": "kotlin",
    "html": "html",
    "css": "css",
    "scss": "scss",
    "sql": "sql",
    "xml": "xml",
}

CODE_BLOCK_PATTERN = re.compile(
    r'<pre><code\s+class="language-([\w-]+)"[^>]*>(.*?)</code></pre>', re.DOTALL
)
CODE_BLOCK_PLACEHOLDER_PREFIX = "CODE_BLOCK_PLACEHOLDER_"

_ENTITY_PATTERN = re.compile(r"&(lt|gt|amp|quot|#39);")
_ENTITIES = {"lt": "<", "gt": ">", "amp": "&", "quot": '"', "#39": "'"}


def decode_html_entities(encoded: str) -> str:
    """Decode the five entities HTML writers escape in code, in one pass."""
    return _ENTITY_PATTERN.sub(lambda m: _ENTITIES[m.group(1)], encoded)


def normalize_language(language: str) -> str:
    return language.lower()


@dataclass(frozen=True)
class CodeBlockRecord:
    matched_text: str
    language: str
    decoded_text: str
    placeholder: str


@dataclass
class HighlightStats:
    total: int = 0
    successes: int = 0
    failures: int = 0


class HighlightResult(NamedTuple):
    html: str
    styles: str


class PygmentsEngine:
    """A Pygments formatter plus one preloaded lexer per supported language."""

    def __init__(self, theme=HIGHLIGHT_THEME, languages=None):
        languages = SUPPORTED_LANGUAGES if languages is None else languages
        self.theme = theme
        self.formatter = HtmlFormatter(style=theme, cssclass=HIGHLIGHT_CSS_CLASS)
        self.lexers = {tag: get_lexer_by_name(alias) for tag, alias in languages.items()}

    def code_to_html(self, code: str, language: str) -> str:
        lexer = self.lexers.get(language)
        if lexer is None:
            raise UnsupportedLanguageError(language)
        return pygments_highlight(code, lexer, self.formatter)

    def style_defs(self) -> str:
        return self.formatter.get_style_defs(f".{HIGHLIGHT_CSS_CLASS}")


class CodeBlockHighlighter:
    """
    Highlights ``<pre><code class="language-X">`` blocks in an HTML fragment.

    The engine is built on first use and then reused; documents without code
    blocks never build it. A failing block is logged and left as it was.
    """

    def __init__(self, theme=HIGHLIGHT_THEME, engine_factory=None, logger=None):
        self.theme = theme
        self.engine_factory = engine_factory or PygmentsEngine
        self.logger = logger or logging.getLogger(__name__)
        self.stats = HighlightStats()
        self._engine: Optional[PygmentsEngine] = None

    def get_engine(self) -> PygmentsEngine:
        """
        Return the highlighting engine, building it on first call.

        Raises:
            HighlighterInitError: if the engine cannot be built
        """
        if self._engine is None:
            try:
                self.logger.debug(
                    f"Initializing Pygments highlighter (theme={self.theme}, "
                    f"languages={len(SUPPORTED_LANGUAGES)})"
                )
                self._engine = self.engine_factory(theme=self.theme)
            except Exception as e:
                self.logger.error(
                    f"Failed to initialize highlighter: {e}", extra={"error": str(e)}
                )
                raise HighlighterInitError(f"Failed to initialize highlighter: {e}") from e
        return self._engine

    def highlight(self, html: str) -> HighlightResult:
        code_blocks: List[CodeBlockRecord] = []
        prefix = unique_prefix(CODE_BLOCK_PLACEHOLDER_PREFIX, html)

        def extract(match):
            placeholder = f"{prefix}{len(code_blocks)}"
            code_blocks.append(
                CodeBlockRecord(
                    matched_text=match.group(0),
                    language=match.group(1),
                    decoded_text=decode_html_entities(match.group(2)),
                    placeholder=placeholder,
                )
            )
            return placeholder

        with_placeholders = CODE_BLOCK_PATTERN.sub(extract, html)

        if not code_blocks:
            self.stats = HighlightStats()
            return HighlightResult(html, "")

        engine = self.get_engine()

        replacements: Dict[str, str] = {}
        stats = HighlightStats(total=len(code_blocks))

        for block in code_blocks:
            language = normalize_language(block.language)
            try:
                replacements[block.placeholder] = engine.code_to_html(
                    block.decoded_text, language
                )
                stats.successes += 1
            except Exception as e:
                self.logger.warning(
                    f"Failed to highlight {block.language} code block, using plain code: {e}",
                    extra={"language": block.language, "error": str(e)},
                )
                replacements[block.placeholder] = block.matched_text
                stats.failures += 1

        self.stats = stats
        self.logger.debug(
            f"Code block highlighting completed: {stats.total} total, "
            f"{stats.successes} highlighted, {stats.failures} failed"
        )

        placeholder_pattern = re.compile(re.escape(prefix) + r"\d+\b")
        highlighted_html = placeholder_pattern.sub(
            lambda m: replacements.pop(m.group(0), m.group(0)), with_placeholders
        )

        return HighlightResult(highlighted_html, engine.style_defs())
