"""Tests for code block highlighting."""

import logging
from unittest.mock import MagicMock

import pytest

from md_to_html.exceptions import HighlighterInitError, UnsupportedLanguageError
from md_to_html.markdown.highlighting import (
    SUPPORTED_LANGUAGES,
    CodeBlockHighlighter,
    PygmentsEngine,
    decode_html_entities,
    normalize_language,
)

from .helpers import FailingEngine

PYTHON_BLOCK = '<pre><code class="language-python">print(&quot;hi&quot;)\n</code></pre>'


def encode_html_entities(text):
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


class TestDecodeHtmlEntities:
    """Test entity decoding."""

    def test_five_entities(self):
        assert decode_html_entities("&lt;a href=&quot;x&quot;&gt; &amp; &#39;") == "<a href=\"x\"> & '"

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "plain",
            "<>&\"'",
            "if a < b && c > d: print('x')",
            "&quot;",
            "&amp;lt;",
            "&#39;&lt;&gt;",
            '<div class="a">&nbsp;</div>',
        ],
    )
    def test_decode_inverts_encode(self, text):
        assert decode_html_entities(encode_html_entities(text)) == text

    def test_other_entities_untouched(self):
        assert decode_html_entities("&nbsp;&copy;") == "&nbsp;&copy;"


class TestPygmentsEngine:
    """Test the Pygments-backed engine."""

    def test_all_supported_languages_load(self):
        engine = PygmentsEngine()
        assert set(engine.lexers) == set(SUPPORTED_LANGUAGES)

    def test_unsupported_language(self):
        with pytest.raises(UnsupportedLanguageError):
            PygmentsEngine().code_to_html("+[->+<]", "brainfuck")

    def test_style_defs(self):
        assert ".highlight" in PygmentsEngine().style_defs()


class TestCodeBlockHighlighter:
    """Test the two-phase highlighting pass."""

    def test_no_code_blocks_skips_engine(self):
        factory = MagicMock()
        highlighter = CodeBlockHighlighter(engine_factory=factory)
        html = "<h1>Title</h1>\n<pre><code>no language</code></pre>"

        result = highlighter.highlight(html)

        assert result.html == html
        assert result.styles == ""
        factory.assert_not_called()

    def test_highlights_python(self):
        highlighter = CodeBlockHighlighter()

        result = highlighter.highlight(f"<p>before</p>\n{PYTHON_BLOCK}\n<p>after</p>")

        assert 'class="highlight"' in result.html
        assert "print(&quot;hi&quot;)" not in result.html
        assert "language-python" not in result.html
        assert result.html.startswith("<p>before</p>\n")
        assert result.html.endswith("\n<p>after</p>")
        assert ".highlight" in result.styles
        assert highlighter.stats.total == 1
        assert highlighter.stats.successes == 1

    def test_language_is_case_folded(self):
        engine = MagicMock()
        engine.code_to_html.return_value = "<div>ok</div>"
        engine.style_defs.return_value = ""
        highlighter = CodeBlockHighlighter(engine_factory=MagicMock(return_value=engine))

        highlighter.highlight('<pre><code class="language-Python">x = 1\n</code></pre>')

        engine.code_to_html.assert_called_once_with("x = 1\n", "python")

    def test_attributes_after_class_tolerated(self):
        html = '<pre><code class="language-json" data-line="1">{&quot;a&quot;: 1}\n</code></pre>'
        result = CodeBlockHighlighter().highlight(html)
        assert 'class="highlight"' in result.html

    def test_failed_block_kept_verbatim(self, caplog):
        caplog.set_level(logging.WARNING)
        highlighter = CodeBlockHighlighter(engine_factory=FailingEngine)
        html = f"<p>x</p>\n{PYTHON_BLOCK}\n"

        result = highlighter.highlight(html)

        assert result.html == html
        assert highlighter.stats.failures == 1
        assert any("python" in r.getMessage() for r in caplog.records)

    def test_failures_isolated_per_block(self):
        unknown = '<pre><code class="language-brainfuck">+[-&gt;+&lt;]\n</code></pre>'
        html = f"{unknown}\n{PYTHON_BLOCK}"
        highlighter = CodeBlockHighlighter()

        result = highlighter.highlight(html)

        assert result.html.startswith(unknown + "\n")
        assert 'class="highlight"' in result.html
        assert highlighter.stats.total == 2
        assert highlighter.stats.successes == 1
        assert highlighter.stats.failures == 1

    def test_many_blocks_keep_their_positions(self):
        blocks = [
            f'<pre><code class="language-unknown{i}">block {i}\n</code></pre>' for i in range(12)
        ]
        html = "\n".join(blocks)

        result = CodeBlockHighlighter().highlight(html)

        assert result.html == html
        assert "CODE_BLOCK_PLACEHOLDER" not in result.html

    def test_literal_token_text_is_left_alone(self):
        html = f"<p>See CODE_BLOCK_PLACEHOLDER_0 for details</p>\n{PYTHON_BLOCK}"

        result = CodeBlockHighlighter().highlight(html)

        assert result.html.startswith("<p>See CODE_BLOCK_PLACEHOLDER_0 for details</p>\n<div class=\"highlight\">")
        assert result.html.count("CODE_BLOCK_PLACEHOLDER") == 1

    def test_engine_built_once(self):
        factory = MagicMock(side_effect=PygmentsEngine)
        highlighter = CodeBlockHighlighter(engine_factory=factory)

        highlighter.highlight(PYTHON_BLOCK)
        highlighter.highlight(PYTHON_BLOCK)

        assert factory.call_count == 1

    def test_init_failure_is_fatal(self):
        highlighter = CodeBlockHighlighter(engine_factory=MagicMock(side_effect=RuntimeError("boom")))
        with pytest.raises(HighlighterInitError):
            highlighter.highlight(PYTHON_BLOCK)

    def test_unknown_theme_is_fatal(self):
        with pytest.raises(HighlighterInitError):
            CodeBlockHighlighter(theme="no-such-theme").highlight(PYTHON_BLOCK)


def test_normalize_language():
    assert normalize_language("TypeScript") == "typescript"
