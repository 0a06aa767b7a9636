from pathlib import Path


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    The input is read as GitHub-Flavored Markdown with tables, strikethrough,
    bare-URL autolinks and task lists. The Lua filter rewrites fenced code
    blocks to ``<pre><code class="language-X">`` so the highlighting
    postprocessor can find them; Pandoc's own highlighting never sees them.
    """
    base_dir = Path(__file__).resolve().parent

    code_language_filter = base_dir / "filters" / "code_language_class.lua"

    return {
        "from": "gfm+autolink_bare_uris+strikeout+pipe_tables+task_lists",
        "to": "html5",
        "extra_args": [
            # Keep source line breaks; placeholders must never be re-wrapped
            "--wrap=preserve",
        ],
        "filters": [
            str(code_language_filter),
        ],
    }
