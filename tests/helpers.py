"""Test doubles shared across test modules."""

from pathlib import Path

SVG_TEMPLATE = '<svg xmlns="http://www.w3.org/2000/svg" id="{diagram_id}"><text>{diagram_id}</text></svg>'


class StubRenderer:
    """Stands in for MermaidRenderer; writes a tiny SVG per diagram."""

    def __init__(self, out_dir: Path, succeed: bool = True):
        self.out_dir = out_dir
        self.succeed = succeed
        self.calls = []

    def render(self, source_code, diagram_id):
        self.calls.append((diagram_id, source_code))
        if not self.succeed:
            return None
        path = self.out_dir / f"{diagram_id}.svg"
        path.write_text(SVG_TEMPLATE.format(diagram_id=diagram_id), encoding="utf-8")
        return path


def identity_engine(text):
    """Markdown engine that returns its input, for exact splice assertions."""
    return text


class FailingEngine:
    """Highlighting engine that fails on every block."""

    def __init__(self, theme=None):
        self.theme = theme

    def code_to_html(self, code, language):
        raise RuntimeError(f"cannot highlight {language}")

    def style_defs(self):
        return ""
