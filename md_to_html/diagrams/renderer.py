# md_to_html/diagrams/renderer.py
"""
Render mermaid diagrams to SVG with the Mermaid CLI (mmdc).

One mmdc process runs at a time; each is bounded by a 30 second timeout.
A failed diagram never raises: ``render`` returns None and the caller puts a
fallback notice in the document.

    with MermaidRenderer() as renderer:
        svg_path = renderer.render("flowchart LR\\nA --> B", "diagram_0")
"""

import logging
import shutil
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..exceptions import DiagramRendererNotFoundError

MERMAID_RENDER_TIMEOUT_SECONDS = 30
TEMP_DIR_PREFIX = "md-to-html-"


@dataclass(frozen=True)
class RenderOutcome:
    """Result of rendering one diagram; artifact_path is None on failure."""

    diagram_id: str
    artifact_path: Optional[Path] = None


def locate_mmdc(mmdc_path=None) -> Path:
    """
    Find the Mermaid CLI binary.

    Looks at the explicit path first, then a project-local
    ``node_modules/.bin/mmdc``, then ``mmdc`` on PATH.
    """
    if mmdc_path:
        candidate = Path(mmdc_path)
        if candidate.is_file():
            return candidate
        raise DiagramRendererNotFoundError(f"Mermaid CLI not found at {candidate}.")

    local_mmdc = Path.cwd() / "node_modules" / ".bin" / "mmdc"
    if local_mmdc.is_file():
        return local_mmdc

    on_path = shutil.which("mmdc")
    if on_path:
        return Path(on_path)

    raise DiagramRendererNotFoundError(
        "Mermaid CLI (mmdc) not found. Install it with "
        "'npm install @mermaid-js/mermaid-cli' or set MMDC_PATH."
    )


class MermaidRenderer:
    """Renders mermaid source to SVG files inside a private temp directory."""

    def __init__(self, mmdc_path=None, timeout=MERMAID_RENDER_TIMEOUT_SECONDS, logger=None):
        self.mmdc_path = locate_mmdc(mmdc_path)
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)
        self.temp_dir: Optional[Path] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.cleanup()
        return False

    def _ensure_temp_dir(self) -> Path:
        if self.temp_dir is None:
            self.temp_dir = Path(tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX))
            self.logger.debug(f"Created temporary directory {self.temp_dir}")
        return self.temp_dir

    def render(self, source_code: str, diagram_id: str) -> Optional[Path]:
        """
        Render ``source_code`` to ``<diagram_id>.svg``.

        Returns:
            Path to the SVG file, or None if rendering failed
        """
        try:
            temp_dir = self._ensure_temp_dir()
            mermaid_file = temp_dir / f"{diagram_id}.mmd"
            output_file = temp_dir / f"{diagram_id}.svg"
            mermaid_file.write_text(source_code, encoding="utf-8")

            result = subprocess.run(
                [
                    str(self.mmdc_path),
                    "-i", str(mermaid_file),
                    "-o", str(output_file),
                    "-e", "svg",
                    "-b", "transparent",
                ],
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            self.logger.warning(
                f"Mermaid CLI timeout after {self.timeout}s while rendering {diagram_id}",
                extra={"diagram_id": diagram_id, "timeout": self.timeout},
            )
            return None
        except OSError as e:
            self.logger.error(
                f"Mermaid CLI error while rendering {diagram_id}: {e}",
                extra={"diagram_id": diagram_id, "error": str(e)},
            )
            return None

        if result.returncode != 0:
            stderr = (result.stderr or result.stdout or "").strip()[:500]
            self.logger.error(
                f"Mermaid CLI exited with {result.returncode} for {diagram_id}: {stderr}",
                extra={"diagram_id": diagram_id, "error": stderr},
            )

        # The output file decides, not the exit code
        if output_file.exists():
            return output_file
        return None

    def cleanup(self) -> None:
        """Remove the temporary directory and everything rendered into it."""
        if self.temp_dir is None:
            return

        try:
            shutil.rmtree(self.temp_dir)
            self.logger.debug(f"Cleaned up temporary directory {self.temp_dir}")
        except OSError as e:
            self.logger.warning(
                f"Failed to clean up temporary directory {self.temp_dir}: {e}",
                extra={"error": str(e)},
            )
        self.temp_dir = None
