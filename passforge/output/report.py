"""
PassForge Report Generator
===========================

Machine-readable JSON output for generated batches, strength reports and
character set metadata, suitable for scripting and CI pipelines.

Reports are only written where the caller asks. Nothing is persisted
implicitly.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import BaseModel

import passforge


class ForgeReportGenerator:
    """Serialises PassForge result models to JSON.

    Usage::

        reporter = ForgeReportGenerator()
        text = reporter.render_json(batch, command="generate")
        reporter.generate_json(batch, Path("batch.json"), command="generate")
    """

    def build_report(self, result: BaseModel, *, command: str) -> dict[str, Any]:
        """Wrap *result* with report metadata."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": passforge.__tool_name__,
                "command": command,
                "version": passforge.__version__,
            },
            "result": result.model_dump(mode="json"),
        }

    def render_json(self, result: BaseModel, *, command: str) -> str:
        return json.dumps(
            self.build_report(result, command=command),
            indent=2,
            ensure_ascii=False,
            default=str,
        )

    def generate_json(
        self,
        result: BaseModel,
        output_path: Path,
        *,
        command: str,
    ) -> Path:
        """Write a JSON report to *output_path*.

        Parent directories are created as needed.

        Returns:
            Path to the generated JSON file.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            self.render_json(result, command=command) + "\n",
            encoding="utf-8",
        )
        return output_path
