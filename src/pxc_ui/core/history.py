"""
Workflow History
================

Append-only log of the commands run on an image. Each step stores a short
human-readable title and a line of script that repeats the command, so that
an interactive session can later be replayed or turned into a batch script.

Classes
-------
WorkflowStep
    A single logged command
HistoryWorkflow
    Ordered, append-only collection of steps

Examples
--------
>>> from pxc_ui.core.history import HistoryWorkflow
>>> history = HistoryWorkflow()
>>> history.add_step("Classify detections by centroid",
...                  "classify_detections_by_centroid('tumor-v2')")
>>> print(history.to_script())
classify_detections_by_centroid('tumor-v2')
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True)
class WorkflowStep:
    """
    A replayable entry in the workflow history.

    Parameters
    ----------
    name : str
        Title shown to the user, e.g. "Pixel classifier measurements"
    script : str
        Script line reproducing the command with its literal parameters
    """

    name: str
    script: str


class HistoryWorkflow:
    """Ordered log of :class:`WorkflowStep` entries for one image."""

    def __init__(self):
        self._steps: list[WorkflowStep] = []

    def add_step(self, name: str, script: str) -> WorkflowStep:
        step = WorkflowStep(name, script)
        self._steps.append(step)
        return step

    @property
    def steps(self) -> tuple[WorkflowStep, ...]:
        return tuple(self._steps)

    def last_step(self) -> Optional[WorkflowStep]:
        return self._steps[-1] if self._steps else None

    def to_script(self) -> str:
        """Join the script lines of all steps, oldest first."""
        return "\n".join(s.script for s in self._steps)

    def __len__(self):
        return len(self._steps)

    def __iter__(self) -> Iterator[WorkflowStep]:
        return iter(self._steps)
