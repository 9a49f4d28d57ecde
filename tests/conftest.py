"""Shared fixtures for mathsplice tests."""

import pytest

from mathsplice.errors import FormulaError
from mathsplice.spans import MathMode


class RecordingRenderer:
    """Deterministic renderer that records every call.

    Output is ``<m:inline>formula</m:inline>`` or ``<m:block>...``, always
    longer than the delimited source and free of ``$``.
    """

    def __init__(self, fail_on: str | None = None) -> None:
        self.calls: list[tuple[str, MathMode]] = []
        self.fail_on = fail_on

    def render(self, formula: str, mode: MathMode) -> str:
        self.calls.append((formula, mode))
        if self.fail_on is not None and self.fail_on in formula:
            raise FormulaError(f"cannot typeset {self.fail_on!r}")
        return f"<m:{mode.value}>{formula}</m:{mode.value}>"


@pytest.fixture
def recorder() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def failing_recorder() -> RecordingRenderer:
    """Renderer that rejects any formula containing ``BAD``."""
    return RecordingRenderer(fail_on="BAD")
