"""Tests for block ($$...$$) span scanning."""

import pytest

from mathsplice.scanner import scan_spans
from mathsplice.spans import MathMode, Span


def block(text: str) -> list[Span]:
    return scan_spans(text, MathMode.BLOCK)


def formulas(text: str) -> list[str]:
    return [span.formula(text) for span in block(text)]


class TestSameLineLayout:
    def test_single_span_offsets(self) -> None:
        assert block("$$x$$") == [Span(0, 5, 2, 3, MathMode.BLOCK)]

    def test_formula(self) -> None:
        text = r"$$\sum_{i = 0}^n i = \frac{1}{2}n(n+1)$$"
        assert formulas(text) == [r"\sum_{i = 0}^n i = \frac{1}{2}n(n+1)"]

    def test_two_spans(self) -> None:
        assert block("$$a$$ and $$b$$") == [
            Span(0, 5, 2, 3, MathMode.BLOCK),
            Span(10, 15, 12, 13, MathMode.BLOCK),
        ]

    def test_nothing_required_after_closing(self) -> None:
        assert formulas("$$x$$5") == ["x"]


class TestOwnLineLayout:
    def test_plain(self) -> None:
        text = "$$\n\\int_0^1 x\n$$"
        assert block(text) == [Span(0, 16, 3, 13, MathMode.BLOCK)]
        assert formulas(text) == [r"\int_0^1 x"]

    def test_indented_with_trailing_whitespace(self) -> None:
        text = "    $$ \n        \\sum_i i \n    $$"
        assert block(text) == [Span(4, 32, 16, 24, MathMode.BLOCK)]
        assert formulas(text) == [r"\sum_i i"]

    def test_multiline_formula(self) -> None:
        text = "$$\na &= b \\\\\nc &= d\n$$"
        assert formulas(text) == ["a &= b \\\\\nc &= d"]

    def test_crlf_line_breaks(self) -> None:
        text = "$$\r\nx\r\n$$"
        assert block(text) == [Span(0, 9, 4, 5, MathMode.BLOCK)]

    def test_opening_own_line_closing_inline(self) -> None:
        assert formulas("$$\nx$$") == ["x"]

    def test_opening_inline_closing_own_line(self) -> None:
        assert formulas("$$x\n$$") == ["x"]


class TestBlockRejections:
    @pytest.mark.parametrize(
        "text",
        [
            r"$$ \int_0^1 x^2 = \frac{1}{2}$$",
            r"$$\int_0^1 x^2 = \frac{1}{2} $$",
        ],
    )
    def test_padding_against_marker(self, text: str) -> None:
        assert block(text) == []

    def test_marker_inside_formula(self) -> None:
        assert block(r"$$\int_0^1 x^2 = \frac{1}${2}$$") == []

    @pytest.mark.parametrize(
        "text",
        [
            r"\$$\int_0^1 x^2 = \frac{1}{2}$$",
            r"$\$\int_0^1 x^2 = \frac{1}{2}$$",
            r"$$\int_0^1 x^2 = \frac{1}${2}\$$",
            r"$$\int_0^1 x^2 = \frac{1}{2}$\$",
        ],
    )
    def test_escaped_double_marker(self, text: str) -> None:
        assert block(text) == []

    def test_lone_double_marker(self) -> None:
        assert block("Hey $$ planet") == []

    def test_unterminated(self) -> None:
        assert block("$$x + y") == []

    def test_blank_line_before_closing(self) -> None:
        assert block("$$x\n\n$$") == []

    def test_blank_line_after_opening(self) -> None:
        assert block("$$\n\nx$$") == []

    def test_next_line_starts_with_marker(self) -> None:
        assert block("$$\n$x$$") == []

    def test_whitespace_only_body(self) -> None:
        assert block("$$ \n $$") == []

    def test_single_markers_are_not_block(self) -> None:
        assert block("$x$ and $y$") == []
