"""Tests for the public render_math / MathSplicer API."""

import pytest

from mathsplice import (
    FormulaError,
    HtmlClassRenderer,
    MathMLRenderer,
    MathSplicer,
    RenderConfig,
    RendererError,
    render_config_context,
    render_math,
)
from mathsplice.spans import MathMode


def unchanged(text: str, renderer) -> None:
    assert render_math(text, renderer=renderer) == text


def changed(text: str, renderer) -> str:
    result = render_math(text, renderer=renderer)
    assert len(result) > len(text)
    assert result != text
    return result


# =========================================================================
# Text that is not math
# =========================================================================


class TestUnchanged:
    def test_no_math(self, recorder) -> None:
        unchanged("This is just a sentence.", recorder)

    def test_price(self, recorder) -> None:
        unchanged("This has a number that is not math $3 000", recorder)

    @pytest.mark.parametrize("text", ["$50$60", "$50 $60", "$50,$60"])
    def test_consecutive_prices(self, recorder, text: str) -> None:
        unchanged(f"Here are two consecutive prices {text}", recorder)

    @pytest.mark.parametrize("text", [r"\$F = ma$", r"$F = ma\$"])
    def test_escaped(self, recorder, text: str) -> None:
        unchanged(text, recorder)

    @pytest.mark.parametrize("text", ["$$F = ma$", "$F = ma$$"])
    def test_odd_marker_counts(self, recorder, text: str) -> None:
        unchanged(text, recorder)

    @pytest.mark.parametrize(
        "text",
        [
            "$ F = ma$",
            "$F = ma $",
            r"$$ \int_0^1 x^2 = \frac{1}{2}$$",
            r"$$\int_0^1 x^2 = \frac{1}{2} $$",
        ],
    )
    def test_interior_padding(self, recorder, text: str) -> None:
        unchanged(text, recorder)

    def test_bad_internal_marker(self, recorder) -> None:
        unchanged(r"$$\int_0^1 x^2 = \frac{1}${2}$$", recorder)

    @pytest.mark.parametrize(
        "text",
        [
            r"\$$\int_0^1 x^2 = \frac{1}{2}$$",
            r"$\$\int_0^1 x^2 = \frac{1}{2}$$",
            r"$$\int_0^1 x^2 = \frac{1}${2}\$$",
            r"$$\int_0^1 x^2 = \frac{1}{2}$\$",
        ],
    )
    def test_escaped_double_marker(self, recorder, text: str) -> None:
        unchanged(text, recorder)

    def test_random_double_marker(self, recorder) -> None:
        unchanged("Hey $$ planet", recorder)

    def test_renderer_never_called(self, recorder) -> None:
        render_math("It costs $5 or $6.", renderer=recorder)
        assert recorder.calls == []


# =========================================================================
# Text that is math
# =========================================================================


class TestChanged:
    def test_inline(self, recorder) -> None:
        text = r"Consider $π = \frac{1}{2}τ$ for a moment."
        result = changed(text, recorder)
        assert result[:9] == text[:9]
        assert result[-14:] == text[-14:]
        assert recorder.calls == [(r"π = \frac{1}{2}τ", MathMode.INLINE)]

    def test_block_same_line(self, recorder) -> None:
        changed(r"$$\sum_{i = 0}^n i = \frac{1}{2}n(n+1)$$", recorder)
        assert recorder.calls == [(r"\sum_{i = 0}^n i = \frac{1}{2}n(n+1)", MathMode.BLOCK)]

    def test_block_own_lines_with_padding(self, recorder) -> None:
        # Trailing whitespace on the delimiter and formula lines is deliberate
        text = "    $$ \n        \\sum_{i = 0}^n i = \\frac{1}{2}n(n+1) \n    $$"
        # Fake markup is shorter than the padded delimiters, so compare exactly
        result = render_math(text, renderer=recorder)
        assert result == "    <m:block>\\sum_{i = 0}^n i = \\frac{1}{2}n(n+1)</m:block>"
        assert recorder.calls == [(r"\sum_{i = 0}^n i = \frac{1}{2}n(n+1)", MathMode.BLOCK)]

    def test_block_own_lines_with_padding_mathml(self) -> None:
        text = "    $$ \n        \\sum_{i = 0}^n i = \\frac{1}{2}n(n+1) \n    $$"
        result = changed(text, MathMLRenderer())
        assert result.startswith("    <math")

    def test_block_own_lines(self, recorder) -> None:
        changed("$$\n\\int_0^1 x^2 = \\frac{1}{2}\n$$", recorder)

    def test_multiple_formulae(self, recorder) -> None:
        text = (
            "Consider $π = \\frac{1}{2}τ$, then\n"
            "            $$\n"
            "                4 \\int_{-1}^1 \\sqrt{1 - x^2} \\mathop{dx} = τ\n"
            "            $$\n"
            "            and also consider $A = πr^2$ for a moment."
        )
        result = changed(text, recorder)
        assert ", then" in result
        assert "and also consider " in result
        assert result[:9] == text[:9]
        assert result[-14:] == text[-14:]
        # Inline pass runs to completion before the block pass
        assert recorder.calls == [
            ("π = \\frac{1}{2}τ", MathMode.INLINE),
            ("A = πr^2", MathMode.INLINE),
            ("4 \\int_{-1}^1 \\sqrt{1 - x^2} \\mathop{dx} = τ", MathMode.BLOCK),
        ]

    def test_exact_output(self, recorder) -> None:
        text = "a $x$ b\n$$\ny\n$$\nc"
        assert render_math(text, renderer=recorder) == (
            "a <m:inline>x</m:inline> b\n<m:block>y</m:block>\nc"
        )


# =========================================================================
# Errors
# =========================================================================


class TestFormulaErrors:
    def test_inline_failure_propagates(self, failing_recorder) -> None:
        with pytest.raises(FormulaError):
            render_math("ok $BAD$ ok", renderer=failing_recorder)

    def test_block_failure_propagates(self, failing_recorder) -> None:
        with pytest.raises(FormulaError) as excinfo:
            render_math("$x$\n$$BAD$$", renderer=failing_recorder)
        assert excinfo.value.mode is MathMode.BLOCK

    def test_inline_failure_skips_block_pass(self, failing_recorder) -> None:
        with pytest.raises(FormulaError):
            render_math("$BAD$ $$y$$", renderer=failing_recorder)
        assert failing_recorder.calls == [("BAD", MathMode.INLINE)]

    def test_source_file_in_message(self, failing_recorder) -> None:
        with pytest.raises(FormulaError, match=r"^doc\.md:1:4 "):
            render_math("ok $BAD$", renderer=failing_recorder, source_file="doc.md")


# =========================================================================
# Configuration
# =========================================================================


class TestConfiguredPasses:
    def test_inline_disabled(self, recorder) -> None:
        with render_config_context(RenderConfig(inline_enabled=False)):
            result = render_math("$a$ and $$b$$", renderer=recorder)
        assert result == "$a$ and <m:block>b</m:block>"

    def test_block_disabled(self, recorder) -> None:
        with render_config_context(RenderConfig(block_enabled=False)):
            result = render_math("$a$ and $$b$$", renderer=recorder)
        assert result == "<m:inline>a</m:inline> and $$b$$"

    def test_renderer_from_config(self) -> None:
        with render_config_context(RenderConfig(renderer="html")):
            result = render_math("$x$")
        assert result == HtmlClassRenderer().render("x", MathMode.INLINE)

    def test_parallel_from_config(self, recorder) -> None:
        text = " ".join(f"$v_{i}$" for i in range(20))
        serial = render_math(text, renderer=recorder)
        with render_config_context(RenderConfig(max_workers=4)):
            parallel = render_math(text, renderer=recorder)
        assert parallel == serial


# =========================================================================
# MathSplicer
# =========================================================================


class TestMathSplicer:
    def test_html_renderer_by_name(self) -> None:
        splice = MathSplicer(renderer="html")
        assert splice("Let $x$ be real.") == (
            'Let <span class="math notranslate nohighlight">\\(x\\)</span> be real.'
        )

    def test_default_renderer_is_mathml(self) -> None:
        assert isinstance(MathSplicer().renderer, MathMLRenderer)

    def test_macros_reach_renderer(self) -> None:
        splice = MathSplicer(macros={"RR": r"\mathbb{R}"})
        assert splice.renderer.macros == {"RR": r"\mathbb{R}"}
        assert splice.config.macros == {"RR": r"\mathbb{R}"}

    def test_html_renderer_with_macros(self) -> None:
        splice = MathSplicer(renderer="html", macros={"RR": r"\mathbb{R}"})
        assert splice.renderer.macros == {"RR": r"\mathbb{R}"}
        assert splice(r"$\RR$") == '<span class="math notranslate nohighlight">\\(\\RR\\)</span>'

    def test_html_renderer_from_config_with_macros(self) -> None:
        config = RenderConfig(renderer="html", macros={"RR": r"\mathbb{R}"})
        with render_config_context(config):
            assert render_math("$x$") == (
                '<span class="math notranslate nohighlight">\\(x\\)</span>'
            )

    def test_renderer_instance(self, recorder) -> None:
        splice = MathSplicer(renderer=recorder, block=False)
        assert splice("$a$ $$b$$") == "<m:inline>a</m:inline> $$b$$"
        assert splice.renderer is recorder

    def test_config_is_scoped_to_call(self, recorder) -> None:
        MathSplicer(renderer=recorder, inline=False)("$a$")
        # Outside the call the default config is active again
        assert render_math("$a$", renderer=recorder) == "<m:inline>a</m:inline>"

    def test_unknown_renderer(self) -> None:
        with pytest.raises(RendererError, match="unknown renderer"):
            MathSplicer(renderer="typewriter")

    def test_source_file_passed_through(self, failing_recorder) -> None:
        splice = MathSplicer(renderer=failing_recorder)
        with pytest.raises(FormulaError, match=r"^chapter\.md:"):
            splice("$BAD$", source_file="chapter.md")


# =========================================================================
# End to end with latex2mathml
# =========================================================================


class TestMathML:
    def test_inline(self) -> None:
        text = "Consider $x^2$ for a moment."
        result = render_math(text)
        assert result.startswith("Consider <math")
        assert result.endswith("</math> for a moment.")

    def test_block(self) -> None:
        result = render_math("$$\n\\frac{1}{2}\n$$")
        assert result.startswith("<math")
        assert "block" in result
        assert "<mfrac>" in result

    def test_prices_untouched(self) -> None:
        assert render_math("$50 $60") == "$50 $60"
