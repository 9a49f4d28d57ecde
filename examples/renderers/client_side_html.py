"""Leave typesetting to the browser: emit KaTeX/MathJax-ready HTML."""

from mathsplice import MathSplicer

splice = MathSplicer(renderer="html")

source = """
Inline math: $E = mc^2$

Block math:

$$
\\sum_{i=1}^{n} i = \\frac{n(n+1)}{2}
$$
"""

print(splice(source))
