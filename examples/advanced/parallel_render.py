"""Render many documents in parallel, and many spans per document on a pool."""

from concurrent.futures import ThreadPoolExecutor

from mathsplice import MathSplicer, render_math

docs = [f"Document {i}: let $x_{{{i}}} = {i}^2$ and $$y = \\sqrt{{{i}}}$$" for i in range(200)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(render_math, docs))

print(f"Rendered {len(results)} documents in parallel")

# One long document, spans rendered on a private pool and spliced back in order
splice = MathSplicer(max_workers=4, macros={"RR": r"\mathbb{R}"})
long_doc = " ".join(f"$a_{{{i}}} \\in \\RR$" for i in range(500))
print(len(splice(long_doc)))
