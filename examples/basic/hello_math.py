"""Typeset math in prose in one call: prices stay prices."""

from mathsplice import render_math

text = "Tickets cost $50 or $60, and $E = mc^2$ still holds."
print(render_math(text))
