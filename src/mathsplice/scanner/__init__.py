"""Span scanner for mathsplice.

The scanner is built from mode-specific mixins:

- InlineScannerMixin: ``$formula$`` rules
- BlockScannerMixin: ``$$formula$$`` rules, including the own-line layout
"""

from __future__ import annotations

from mathsplice.scanner.block import BlockScannerMixin
from mathsplice.scanner.core import Scanner, scan_spans
from mathsplice.scanner.inline import InlineScannerMixin

__all__ = [
    "BlockScannerMixin",
    "InlineScannerMixin",
    "Scanner",
    "scan_spans",
]
