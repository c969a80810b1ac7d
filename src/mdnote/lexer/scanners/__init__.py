"""Mode-specific scanners for the mdnote lexer.

Each scanner is a mixin that provides scanning logic for a specific
lexer mode (BLOCK, CODE_FENCE).
"""

from __future__ import annotations

from mdnote.lexer.scanners.block import BlockScannerMixin
from mdnote.lexer.scanners.fence import FenceScannerMixin

__all__ = [
    "BlockScannerMixin",
    "FenceScannerMixin",
]
