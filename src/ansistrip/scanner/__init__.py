"""State-machine scanner that strips ANSI/VT100 escape sequences.

Architecture:
scanner/
├── __init__.py          # Re-exports EscapeAwareScanner, ScannerMode
├── core.py              # EscapeAwareScanner (transition loop + lookahead)
└── modes.py             # ScannerMode enum, control-character constants

Recognized sequences (all introduced by ESC):
    ESC [ ... final      CSI, final byte in @ through ~
    ESC ] ... BEL | ST   OSC
    ESC P/X/^/_ ... ST   DCS, SOS, PM, APC

Usage:
    >>> from ansistrip.scanner import EscapeAwareScanner
    >>> list(EscapeAwareScanner("o\\x1b[mn"))
    ['o', 'n']

"""

from ansistrip.scanner.core import EscapeAwareScanner
from ansistrip.scanner.modes import ScannerMode

__all__ = ["EscapeAwareScanner", "ScannerMode"]
