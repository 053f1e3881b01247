"""Scanner operating modes and control-character constants.

This module defines the finite state machine modes for the escape-aware
scanner and the characters that drive its transitions.
"""

from __future__ import annotations

from enum import Enum, auto


class ScannerMode(Enum):
    """Scanner operating modes.

    The scanner switches between modes as it walks the source:
    - NORMAL: Accumulating a plain-text fragment
    - IN_ESCAPE: Just consumed an introducing ESC
    - IN_CSI: Inside a Control Sequence, waiting for a final byte
    - IN_OSC: Inside an Operating System Command
    - OSC_AWAIT_ST: Saw ESC inside an OSC (maybe a String Terminator)
    - AWAIT_TERMINATOR: Inside DCS/SOS/PM/APC, waiting for ESC
    - MAYBE_ST: Saw ESC inside DCS/SOS/PM/APC

    """

    NORMAL = auto()
    IN_ESCAPE = auto()
    IN_CSI = auto()
    IN_OSC = auto()
    OSC_AWAIT_ST = auto()
    AWAIT_TERMINATOR = auto()
    MAYBE_ST = auto()


ESC = "\x1b"
BEL = "\x07"

# Introducers (character following ESC)
CSI = "["
OSC = "]"
DCS = "P"
SOS = "X"
PM = "^"
APC = "_"

# Second character of the two-character String Terminator (ESC \)
ST_CHAR = "\\"

# CSI final byte range (inclusive)
CSI_FINAL_FIRST = "@"
CSI_FINAL_LAST = "~"

# Introducers whose sequence only ends on ST
STRING_INTRODUCERS = frozenset({DCS, SOS, PM, APC})

