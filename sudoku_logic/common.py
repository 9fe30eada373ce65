#!/usr/bin/env python

"""
sudoku_logic/common.py

===============================================================================

    Copyright (C) 2019-2019 Rudolf Cardinal (rudolf@pobox.com).

    This is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This software is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this software. If not, see <http://www.gnu.org/licenses/>.

===============================================================================

Common constants and functions for the Sudoku solver.

"""

import logging
import sys
import traceback
from typing import Callable, Optional

log = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

RANK = 3
N = RANK ** 2  # digits per group, and groups per direction
N_CELLS = N * N

DIGITS = "123456789"
UNKNOWN = "."
NEWLINE = "\n"
SPACE = " "
HASH = "#"
PLACEHOLDER = "_"
DISPLAY_UNKNOWN = "·"
DISPLAY_SOLVED = "■"
ROW_SEPARATOR = "---------+---------+---------"
COL_SEPARATOR = "|"
ALMOST_ONE = 0.99

EXIT_FAILURE = 1
EXIT_SUCCESS = 0

NoteSink = Optional[Callable[[str], None]]


# =============================================================================
# Generic helper functions
# =============================================================================

def run_guard(function: Callable[[], None]) -> None:
    try:
        function()
    except Exception as e:
        log.critical(str(e))
        traceback.print_exc()
        sys.exit(EXIT_FAILURE)


def rc_str(row_zb: int, col_zb: int) -> str:
    """
    One-based "R1C1" description of a cell.
    """
    return f"R{row_zb + 1}C{col_zb + 1}"
