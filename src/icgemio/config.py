"""
Configuration & Format Constants
================================
This module serves as the central registry for the ICGEM format constants
and for locating files shipped with the project checkout.

Why is this file needed?
------------------------
It prevents magic numbers (line length limits, sentinel values, header
keywords) scattered throughout the parser; both data passes and the header
pass read them from here.

Exports:
    MAX_DATA_LINE (int): Size of the line buffer of a data record in bytes.
    DEGREE_ONE_SENTINEL (float): Marker written to C(1,0)/C(1,1) before reading.
    FILE_ENCODING (str): Encoding used to decode records.
    SAMPLE_DATA_PATH (str): Directory of the sample models of the checkout.
"""
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to a file relative to the project root
    (the directory holding src/ and tests/).
    """
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


SAMPLE_DATA_PATH: str = get_resource_path(os.path.join("tests", "data"))

# Approximate max data line length (including the line terminator), see
# http://icgem.gfz-potsdam.de/ICGEM-Format-2011.pdf
MAX_DATA_LINE: int = 512

# Records are plain ASCII; latin-1 never fails to decode a byte
FILE_ENCODING: str = "latin-1"

# Keyword terminating the header block
END_OF_HEAD: str = "end_of_head"

# acos/asin records: amplitude C, amplitude S, sigma C, sigma S,
# time-span start, time-span end, period (years)
PERIODIC_FIELD_COUNT: int = 7

# Some providers (e.g. EGM2008) leave out C(1,0) and C(1,1) since they are
# nominally zero; this value marks them as "never written"
DEGREE_ONE_SENTINEL: float = -999.0

# Header defaults
DEFAULT_NORM: str = "fully_normalized"
DEFAULT_TIDE_SYSTEM: str = "unknown"
