"""
ICGEM Header
============
Metadata found in the header block of an ICGEM file.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from icgemio.config import DEFAULT_NORM, DEFAULT_TIDE_SYSTEM


@dataclass
class IcgemHeader:
    product_type: str = ""
    modelname: str = ""
    earth_gravity_constant: float = 0.0  # m³/s²
    radius: float = 0.0  # m
    max_degree: int = 0
    errors: str = ""
    norm: str = DEFAULT_NORM
    tide_system: str = DEFAULT_TIDE_SYSTEM

    # Any other 'key value' line of the header
    extra: Dict[str, str] = field(default_factory=dict)

    # Byte offset of the first line after 'end_of_head'
    data_section_start: int = 0

    @property
    def is_normalized(self) -> bool:
        return self.norm == DEFAULT_NORM
