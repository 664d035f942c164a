"""Shared fixtures for the icgemio test-suite."""
from __future__ import annotations

import io
from pathlib import Path
from typing import Callable

import matplotlib

matplotlib.use("Agg")

import pytest

from icgemio.config import SAMPLE_DATA_PATH

HEADER = (
    "begin_of_head =====================\n"
    "product_type           gravity_field\n"
    "modelname              SYNTHETIC\n"
    "earth_gravity_constant 0.3986004415E+15\n"
    "radius                 0.6378136300E+07\n"
    "max_degree             {max_degree}\n"
    "norm                   fully_normalized\n"
    "end_of_head =======================\n"
)


def _header(max_degree: int) -> bytes:
    return HEADER.format(max_degree=max_degree).encode("ascii")


@pytest.fixture
def example_path() -> Path:
    return Path(SAMPLE_DATA_PATH) / "example.gfc"


@pytest.fixture
def make_stream() -> Callable[..., tuple[io.BytesIO, int]]:
    """Build an in-memory ICGEM file; returns the stream and its data section start."""
    def _make(lines: list[str], max_degree: int = 2) -> tuple[io.BytesIO, int]:
        head = _header(max_degree)
        body = "".join(line + "\n" for line in lines).encode("ascii")
        return io.BytesIO(head + body), len(head)
    return _make


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[..., Path]:
    """Write an ICGEM file under tmp_path."""
    def _make(lines: list[str], max_degree: int = 2, name: str = "model.gfc") -> Path:
        path = tmp_path / name
        path.write_bytes(_header(max_degree) + "".join(line + "\n" for line in lines).encode("ascii"))
        return path
    return _make


def static_lines(max_degree: int, skip: tuple[tuple[int, int], ...] = ()) -> list[str]:
    """'gfc' records for all (l, m) up to max_degree, with C = l + m/10 and S = m/100."""
    lines = []
    for l in range(max_degree + 1):
        for m in range(l + 1):
            if (l, m) in skip:
                continue
            lines.append(f"gfc {l:4d} {m:4d}  {l + m / 10:.12E}  {m / 100:.12E}  1.0E-11  1.0E-11")
    return lines


@pytest.fixture
def static_records() -> Callable[..., list[str]]:
    return static_lines

