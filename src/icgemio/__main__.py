"""Command-line interface.

Usage:
    python -m icgemio <model.gfc>
    python -m icgemio <model.gfc> --degree 60 --order 60 --save egm.h5
    python -m icgemio <model.gfc> --degree 120 --plot
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from icgemio.exceptions import IcgemError
from icgemio.icgem import Icgem
from icgemio.logging_config import setup_logging
from icgemio.model.coefficients import HarmonicCoeffs
from icgemio.model.io import save_coefficients

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="icgemio", description="Inspect and read ICGEM gravity field models")
    ap.add_argument("file", help="Path to the ICGEM (.gfc) file")
    ap.add_argument("--degree", type=int, help="Read static coefficients up to this degree")
    ap.add_argument("--order", type=int, help="Max order to read (defaults to --degree)")
    ap.add_argument("--save", dest="save_path", help="Save the coefficients read to an HDF5 file")
    ap.add_argument("--plot", action="store_true", help="Plot the degree amplitudes of the coefficients read")
    ap.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="Logging level")
    ap.add_argument("--log-file", help="Also write the log to this file")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.order is not None and args.degree is None:
        ap.error("--order requires --degree")
    setup_logging(level=args.log_level, log_file=args.log_file)

    gfc = Icgem(args.file)
    try:
        header = gfc.parse_header()
        inspection = gfc.inspect_data()
    except IcgemError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    bounds = inspection.bounds
    print(f"model:       {header.modelname}")
    print(f"product:     {header.product_type}")
    print(f"GM:          {header.earth_gravity_constant}")
    print(f"radius:      {header.radius}")
    print(f"max degree:  {header.max_degree}")
    print(f"norm:        {header.norm}")
    print(f"tide system: {header.tide_system}")
    print(f"static:      degree {bounds.degree_static_start}-{bounds.degree_static_stop}, "
          f"order {bounds.order_static_start}-{bounds.order_static_stop}")
    if bounds.has_tvg:
        print(f"TVG:         degree {bounds.degree_tv_start}-{bounds.degree_tv_stop}, "
              f"order {bounds.order_tv_start}-{bounds.order_tv_stop}")
        print(f"periods:     {', '.join(str(p) for p in inspection.periods) or '-'}")
    if inspection.skipped_lines:
        print(f"skipped:     {inspection.skipped_lines} line(s)")

    if args.degree is None:
        return 0

    order = args.degree if args.order is None else args.order
    try:
        coeffs = HarmonicCoeffs(args.degree, order)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    try:
        written = gfc.parse_data(args.degree, order, coeffs)
    except IcgemError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(f"read:        {written} coefficient(s) up to degree/order {args.degree}/{order}")

    if args.save_path:
        save_coefficients(coeffs, args.save_path)
        print(f"saved:       {args.save_path}")

    if args.plot:
        coeffs.plot_degree_variances(title=header.modelname or None)

    return 0


if __name__ == "__main__":
    sys.exit(main())
