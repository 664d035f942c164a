"""
Input/Output Manager (HDF5)
Caches parsed harmonic coefficients in .h5 files, so that large models need
not be parsed from text again.
"""
import logging
from importlib.metadata import version, PackageNotFoundError

import h5py
import numpy as np

from icgemio.model.coefficients import HarmonicCoeffs

# Get module logger
logger = logging.getLogger(__name__)

try:
    APP_VERSION = version("icgemio")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"


class IOManager:

    @staticmethod
    def save_coefficients(coeffs: HarmonicCoeffs, filepath: str) -> None:
        logger.info(f"Saving coefficients to: {filepath}")
        try:
            with h5py.File(filepath, "w") as f:
                f.attrs["version"] = APP_VERSION
                f.attrs["max_degree"] = coeffs.max_degree
                f.attrs["max_order"] = coeffs.max_order
                f.attrs["gm"] = coeffs.gm
                f.attrs["radius"] = coeffs.radius
                f.attrs["normalized"] = coeffs.normalized

                f.create_dataset("C", data=coeffs.C, compression="gzip")
                f.create_dataset("S", data=coeffs.S, compression="gzip")

            logger.info(f"Coefficients saved to: {filepath}")

        except Exception as e:
            logger.exception(f"Failed to save coefficients: {e}")
            raise e

    @staticmethod
    def load_coefficients(filepath: str) -> HarmonicCoeffs:
        logger.info(f"Loading coefficients from: {filepath}")
        if not h5py.is_hdf5(filepath):
            msg = f"File '{filepath}' is not a valid HDF5 file."
            logger.error(msg)
            raise ValueError(msg)

        with h5py.File(filepath, "r") as f:
            if "version" in f.attrs:
                logger.debug(f"File written by icgemio {f.attrs['version']}")

            coeffs = HarmonicCoeffs(int(f.attrs["max_degree"]), int(f.attrs["max_order"]))
            C = np.asarray(f["C"], dtype=np.float64)
            S = np.asarray(f["S"], dtype=np.float64)
            if C.shape != coeffs.C.shape or S.shape != coeffs.S.shape:
                msg = f"File '{filepath}' holds arrays of shape {C.shape}/{S.shape}, expected {coeffs.C.shape}."
                logger.error(msg)
                raise ValueError(msg)

            coeffs.C[:] = C
            coeffs.S[:] = S
            coeffs.gm = float(f.attrs["gm"])
            coeffs.radius = float(f.attrs["radius"])
            coeffs.normalized = bool(f.attrs["normalized"])

        logger.info(f"Loaded {coeffs!r} from: {filepath}")
        return coeffs


save_coefficients = IOManager.save_coefficients
load_coefficients = IOManager.load_coefficients
