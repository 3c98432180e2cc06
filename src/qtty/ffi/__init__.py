"""
qtty.ffi
========

Language-boundary surface: stable integer ids for dimensions and units, a
metadata registry keyed by those ids, JSON transport, and a facade that
reports failures as `Status` codes.
"""

from qtty.ffi.api import FFI_VERSION, ffi_version
from qtty.ffi.types import DimensionId, QuantityRecord, Status, UnitId

__all__ = ["FFI_VERSION", "ffi_version", "DimensionId", "QuantityRecord", "Status", "UnitId"]
