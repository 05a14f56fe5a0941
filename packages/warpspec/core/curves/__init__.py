"""Value-mapping engine: curve kinds, warp specs and default specs."""

from warpspec.core.curves.catalog import SpecCatalog
from warpspec.core.curves.conversions import amp_to_db, db_to_amp
from warpspec.core.curves.defaults import (
    DEFAULT_SPECS,
    UnknownDefaultNameError,
    get_default,
    list_defaults,
)
from warpspec.core.curves.enums import CurveKind, parse_curve_kind
from warpspec.core.curves.models import MIN_EXPONENT, WarpSpec
from warpspec.core.curves.sampling import SamplePoint, control_grid, sample_spec

__all__ = [
    "DEFAULT_SPECS",
    "MIN_EXPONENT",
    "CurveKind",
    "SamplePoint",
    "SpecCatalog",
    "UnknownDefaultNameError",
    "WarpSpec",
    "amp_to_db",
    "control_grid",
    "db_to_amp",
    "get_default",
    "list_defaults",
    "parse_curve_kind",
    "sample_spec",
]
