"""warpspec: map normalized control values onto parameter ranges."""

from warpspec.core.curves import (
    CurveKind,
    SpecCatalog,
    UnknownDefaultNameError,
    WarpSpec,
    amp_to_db,
    db_to_amp,
    get_default,
)
from warpspec.core.pitch import freq_to_midi, midi_to_freq

__all__ = [
    "CurveKind",
    "SpecCatalog",
    "UnknownDefaultNameError",
    "WarpSpec",
    "amp_to_db",
    "db_to_amp",
    "freq_to_midi",
    "get_default",
    "midi_to_freq",
]
