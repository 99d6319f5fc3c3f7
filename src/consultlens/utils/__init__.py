"""Utility modules for ConsultLens."""

from .formatting import percent_of, round_half_up, format_compact, format_signed
from .data_prep import export_to_json, prepare_export

__all__ = [
    "percent_of",
    "round_half_up",
    "format_compact",
    "format_signed",
    "export_to_json",
    "prepare_export",
]
