"""Data models for json-to-ts"""

from json_to_ts.models.inference import InferenceResult, JsonKind, kind_of
from json_to_ts.models.options import ConverterOptions


__all__ = [
    "ConverterOptions",
    "InferenceResult",
    "JsonKind",
    "kind_of",
]
