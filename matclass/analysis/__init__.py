# ==============================================
# ANALYSIS & CLASSIFICATION
# ==============================================
#
# This package maps between the container's raw codes and the
# semantic variable taxonomy, in both directions.
#
#   Writing:  (VariableKind, ValueType) → mapper     → RawCodes
#   Reading:  MetadataRecord            → classifier → Classification
#
# Modules:
# --------
# - variable_types.py → Enums and data classes shared by both directions
# - mapper.py         → Forward mapper (semantic → raw)
# - classifier.py     → Metadata classifier (raw → semantic)
#
# ==============================================

from .variable_types import (
    ValueType,
    VariableKind,
    RawCodes,
    Classification,
    MetadataRecord,
    CatalogEntry,
)
from .mapper import ForwardMapper, get_raw_codes
from .classifier import MetadataClassifier, classify

__all__ = [
    "ValueType",
    "VariableKind",
    "RawCodes",
    "Classification",
    "MetadataRecord",
    "CatalogEntry",
    "ForwardMapper",
    "get_raw_codes",
    "MetadataClassifier",
    "classify",
]
