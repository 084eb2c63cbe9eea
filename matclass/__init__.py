# ==============================================
# matclass — MAT-file type classification
# ==============================================
#
# Package Structure:
#
# matclass/
# ├── codes.py          # Raw storage-class / data-type codes
# ├── errors.py         # Contract-violation exceptions
# ├── analysis/         # Semantic types, forward mapper, classifier
# ├── normalization/    # Turn loose header dicts into MetadataRecords
# ├── persistence/      # Save/load classified catalogs as JSON
# ├── config.py         # Configuration management
# ├── catalog.py        # VariableCatalog orchestrator
# └── cli.py            # Command line entry point
#
# ==============================================

from .analysis.variable_types import (
    ValueType,
    VariableKind,
    RawCodes,
    Classification,
    MetadataRecord,
)
from .analysis.mapper import get_raw_codes
from .analysis.classifier import classify
from .errors import (
    MatClassError,
    UnmappableValueType,
    UnmappableVariableKind,
    MissingRecord,
)

__version__ = "0.1.0"

__all__ = [
    "ValueType",
    "VariableKind",
    "RawCodes",
    "Classification",
    "MetadataRecord",
    "get_raw_codes",
    "classify",
    "MatClassError",
    "UnmappableValueType",
    "UnmappableVariableKind",
    "MissingRecord",
]
