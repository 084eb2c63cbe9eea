# ==============================================
# Metadata Classifier
# ==============================================
#
# PURPOSE:
#   Raw header metadata → (VariableKind, ValueType). Used by readers
#   right after a header is parsed, before any payload bytes are read.
#
# CLASS: MetadataClassifier
# -------------------------
#   Stateless — takes a MetadataRecord in, gives a Classification out.
#
#   Methods:
#   --------
#   - classify(record) -> Classification
#       Rules are applied in order:
#
#       RULE 0: record is None → MissingRecord (the only hard error)
#
#       RULE 1: data-type code → ValueType through DATA_TYPE_VALUES
#
#       RULE 2: UNSUPPORTED verdict when
#         - the class is object / sparse / function / opaque / undeclared
#         - the value type is UNSUPPORTED
#         - rank < 2 (the format requires at least two dimensions)
#         - dims is shorter than rank
#
#       RULE 3: cell class or cell type → CELL_ARRAY
#         (checked before size: a 1x1 cell is still a cell)
#
#       RULE 4: product(dims) == 1
#         struct type        → STRUCT
#         array/matrix type  → VARIABLE_ARRAY
#         anything else      → ELEMENT
#
#       RULE 5: product(dims) != 1
#         struct / array / matrix type       → VARIABLE_ARRAY
#         rank 2 with dims[0]==1 or dims[1]==1 → VECTOR
#         anything else                      → MULTI_DIMENSIONAL_ARRAY
#
#   - classify_all(records: dict[str, MetadataRecord]) -> dict[str, Classification]
#
#   - get_kind_distribution(classifications) -> dict[str, int]
#
# KNOWN EDGE CASE:
#   A 1x1 header with an array/matrix data type classifies as
#   VARIABLE_ARRAY, while the forward mapper writes VARIABLE_ARRAY as
#   struct codes. A scalar-shaped VARIABLE_ARRAY therefore reads back
#   as STRUCT. This is inherited from the format.
#
# ==============================================

import logging
from math import prod
from types import MappingProxyType
from typing import Dict, Iterable, Optional

from ..codes import MatClass, MatType, NESTED_ARRAY_TYPES, UNSUPPORTED_CLASSES, to_mat_class, to_mat_type
from ..errors import MissingRecord
from .variable_types import Classification, MetadataRecord, ValueType, VariableKind

logger = logging.getLogger(__name__)


DATA_TYPE_VALUES = MappingProxyType({
    MatType.INT8: ValueType.INT8,
    MatType.UINT8: ValueType.UINT8,
    MatType.INT16: ValueType.INT16,
    MatType.UINT16: ValueType.UINT16,
    MatType.INT32: ValueType.INT32,
    MatType.UINT32: ValueType.UINT32,
    MatType.INT64: ValueType.INT64,
    MatType.UINT64: ValueType.UINT64,
    MatType.SINGLE: ValueType.SINGLE,
    MatType.DOUBLE: ValueType.DOUBLE,
    MatType.UTF8: ValueType.UTF8,
    MatType.UTF16: ValueType.UTF16,
    MatType.UTF32: ValueType.UTF32,
    MatType.STRING: ValueType.STRING,
    MatType.CELL: ValueType.VARIABLE,
    MatType.STRUCT: ValueType.VARIABLE,
    MatType.ARRAY: ValueType.VARIABLE,
    MatType.MATRIX: ValueType.VARIABLE,
    MatType.COMPRESSED: ValueType.UNSUPPORTED,
    MatType.FUNCTION: ValueType.UNSUPPORTED,
    MatType.UNKNOWN: ValueType.UNSUPPORTED,
})


class MetadataClassifier:
    """
    Infers the semantic variable kind of a header from its raw metadata.

    Exotic or malformed headers are expected when reading real files,
    so they produce an UNSUPPORTED verdict rather than an exception.
    The caller decides whether to skip, log or abort.
    """

    @classmethod
    def classify(cls, record: Optional[MetadataRecord]) -> Classification:
        """
        Classify a single header.

        Args:
            record: Parsed header metadata (anything with rank, dims,
                    class_code and data_type_code attributes)

        Returns:
            Classification(kind, value_type)

        Raises:
            MissingRecord: record is None
        """
        if record is None:
            raise MissingRecord()

        data_type = to_mat_type(record.data_type_code)
        value_type = cls.value_type_for(record.data_type_code)

        reason = cls._unsupported_reason(record, value_type)
        if reason:
            logger.debug("Unsupported header %r: %s", getattr(record, "name", None), reason)
            return Classification(VariableKind.UNSUPPORTED, value_type)

        dims = tuple(record.dims)[:record.rank]
        dimensions_product = prod(dims)

        # RULE 3: cell-ness wins over size
        if record.class_code == MatClass.CELL or data_type is MatType.CELL:
            return Classification(VariableKind.CELL_ARRAY, value_type)

        # RULE 4: logically scalar container
        if dimensions_product == 1:
            if data_type is MatType.STRUCT:
                return Classification(VariableKind.STRUCT, value_type)
            if data_type in NESTED_ARRAY_TYPES:
                # 1x1, neither cell nor struct, yet it wraps an array
                return Classification(VariableKind.VARIABLE_ARRAY, value_type)
            return Classification(VariableKind.ELEMENT, value_type)

        # RULE 5: everything larger (or empty)
        if data_type is MatType.STRUCT or data_type in NESTED_ARRAY_TYPES:
            return Classification(VariableKind.VARIABLE_ARRAY, value_type)
        if record.rank == 2 and (dims[0] == 1 or dims[1] == 1):
            return Classification(VariableKind.VECTOR, value_type)
        return Classification(VariableKind.MULTI_DIMENSIONAL_ARRAY, value_type)

    @staticmethod
    def value_type_for(data_type_code: int) -> ValueType:
        """Map a raw data-type code to its ValueType; undeclared codes are UNSUPPORTED."""
        data_type = to_mat_type(data_type_code)
        if data_type is None:
            return ValueType.UNSUPPORTED
        return DATA_TYPE_VALUES[data_type]

    @staticmethod
    def _unsupported_reason(record: MetadataRecord, value_type: ValueType) -> Optional[str]:
        mat_class = to_mat_class(record.class_code)
        if mat_class is None:
            return f"undeclared class code {record.class_code}"
        if mat_class in UNSUPPORTED_CLASSES:
            return f"class {mat_class.name} is not interpretable"
        if value_type is ValueType.UNSUPPORTED:
            return f"data type {record.data_type_code} is not interpretable"
        if record.rank < 2:
            return f"rank {record.rank} is below 2"
        if len(record.dims) < record.rank:
            return f"{len(record.dims)} dims for rank {record.rank}"
        return None

    @classmethod
    def classify_all(cls, records: Dict[str, MetadataRecord]) -> Dict[str, Classification]:
        """
        Classify every header of a container.

        Args:
            records: Dictionary of variable name → MetadataRecord

        Returns:
            Dictionary of variable name → Classification
        """
        return {name: cls.classify(record) for name, record in records.items()}

    @staticmethod
    def get_kind_distribution(classifications: Iterable[Classification]) -> Dict[str, int]:
        """Count classifications per VariableKind (every kind is present, possibly 0)."""
        distribution = {kind.value: 0 for kind in VariableKind}
        for classification in classifications:
            distribution[classification.kind.value] += 1
        return distribution


def classify(record: Optional[MetadataRecord]) -> Classification:
    """Module-level shortcut for MetadataClassifier.classify()."""
    return MetadataClassifier.classify(record)
