# ==============================================
# Variable Types (Enums and Data Classes)
# ==============================================
#
# PURPOSE:
#   The semantic vocabulary shared by the forward mapper and the
#   classifier, plus the records that flow between them.
#
# ENUMS:
# ------
# - ValueType(Enum)
#     Scalar storage kind of the payload. VARIABLE means the payload
#     is itself a nested variable; UNSUPPORTED means it cannot be read.
#
# - VariableKind(Enum)
#     Semantic shape: ELEMENT, VECTOR, MULTI_DIMENSIONAL_ARRAY, STRUCT,
#     VARIABLE_ARRAY, CELL_ARRAY, UNSUPPORTED.
#
# CLASSES:
# --------
# - RawCodes (NamedTuple)        → (class_code, data_type_code)
# - Classification (NamedTuple)  → (kind, value_type)
# - MetadataRecord (dataclass)   → rank, dims, class_code, data_type_code
# - CatalogEntry (dataclass)     → named record + its classification
#
#   Data classes carry to_dict() / from_dict() for persistence.
#
# ==============================================

from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, NamedTuple, Optional, Tuple

from ..codes import MatClass, MatType, to_mat_class, to_mat_type


class ValueType(Enum):
    """Scalar storage kind of a variable's payload."""
    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    SINGLE = "single"
    DOUBLE = "double"
    UTF8 = "utf8"
    UTF16 = "utf16"
    UTF32 = "utf32"
    STRING = "string"
    VARIABLE = "variable"
    UNSUPPORTED = "unsupported"


class VariableKind(Enum):
    """
    Semantic shape of a stored variable.

    - ELEMENT: a single scalar
    - VECTOR: 1-D sequence (rank 2 with one unit axis)
    - MULTI_DIMENSIONAL_ARRAY: any other numeric/char array
    - STRUCT: a single named-field record
    - VARIABLE_ARRAY: array whose elements are structured variables
    - CELL_ARRAY: array of heterogeneous variables
    - UNSUPPORTED: cannot be interpreted
    """
    ELEMENT = "element"
    VECTOR = "vector"
    MULTI_DIMENSIONAL_ARRAY = "multi_dimensional_array"
    STRUCT = "struct"
    VARIABLE_ARRAY = "variable_array"
    CELL_ARRAY = "cell_array"
    UNSUPPORTED = "unsupported"


class RawCodes(NamedTuple):
    """Raw (class code, data-type code) pair written to a header."""
    class_code: MatClass
    data_type_code: MatType


class Classification(NamedTuple):
    """Result of classifying one header."""
    kind: VariableKind
    value_type: ValueType

    @property
    def is_supported(self) -> bool:
        return self.kind is not VariableKind.UNSUPPORTED

    def to_dict(self) -> Dict[str, str]:
        return {"kind": self.kind.value, "value_type": self.value_type.value}

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "Classification":
        return cls(VariableKind(data["kind"]), ValueType(data["value_type"]))


def _as_dim(value: Any) -> int:
    # Fractional sizes are malformed, never truncated
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"Non-integral dimension: {value!r}")
    return int(value)


@dataclass(frozen=True)
class MetadataRecord:
    """
    Header metadata of one stored variable, as parsed by a reader.

    Codes are plain ints so that undeclared codes found on disk can
    still be represented; the classifier decides what to do with them.
    """

    rank: int
    dims: Tuple[int, ...]
    class_code: int
    data_type_code: int
    name: Optional[str] = None

    def __post_init__(self):
        # Accept any sequence for dims but store an immutable tuple
        object.__setattr__(self, "dims", tuple(_as_dim(d) for d in self.dims))

    @property
    def mat_class(self) -> Optional[MatClass]:
        return to_mat_class(self.class_code)

    @property
    def mat_type(self) -> Optional[MatType]:
        return to_mat_type(self.data_type_code)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the record to a JSON-friendly dictionary.

        Returns:
            A dictionary with plain ints for every code
        """
        return {
            "name": self.name,
            "rank": self.rank,
            "dims": list(self.dims),
            "class_code": int(self.class_code),
            "data_type_code": int(self.data_type_code),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MetadataRecord":
        """
        Rebuild a record previously produced by to_dict().

        Args:
            data: Dictionary with rank, dims and both codes

        Returns:
            A MetadataRecord instance
        """
        dims = data["dims"]
        return cls(
            rank=data.get("rank", len(dims)),
            dims=tuple(dims),
            class_code=data["class_code"],
            data_type_code=data["data_type_code"],
            name=data.get("name"),
        )


@dataclass
class CatalogEntry:
    """A named variable header together with its classification."""

    name: str
    record: MetadataRecord
    classification: Classification

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "record": self.record.to_dict(),
            "classification": self.classification.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogEntry":
        return cls(
            name=data["name"],
            record=MetadataRecord.from_dict(data["record"]),
            classification=Classification.from_dict(data["classification"]),
        )
