# ==============================================
# Raw Container Codes
# ==============================================
#
# PURPOSE:
#   The container format's own enumerations, with their fixed
#   on-disk integer values. Every header carries one class code
#   and one data-type code.
#
# ENUMS:
# ------
# - MatClass(IntEnum)  → storage class (numeric, char, struct, cell, ...)
# - MatType(IntEnum)   → data type (int8 ... utf32, struct, cell, ...)
#
# GROUPS:
# -------
# - UNSUPPORTED_CLASSES  → classes that are never interpreted
# - NESTED_ARRAY_TYPES   → data types that wrap a nested array payload
#
# ==============================================

from enum import IntEnum
from typing import Optional


class MatClass(IntEnum):
    """Storage class codes."""
    EMPTY = 0
    CELL = 1
    STRUCT = 2
    OBJECT = 3
    CHAR = 4
    SPARSE = 5
    DOUBLE = 6
    SINGLE = 7
    INT8 = 8
    UINT8 = 9
    INT16 = 10
    UINT16 = 11
    INT32 = 12
    UINT32 = 13
    INT64 = 14
    UINT64 = 15
    FUNCTION = 16
    OPAQUE = 17


class MatType(IntEnum):
    """Data type codes. Gaps (8, 10, 11, 19) are reserved by the format."""
    UNKNOWN = 0
    INT8 = 1
    UINT8 = 2
    INT16 = 3
    UINT16 = 4
    INT32 = 5
    UINT32 = 6
    SINGLE = 7
    DOUBLE = 9
    INT64 = 12
    UINT64 = 13
    MATRIX = 14
    COMPRESSED = 15
    UTF8 = 16
    UTF16 = 17
    UTF32 = 18
    STRING = 20
    CELL = 21
    STRUCT = 22
    ARRAY = 23
    FUNCTION = 24


UNSUPPORTED_CLASSES = frozenset({
    MatClass.OBJECT,
    MatClass.SPARSE,
    MatClass.FUNCTION,
    MatClass.OPAQUE,
})

NESTED_ARRAY_TYPES = frozenset({MatType.ARRAY, MatType.MATRIX})


def to_mat_class(code: int) -> Optional[MatClass]:
    """Return the MatClass for an integer code, or None if undeclared."""
    try:
        return MatClass(code)
    except ValueError:
        return None


def to_mat_type(code: int) -> Optional[MatType]:
    """Return the MatType for an integer code, or None if undeclared."""
    try:
        return MatType(code)
    except ValueError:
        return None
