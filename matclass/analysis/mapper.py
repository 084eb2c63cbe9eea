# ==============================================
# Forward Mapper
# ==============================================
#
# PURPOSE:
#   Semantic (VariableKind, ValueType) → raw (class code, data-type code).
#   Used by writers before a header is serialized.
#
# CLASS: ForwardMapper
# --------------------
#   Stateless — all lookups go through module-level read-only tables.
#
#   Methods:
#   --------
#   - map(variable_kind, value_type) -> RawCodes
#       Dispatch in order:
#
#       ELEMENT / VECTOR / MULTI_DIMENSIONAL_ARRAY:
#         → SCALAR_CODES[value_type]
#         → UnmappableValueType for VARIABLE, UNSUPPORTED
#
#       STRUCT / VARIABLE_ARRAY:
#         → (MatClass.STRUCT, MatType.STRUCT), value_type ignored
#
#       CELL_ARRAY:
#         → (MatClass.CELL, MatType.CELL), value_type ignored
#
#       UNSUPPORTED:
#         → UnmappableVariableKind
#
# ==============================================

from types import MappingProxyType

from ..codes import MatClass, MatType
from ..errors import UnmappableValueType, UnmappableVariableKind
from .variable_types import RawCodes, ValueType, VariableKind


# The wire table for scalar payloads
SCALAR_CODES = MappingProxyType({
    ValueType.INT8: RawCodes(MatClass.INT8, MatType.INT8),
    ValueType.UINT8: RawCodes(MatClass.UINT8, MatType.UINT8),
    ValueType.INT16: RawCodes(MatClass.INT16, MatType.INT16),
    ValueType.UINT16: RawCodes(MatClass.UINT16, MatType.UINT16),
    ValueType.INT32: RawCodes(MatClass.INT32, MatType.INT32),
    ValueType.UINT32: RawCodes(MatClass.UINT32, MatType.UINT32),
    ValueType.INT64: RawCodes(MatClass.INT64, MatType.INT64),
    ValueType.UINT64: RawCodes(MatClass.UINT64, MatType.UINT64),
    ValueType.SINGLE: RawCodes(MatClass.SINGLE, MatType.SINGLE),
    ValueType.DOUBLE: RawCodes(MatClass.DOUBLE, MatType.DOUBLE),
    ValueType.UTF8: RawCodes(MatClass.CHAR, MatType.UTF8),
    ValueType.UTF16: RawCodes(MatClass.CHAR, MatType.UTF16),
    ValueType.UTF32: RawCodes(MatClass.CHAR, MatType.UTF32),
    ValueType.STRING: RawCodes(MatClass.CHAR, MatType.STRING),
})

STRUCT_CODES = RawCodes(MatClass.STRUCT, MatType.STRUCT)
CELL_CODES = RawCodes(MatClass.CELL, MatType.CELL)

SCALAR_SHAPED_KINDS = frozenset({
    VariableKind.ELEMENT,
    VariableKind.VECTOR,
    VariableKind.MULTI_DIMENSIONAL_ARRAY,
})


class ForwardMapper:
    """
    Produces the raw header codes for a semantic variable request.

    Every (kind, value type) combination either returns RawCodes or
    raises a MatClassError subclass; nothing is silently coerced.
    """

    @classmethod
    def map(cls, variable_kind, value_type) -> RawCodes:
        """
        Look up the raw codes for a variable.

        Args:
            variable_kind: VariableKind member (or its string value)
            value_type: ValueType member (or its string value)

        Returns:
            RawCodes(class_code, data_type_code)

        Raises:
            UnmappableVariableKind: kind is UNSUPPORTED or undeclared
            UnmappableValueType: scalar-shaped kind with a non-scalar value type
        """
        kind = cls._as_kind(variable_kind)

        if kind in SCALAR_SHAPED_KINDS:
            value = cls._as_value_type(value_type, kind)
            try:
                return SCALAR_CODES[value]
            except KeyError:
                raise UnmappableValueType(value, kind) from None

        if kind is VariableKind.STRUCT or kind is VariableKind.VARIABLE_ARRAY:
            return STRUCT_CODES

        if kind is VariableKind.CELL_ARRAY:
            return CELL_CODES

        raise UnmappableVariableKind(kind)

    @staticmethod
    def _as_kind(variable_kind) -> VariableKind:
        try:
            return VariableKind(variable_kind)
        except ValueError:
            raise UnmappableVariableKind(variable_kind) from None

    @staticmethod
    def _as_value_type(value_type, kind: VariableKind) -> ValueType:
        try:
            return ValueType(value_type)
        except ValueError:
            raise UnmappableValueType(value_type, kind) from None


def get_raw_codes(variable_kind, value_type) -> RawCodes:
    """Module-level shortcut for ForwardMapper.map()."""
    return ForwardMapper.map(variable_kind, value_type)
