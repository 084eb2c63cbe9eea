# ==============================================
# Errors
# ==============================================
#
# Contract violations only. Unclassifiable metadata is NOT an
# error: the classifier returns an Unsupported verdict instead.
#
# ==============================================


class MatClassError(ValueError):
    """Base class for matclass contract violations."""


class UnmappableValueType(MatClassError):
    """A scalar-shaped kind was paired with a non-scalar value type."""

    def __init__(self, value_type, variable_kind=None):
        self.value_type = value_type
        self.variable_kind = variable_kind
        message = f"Value type {value_type!r} has no raw code"
        if variable_kind is not None:
            message += f" for variable kind {variable_kind!r}"
        super().__init__(message)


class UnmappableVariableKind(MatClassError):
    """The variable kind has no raw representation (e.g. Unsupported)."""

    def __init__(self, variable_kind):
        self.variable_kind = variable_kind
        super().__init__(f"Variable kind {variable_kind!r} has no raw code")


class MissingRecord(MatClassError):
    """classify() was called without a metadata record."""

    def __init__(self):
        super().__init__("No metadata record to classify")
