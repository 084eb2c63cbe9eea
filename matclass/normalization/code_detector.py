import re
from typing import Any, Dict

from ..codes import MatClass, MatType


def _class_aliases() -> Dict[str, int]:
    aliases = {}
    for member in MatClass:
        aliases[member.name.lower()] = member.value
        aliases[f"mat_c_{member.name.lower()}"] = member.value
        aliases[f"mx{member.name.lower()}_class"] = member.value
    return aliases


def _type_aliases() -> Dict[str, int]:
    aliases = {}
    for member in MatType:
        aliases[member.name.lower()] = member.value
        aliases[f"mat_t_{member.name.lower()}"] = member.value
        aliases[f"mi{member.name.lower()}"] = member.value
    return aliases


class CodeDetector:
    CLASS_ALIASES = _class_aliases()
    TYPE_ALIASES = _type_aliases()

    INTEGER_PATTERN = re.compile(r'^[+-]?\d+$')

    @classmethod
    def detect_class(cls, value: Any) -> int:
        return cls._resolve(value, cls.CLASS_ALIASES, "class")

    @classmethod
    def detect_type(cls, value: Any) -> int:
        return cls._resolve(value, cls.TYPE_ALIASES, "data type")

    @classmethod
    def _resolve(cls, value: Any, aliases: Dict[str, int], label: str) -> int:
        if value is None:
            raise ValueError(f"Missing {label} code")

        if isinstance(value, bool):
            raise ValueError(f"Invalid {label} code: {value!r}")

        # Covers plain ints and the IntEnum members
        if isinstance(value, int):
            return int(value)

        if isinstance(value, str):
            value_stripped = value.strip()

            if cls.INTEGER_PATTERN.match(value_stripped):
                return int(value_stripped)

            code = aliases.get(value_stripped.lower())
            if code is not None:
                return code

        raise ValueError(f"Unknown {label} code: {value!r}")
