import logging
import re
from typing import Any, Optional

from ..analysis.variable_types import MetadataRecord
from .code_detector import CodeDetector

logger = logging.getLogger(__name__)


class RecordNormalizer:
    CLASS_KEYS = ("class_code", "class_type")
    TYPE_KEYS = ("data_type_code", "data_type")

    SHAPE_SEPARATOR = re.compile(r'\s*[x×,]\s*', re.IGNORECASE)

    def __init__(self, code_detector: Optional[CodeDetector] = None):
        self.code_detector = code_detector or CodeDetector()

    def normalize(self, raw_header: dict, name: Optional[str] = None) -> MetadataRecord:
        if not isinstance(raw_header, dict):
            raise ValueError("Header must be a dictionary")

        dims = self._parse_dims(raw_header.get("dims"))
        rank = self._parse_rank(raw_header.get("rank"), dims)

        class_code = self.code_detector.detect_class(self._first_present(raw_header, self.CLASS_KEYS, "class_code"))
        data_type_code = self.code_detector.detect_type(self._first_present(raw_header, self.TYPE_KEYS, "data_type_code"))

        record = MetadataRecord(
            rank=rank,
            dims=dims,
            class_code=class_code,
            data_type_code=data_type_code,
            name=name if name is not None else raw_header.get("name"),
        )
        logger.debug("Normalized header %r -> %r", raw_header, record)
        return record

    def normalize_batch(self, raw_headers: list[dict]) -> list[MetadataRecord]:
        return [self.normalize(raw_header) for raw_header in raw_headers]

    def _first_present(self, raw_header: dict, keys: tuple, label: str) -> Any:
        for key in keys:
            if raw_header.get(key) is not None:
                return raw_header[key]
        raise ValueError(f"Required field '{label}' is missing")

    def _parse_dims(self, value: Any) -> tuple[int, ...]:
        if value is None:
            raise ValueError("Required field 'dims' is missing")

        # "1x5", "3 x 4 x 2", "2,2"
        if isinstance(value, str):
            parts = [p for p in self.SHAPE_SEPARATOR.split(value.strip()) if p]
            value = parts

        if not isinstance(value, (list, tuple)):
            raise ValueError(f"Field 'dims' must be a sequence or shape string, got {value!r}")

        dims = []
        for item in value:
            dim = self._as_int(item, "dims")
            if dim < 0:
                raise ValueError(f"Negative dimension in {value!r}")
            dims.append(dim)
        return tuple(dims)

    def _parse_rank(self, value: Any, dims: tuple[int, ...]) -> int:
        if value is None:
            return len(dims)
        rank = self._as_int(value, "rank")
        if rank < 0:
            raise ValueError(f"Negative rank: {rank}")
        return rank

    def _as_int(self, value: Any, label: str) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid value in '{label}': {value!r}")
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                pass
        raise ValueError(f"Invalid value in '{label}': {value!r}")
