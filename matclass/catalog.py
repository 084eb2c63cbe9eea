# ==============================================
# VariableCatalog — Orchestrator
# ==============================================
#
# PURPOSE:
#   The user-facing class that ties the packages together for a
#   whole container: normalize headers, classify them, keep the
#   results, and persist them.
#
#   raw header dict
#         │
#         ▼
#   RecordNormalizer  → MetadataRecord
#         │
#         ▼
#   MetadataClassifier → Classification
#         │
#         ▼
#   entries: dict[str, CatalogEntry] ──► CatalogStore (save / load)
#
# CLASS: VariableCatalog
# ----------------------
#
#   Public Methods:
#   ---------------
#   - add(raw_header: dict, name: str | None = None) -> CatalogEntry
#   - add_batch(raw_headers: list[dict]) -> list[CatalogEntry]
#   - add_record(record: MetadataRecord, name: str | None = None) -> CatalogEntry
#   - raw_codes_for(kind, value_type) -> RawCodes
#   - get_entries() -> dict[str, CatalogEntry]
#   - get_supported() / get_unsupported() -> dict[str, CatalogEntry]
#   - get_summary() -> dict
#   - save() / load()
#
# ==============================================

import logging
from itertools import count
from typing import Dict, List, Optional

from .config import AppConfig, get_config
from .analysis.classifier import MetadataClassifier
from .analysis.mapper import ForwardMapper
from .analysis.variable_types import CatalogEntry, MetadataRecord, RawCodes
from .normalization.record_normalizer import RecordNormalizer
from .persistence.catalog_store import CatalogStore

logger = logging.getLogger(__name__)


class VariableCatalog:
    """
    Classifies every variable header of a container and remembers the result.

    Unsupported variables are kept in the catalog with their verdict so
    the caller can decide to skip them; malformed header dicts raise
    ValueError from the normalizer.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        normalizer: Optional[RecordNormalizer] = None,
        store: Optional[CatalogStore] = None,
    ):
        self.config = config or get_config()
        self._normalizer = normalizer or RecordNormalizer()
        self._classifier = MetadataClassifier()
        self._mapper = ForwardMapper()
        self._store = store or CatalogStore(self.config.metadata_dir)
        self._entries: Dict[str, CatalogEntry] = {}

    def add(self, raw_header: dict, name: Optional[str] = None) -> CatalogEntry:
        """
        Normalize and classify one raw header.

        Args:
            raw_header: Header dict (dims, class_code, data_type_code, ...)
            name: Variable name; falls back to the header's "name" key

        Returns:
            The CatalogEntry that was stored
        """
        record = self._normalizer.normalize(raw_header, name=name)
        return self.add_record(record)

    def add_batch(self, raw_headers: List[dict]) -> List[CatalogEntry]:
        # Normalize everything first so a malformed header adds nothing
        records = self._normalizer.normalize_batch(raw_headers)
        return [self.add_record(record) for record in records]

    def add_record(self, record: MetadataRecord, name: Optional[str] = None) -> CatalogEntry:
        entry_name = name or record.name or self._next_generated_name()
        if entry_name in self._entries:
            logger.warning("Replacing catalog entry '%s'", entry_name)

        classification = self._classifier.classify(record)
        entry = CatalogEntry(name=entry_name, record=record, classification=classification)
        self._entries[entry_name] = entry

        if not classification.is_supported:
            logger.info("Variable '%s' is unsupported", entry_name)
        return entry

    def _next_generated_name(self) -> str:
        return next(
            f"var{i}" for i in count(len(self._entries)) if f"var{i}" not in self._entries
        )

    def raw_codes_for(self, variable_kind, value_type) -> RawCodes:
        """Raw header codes a writer needs for a semantic variable."""
        return self._mapper.map(variable_kind, value_type)

    def get_entries(self) -> Dict[str, CatalogEntry]:
        return dict(self._entries)

    def get_supported(self) -> Dict[str, CatalogEntry]:
        return {n: e for n, e in self._entries.items() if e.classification.is_supported}

    def get_unsupported(self) -> Dict[str, CatalogEntry]:
        return {n: e for n, e in self._entries.items() if not e.classification.is_supported}

    def get_summary(self) -> dict:
        """
        Summarize the catalog.

        Returns:
            Dict with total count, kind distribution, and the names of
            supported / unsupported variables
        """
        return {
            "total": len(self._entries),
            "distribution": self._classifier.get_kind_distribution(
                e.classification for e in self._entries.values()
            ),
            "supported": sorted(self.get_supported()),
            "unsupported": sorted(self.get_unsupported()),
        }

    def save(self) -> None:
        self._store.save_entries(self._entries)

    def load(self) -> int:
        """Replace in-memory entries with the saved catalog. Returns the entry count."""
        self._entries = self._store.load_entries()
        return len(self._entries)

    def clear(self) -> None:
        self._entries = {}
