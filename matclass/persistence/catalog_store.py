import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

from ..analysis.variable_types import CatalogEntry

logger = logging.getLogger(__name__)


# ==============================================
# CatalogStore
# ==============================================
#
# PURPOSE:
#   Persist classified catalogs to disk.
#
# FILE STRUCTURE:
# ---------------
#   metadata/
#   ├── catalog.json   → {name: {record, classification}}
#   └── state.json     → {entry_count, saved_at, version}
#
class CatalogStore:
    """Handles persistence of catalog entries to a metadata directory."""

    VERSION = "1.0"

    def __init__(self, storage_dir: str = "metadata/"):
        """
        Initialize the store. The directory is created on first save.

        Args:
            storage_dir: Directory to store metadata files
        """
        self.storage_dir = Path(storage_dir)
        self.catalog_file = self.storage_dir / "catalog.json"
        self.state_file = self.storage_dir / "state.json"

    def save_entries(self, entries: Dict[str, CatalogEntry]) -> None:
        self.storage_dir.mkdir(parents=True, exist_ok=True)

        entries_dict = {name: entry.to_dict() for name, entry in entries.items()}
        with open(self.catalog_file, 'w') as f:
            json.dump(entries_dict, f, indent=2)

        state = {
            "entry_count": len(entries),
            "saved_at": datetime.now().isoformat(),
            "version": self.VERSION,
        }
        with open(self.state_file, 'w') as f:
            json.dump(state, f, indent=2)

        logger.info("Saved %d catalog entries to %s", len(entries), self.catalog_file)

    def load_entries(self) -> Dict[str, CatalogEntry]:
        """
        Load catalog entries from disk.

        Returns:
            Dictionary mapping name -> CatalogEntry
            Empty dict if file doesn't exist
        """
        if not self.catalog_file.exists():
            logger.info("No catalog file found at %s", self.catalog_file)
            return {}

        with open(self.catalog_file, 'r') as f:
            entries_dict = json.load(f)

        entries = {
            name: CatalogEntry.from_dict(data)
            for name, data in entries_dict.items()
        }
        logger.info("Loaded %d catalog entries from %s", len(entries), self.catalog_file)
        return entries

    def load_state(self) -> Dict[str, Any]:
        if not self.state_file.exists():
            return {"entry_count": 0, "saved_at": None, "version": self.VERSION}

        with open(self.state_file, 'r') as f:
            return json.load(f)

    def exists(self) -> bool:
        return self.catalog_file.exists() or self.state_file.exists()

    def clear(self) -> None:
        """Delete all metadata files (for testing or reset)."""
        for file in (self.catalog_file, self.state_file):
            if file.exists():
                file.unlink()
                logger.info("Deleted %s", file)
