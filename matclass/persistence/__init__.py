# ==============================================
# PERSISTENCE (Catalogs across runs)
# ==============================================
#
# Saves and loads classified catalogs so a container does not have
# to be re-read to know what it holds.
#
# Modules:
# --------
# - catalog_store.py  → Save/load catalog entries and state as JSON
#
# ==============================================

from .catalog_store import CatalogStore

__all__ = ["CatalogStore"]
