# ==============================================
# NORMALIZATION
# ==============================================
#
# Reader pipelines hand over loosely typed header dictionaries.
# This package turns them into MetadataRecords the classifier
# can work with.
#
# Modules:
# --------
# - code_detector.py     → Resolve class / type codes from ints or names
# - record_normalizer.py → Normalize a full header dict into a MetadataRecord
#
# ==============================================

from .code_detector import CodeDetector
from .record_normalizer import RecordNormalizer

__all__ = ["CodeDetector", "RecordNormalizer"]
