# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - make_record      → factory for MetadataRecord with sensible defaults
# - app_config       → AppConfig pointing at a temporary metadata dir
# - catalog          → VariableCatalog using app_config
# - fresh_config     → clears the config singleton around a test
# ==============================================

import pytest

from matclass import config as config_module
from matclass.analysis.variable_types import MetadataRecord
from matclass.catalog import VariableCatalog
from matclass.codes import MatClass, MatType
from matclass.config import AppConfig


@pytest.fixture
def make_record():
    """Build a MetadataRecord; rank defaults to len(dims)."""
    def _make(dims=(1, 1), class_code=MatClass.DOUBLE, data_type_code=MatType.DOUBLE, rank=None, name=None):
        return MetadataRecord(
            rank=len(dims) if rank is None else rank,
            dims=dims,
            class_code=class_code,
            data_type_code=data_type_code,
            name=name,
        )
    return _make


@pytest.fixture
def app_config(tmp_path):
    return AppConfig(metadata_dir=str(tmp_path / "metadata"))


@pytest.fixture
def catalog(app_config):
    return VariableCatalog(config=app_config)


@pytest.fixture
def fresh_config(monkeypatch):
    monkeypatch.setattr(config_module, "_config_instance", None)
    yield
    config_module._config_instance = None


@pytest.fixture
def sample_headers():
    """Headers as a reader would hand them over for one container."""
    return [
        {"name": "gain", "dims": [1, 1], "class_code": "double", "data_type_code": "miDOUBLE"},
        {"name": "samples", "dims": "1x500", "class_code": "MAT_C_SINGLE", "data_type_code": "MAT_T_SINGLE"},
        {"name": "image", "dims": [480, 640, 3], "class_code": "uint8", "data_type_code": "uint8"},
        {"name": "label", "dims": [1, 5], "class_type": "char", "data_type": "utf8"},
        {"name": "settings", "dims": [1, 1], "class_code": "struct", "data_type_code": "struct"},
        {"name": "trials", "dims": [1, 10], "class_code": "struct", "data_type_code": "struct"},
        {"name": "notes", "dims": [1, 1], "class_code": "cell", "data_type_code": "cell"},
        {"name": "adjacency", "dims": [100, 100], "class_code": "sparse", "data_type_code": "double"},
        {"name": "handle", "dims": [1, 1], "class_code": "function", "data_type_code": "function"},
    ]
