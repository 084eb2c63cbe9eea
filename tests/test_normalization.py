# ==============================================
# Tests for Normalization Module
# ==============================================

import pytest

from matclass.codes import MatClass, MatType
from matclass.normalization import CodeDetector, RecordNormalizer


class TestCodeDetector:
    @pytest.mark.parametrize("value", ["MAT_C_DOUBLE", "mxDOUBLE_CLASS", "double", "DOUBLE", " double ", 6, "6"])
    def test_class_spellings(self, value):
        assert CodeDetector.detect_class(value) == MatClass.DOUBLE

    def test_char_class(self):
        assert CodeDetector.detect_class("char") == MatClass.CHAR

    def test_enum_member(self):
        assert CodeDetector.detect_class(MatClass.CELL) == 1

    @pytest.mark.parametrize("value", ["MAT_T_UTF8", "miUTF8", "utf8", 16])
    def test_type_spellings(self, value):
        assert CodeDetector.detect_type(value) == MatType.UTF8

    def test_class_and_type_tables_are_separate(self):
        # DOUBLE is 6 as a class but 9 as a data type
        assert CodeDetector.detect_class("double") == 6
        assert CodeDetector.detect_type("double") == 9

    def test_undeclared_integer_passes_through(self):
        assert CodeDetector.detect_type(99) == 99

    @pytest.mark.parametrize("value", ["logical_matrix", True, None, 1.5, [6]])
    def test_rejected(self, value):
        with pytest.raises(ValueError):
            CodeDetector.detect_class(value)


class TestRecordNormalizer:
    @pytest.fixture
    def normalizer(self):
        return RecordNormalizer()

    def test_basic_header(self, normalizer):
        record = normalizer.normalize({"dims": [1, 5], "class_code": "double", "data_type_code": "miDOUBLE"})
        assert record.rank == 2
        assert record.dims == (1, 5)
        assert record.class_code == MatClass.DOUBLE
        assert record.data_type_code == MatType.DOUBLE
        assert record.name is None

    @pytest.mark.parametrize("shape, expected", [
        ("3x4", (3, 4)),
        ("2 x 3 x 4", (2, 3, 4)),
        ("2,2", (2, 2)),
        ("1X1", (1, 1)),
    ])
    def test_shape_strings(self, normalizer, shape, expected):
        record = normalizer.normalize({"dims": shape, "class_code": 6, "data_type_code": 9})
        assert record.dims == expected
        assert record.rank == len(expected)

    def test_matio_field_names(self, normalizer):
        record = normalizer.normalize({"dims": (2, 2), "class_type": "MAT_C_CELL", "data_type": "MAT_T_CELL"})
        assert (record.class_code, record.data_type_code) == (MatClass.CELL, MatType.CELL)

    def test_explicit_rank_is_kept(self, normalizer):
        record = normalizer.normalize({"dims": [5], "rank": 1, "class_code": 6, "data_type_code": 9})
        assert record.rank == 1

    def test_numeric_strings_and_floats(self, normalizer):
        record = normalizer.normalize({"dims": ["3", 4.0], "rank": "2", "class_code": "6", "data_type_code": "9"})
        assert record.dims == (3, 4)
        assert record.rank == 2

    def test_name_argument_wins(self, normalizer):
        record = normalizer.normalize({"name": "a", "dims": [1, 1], "class_code": 6, "data_type_code": 9}, name="b")
        assert record.name == "b"

    def test_name_from_header(self, normalizer):
        record = normalizer.normalize({"name": "a", "dims": [1, 1], "class_code": 6, "data_type_code": 9})
        assert record.name == "a"

    @pytest.mark.parametrize("header", [
        {"class_code": 6, "data_type_code": 9},
        {"dims": [1, 1], "data_type_code": 9},
        {"dims": [1, 1], "class_code": 6},
        {"dims": [1, -1], "class_code": 6, "data_type_code": 9},
        {"dims": [1, 1], "rank": -2, "class_code": 6, "data_type_code": 9},
        {"dims": 5, "class_code": 6, "data_type_code": 9},
        {"dims": [1, "a"], "class_code": 6, "data_type_code": 9},
        {"dims": [1, 1], "class_code": "bogus", "data_type_code": 9},
    ])
    def test_malformed_headers(self, normalizer, header):
        with pytest.raises(ValueError):
            normalizer.normalize(header)

    def test_non_dict(self, normalizer):
        with pytest.raises(ValueError):
            normalizer.normalize([1, 1, 6, 9])

    def test_normalize_batch(self, normalizer, sample_headers):
        records = normalizer.normalize_batch(sample_headers)
        assert [r.name for r in records] == [h["name"] for h in sample_headers]
        assert records[2].dims == (480, 640, 3)
