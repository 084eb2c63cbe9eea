# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# COMMANDS:
# ---------
# 1. Raw codes for a semantic variable:
#    python -m matclass.cli map vector double
#
# 2. Classify one header:
#    python -m matclass.cli classify --dims 1 5 --class-code MAT_C_DOUBLE --type-code 9
#
# 3. Print the scalar wire table:
#    python -m matclass.cli table
#
# 4. Classify a JSON list of headers:
#    python -m matclass.cli catalog headers.json --save
#
# Exit status: 0 on success, 2 on contract violations or malformed input
# or an unreadable catalog file.
#
# ==============================================

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import get_config
from .errors import MatClassError
from .analysis.classifier import MetadataClassifier
from .analysis.mapper import ForwardMapper, SCALAR_CODES
from .analysis.variable_types import ValueType, VariableKind
from .catalog import VariableCatalog
from .normalization.record_normalizer import RecordNormalizer


def _cmd_map(args) -> int:
    codes = ForwardMapper.map(args.kind, args.value_type)
    print(f"class={codes.class_code.name} ({int(codes.class_code)}) "
          f"type={codes.data_type_code.name} ({int(codes.data_type_code)})")
    return 0


def _cmd_classify(args) -> int:
    header = {
        "dims": args.dims,
        "rank": args.rank,
        "class_code": args.class_code,
        "data_type_code": args.type_code,
    }
    record = RecordNormalizer().normalize(header)
    result = MetadataClassifier.classify(record)
    print(f"kind={result.kind.value} value_type={result.value_type.value}")
    return 0


def _cmd_table(args) -> int:
    print(f"{'value_type':<12} {'class':<10} {'type':<10}")
    for value_type, codes in SCALAR_CODES.items():
        print(f"{value_type.value:<12} {codes.class_code.name:<10} {codes.data_type_code.name:<10}")
    return 0


def _cmd_catalog(args) -> int:
    with open(args.file, 'r') as f:
        headers = json.load(f)
    if not isinstance(headers, list):
        raise ValueError("Catalog file must contain a JSON list of headers")

    catalog = VariableCatalog()
    catalog.add_batch(headers)

    for name, entry in catalog.get_entries().items():
        c = entry.classification
        print(f"{name:<20} {c.kind.value:<24} {c.value_type.value}")

    summary = catalog.get_summary()
    print(f"\n{summary['total']} variables, {len(summary['unsupported'])} unsupported")

    if args.save:
        catalog.save()
        print(f"Catalog saved to {catalog.config.metadata_dir}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="matclass", description="MAT-file type classification")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_map = subparsers.add_parser("map", help="raw codes for a variable kind and value type")
    p_map.add_argument("kind", choices=[k.value for k in VariableKind])
    p_map.add_argument("value_type", choices=[v.value for v in ValueType])
    p_map.set_defaults(func=_cmd_map)

    p_classify = subparsers.add_parser("classify", help="classify one header")
    p_classify.add_argument("--dims", nargs="+", type=int, required=True)
    p_classify.add_argument("--rank", type=int, default=None)
    p_classify.add_argument("--class-code", required=True)
    p_classify.add_argument("--type-code", required=True)
    p_classify.set_defaults(func=_cmd_classify)

    p_table = subparsers.add_parser("table", help="print the scalar code table")
    p_table.set_defaults(func=_cmd_table)

    p_catalog = subparsers.add_parser("catalog", help="classify a JSON list of headers")
    p_catalog.add_argument("file")
    p_catalog.add_argument("--save", action="store_true")
    p_catalog.set_defaults(func=_cmd_catalog)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    config = get_config()
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except (MatClassError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
