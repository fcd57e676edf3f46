#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

# Ensure local src is importable when running as a script
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.obscore import CRITICAL_FIELDS, MandatoryFieldNotFound, columns_from_dicts, parse_fields
from src.utils.logger import logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Locate the critical ObsCore fields (s_ra, s_dec, s_region, access_url) in a table's column metadata.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    ap.add_argument("columns_file", help="JSON/YAML file: list of FIELD dicts (ID, name, ucd, utype) or {'fields': [...]}")
    ap.add_argument(
        "--hint",
        action="append",
        default=[],
        metavar="FIELD=VALUE",
        help="Explicit column index or ID/name for a critical field, e.g. s_ra=RAJ2000 (repeatable)",
    )
    ap.add_argument("--output", type=str, default="", help="Write the resolved map as JSON to this path")
    ap.add_argument("--verbose", action="store_true", help="Print every mapped column")
    return ap.parse_args(argv)


def load_json_or_yaml(path: str) -> Any:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)
    with p.open("r", encoding="utf-8") as f:
        if p.suffix.lower() in {".yml", ".yaml"}:
            return yaml.safe_load(f)
        return json.load(f)


def load_columns(path: str) -> List[Dict[str, Any]]:
    obj = load_json_or_yaml(path)
    if isinstance(obj, dict) and isinstance(obj.get("fields"), list):
        obj = obj["fields"]
    if not isinstance(obj, list) or not all(isinstance(c, dict) for c in obj):
        raise ValueError("columns file must hold a list of column dicts or {'fields': [...]}")
    return obj


def parse_hints(raw: List[str]) -> Dict[str, Union[int, str]]:
    hints: Dict[str, Union[int, str]] = {}
    for item in raw:
        key, sep, value = item.partition("=")
        key, value = key.strip(), value.strip()
        if not sep or not key or not value:
            raise ValueError(f"Hint must look like FIELD=VALUE: {item!r}")
        if key not in CRITICAL_FIELDS:
            raise ValueError(f"Hints apply to {', '.join(CRITICAL_FIELDS)} only, got {key!r}")
        hints[key] = int(value) if value.isdigit() else value
    return hints


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        columns = columns_from_dicts(load_columns(args.columns_file))
        hints = parse_hints(args.hint)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Invalid input: {e}")
        return 1

    try:
        parsed = parse_fields(columns, hints=hints)
    except MandatoryFieldNotFound as e:
        logger.error(str(e))
        return 1

    result = {key: f.to_dict() for key, f in parsed.items() if key is not None}
    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(result, indent=2), encoding="utf-8")

    print(f"Columns: {len(columns)}")
    for name in CRITICAL_FIELDS:
        f = parsed.get(name)
        # two critical fields may land on the same column; only the first keeps it
        if f is not None:
            print(f"  {name} -> {f.name} (idx={f.idx})")
    if args.verbose:
        for key, f in result.items():
            if key not in CRITICAL_FIELDS:
                print(f"  {key} (idx={f['idx']})")
    if args.output:
        print(f"Map: {args.output}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
