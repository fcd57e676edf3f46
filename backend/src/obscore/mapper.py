from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

from src.obscore.catalog import CRITICAL_FIELDS, MANDATORY_FIELDS, FieldSpec
from src.obscore.columns import ColumnsInput, as_columns
from src.obscore.resolver import Hint, find_mandatory_field
from src.utils.logger import logger


@dataclass(frozen=True)
class ResolvedField:
    name: Optional[str]
    idx: int

    @property
    def observed_label(self) -> Optional[str]:
        return self.name

    @property
    def position(self) -> int:
        return self.idx

    def to_dict(self) -> Dict[str, object]:
        return {"name": self.name, "idx": self.idx}


ResolvedFieldMap = Dict[str, ResolvedField]


class ObscoreFieldMapper:
    """
    Map the columns of an ObsCore table to canonical field names.

    The critical fields are located first (index/name hint, then UCD prefix,
    then exact utype). The column each one lands on is keyed by the canonical
    name; every other column is keyed by its own label.

    Parameters
    ----------
    catalog: canonical field definitions, keyed by name.
    critical_fields: names resolved eagerly; each must exist in `catalog`.
    """

    def __init__(
        self,
        catalog: Mapping[str, FieldSpec] = MANDATORY_FIELDS,
        critical_fields: Sequence[str] = CRITICAL_FIELDS,
    ) -> None:
        missing = [name for name in critical_fields if name not in catalog]
        if missing:
            raise KeyError(f"Critical fields missing from catalog: {missing}")
        self.catalog = catalog
        self.critical_fields: List[str] = list(critical_fields)

    def resolve_critical(
        self,
        columns: ColumnsInput,
        hints: Optional[Mapping[str, Hint]] = None,
    ) -> Dict[str, int]:
        """Position of each critical field. Raises MandatoryFieldNotFound on the first miss.

        Hints keyed by anything other than a critical field raise ValueError.
        """
        cols = as_columns(columns)
        hints = hints or {}
        unknown = [k for k in hints if k not in self.critical_fields]
        if unknown:
            raise ValueError(f"Hints given for non-critical fields: {unknown}")
        positions: Dict[str, int] = {}
        for name in self.critical_fields:
            spec = self.catalog[name]
            positions[name] = find_mandatory_field(
                cols, hints.get(name), spec.ucd, spec.utype, field=name
            )
        return positions

    def map_fields(
        self,
        columns: ColumnsInput,
        hints: Optional[Mapping[str, Hint]] = None,
    ) -> ResolvedFieldMap:
        """
        Compute the canonical-name -> observed-column map.

        Keys of the result are the critical field names for the columns they
        resolved to and the observed label (name, else ID) for every other
        column. Duplicate keys keep the last column seen.
        """
        cols = as_columns(columns)
        positions = self.resolve_critical(cols, hints)
        # first critical field wins when two resolve to the same column
        by_idx: Dict[int, str] = {}
        for name, idx in positions.items():
            by_idx.setdefault(idx, name)

        parsed: ResolvedFieldMap = {}
        for idx, col in enumerate(cols):
            label = col.label
            key = by_idx.get(idx, label)
            parsed[key] = ResolvedField(name=label, idx=idx)

        logger.info(
            f"Mapped {len(cols)} columns to {len(parsed)} keys: "
            + ", ".join(f"{n}={i}" for n, i in positions.items())
        )
        return parsed


def parse_fields(
    columns: ColumnsInput,
    hints: Optional[Mapping[str, Hint]] = None,
) -> ResolvedFieldMap:
    """Convenience wrapper around ObscoreFieldMapper.map_fields with the standard catalog."""
    return ObscoreFieldMapper().map_fields(columns, hints=hints)
