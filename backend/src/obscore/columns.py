from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

import polars as pl


@dataclass(frozen=True)
class ColumnDescriptor:
    """Metadata of one observed table column (a VOTable FIELD, a DataFrame column, ...).

    All attributes are optional. ``unit`` and ``datatype`` are carried for
    downstream consumers and play no part in field resolution.
    """

    id: Optional[str] = None
    name: Optional[str] = None
    ucd: Optional[str] = None
    utype: Optional[str] = None
    unit: Optional[str] = None
    datatype: Optional[str] = None

    @property
    def label(self) -> Optional[str]:
        return self.name if self.name else self.id

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ColumnDescriptor":
        """Build from a FIELD-like attribute dict. VOTable spells the identifier ``ID``."""
        def _get(*keys: str) -> Optional[str]:
            for k in keys:
                v = data.get(k)
                if v is not None:
                    return str(v)
            return None

        return cls(
            id=_get("ID", "id"),
            name=_get("name"),
            ucd=_get("ucd"),
            utype=_get("utype"),
            unit=_get("unit"),
            datatype=_get("datatype"),
        )


ColumnsInput = Union[pl.DataFrame, Sequence[Union[ColumnDescriptor, Mapping[str, Any]]]]


def columns_from_dicts(items: Iterable[Mapping[str, Any]]) -> List[ColumnDescriptor]:
    return [ColumnDescriptor.from_dict(item) for item in items]


def columns_from_frame(df: pl.DataFrame) -> List[ColumnDescriptor]:
    # A DataFrame only knows names and dtypes; UCD/utype stay empty.
    return [ColumnDescriptor(name=name, datatype=str(dtype)) for name, dtype in df.schema.items()]


def as_columns(columns: ColumnsInput) -> List[ColumnDescriptor]:
    """Coerce a DataFrame, descriptors or attribute dicts to a list of descriptors."""
    if isinstance(columns, pl.DataFrame):
        return columns_from_frame(columns)
    out: List[ColumnDescriptor] = []
    for c in columns:
        if isinstance(c, ColumnDescriptor):
            out.append(c)
        elif isinstance(c, Mapping):
            out.append(ColumnDescriptor.from_dict(c))
        else:
            raise TypeError(f"Unsupported column descriptor: {type(c).__name__}")
    return out
