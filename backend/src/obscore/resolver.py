from __future__ import annotations

from typing import Optional, Sequence, Union

from src.obscore.columns import ColumnDescriptor
from src.obscore.normalize import normalize_tag, ucd_encodings
from src.utils.logger import logger

Hint = Union[int, str, None]


class MandatoryFieldNotFound(LookupError):
    """No column matched a required field by index, ID/name, UCD or utype."""

    def __init__(
        self,
        hint: Hint = None,
        ucd: Optional[str] = None,
        utype: Optional[str] = None,
        field: Optional[str] = None,
    ) -> None:
        self.hint = hint
        self.ucd = ucd
        self.utype = utype
        self.field = field
        super().__init__(f"Mandatory field {self.identifier} not found")

    @property
    def identifier(self) -> Hint:
        for candidate in (self.hint, self.field, self.ucd, self.utype):
            if candidate is not None and candidate != "":
                return candidate
        return None


def _is_index(hint: Hint) -> bool:
    return isinstance(hint, int) and not isinstance(hint, bool)


def find_mandatory_field(
    columns: Sequence[ColumnDescriptor],
    hint: Hint = None,
    ucd: Optional[str] = None,
    utype: Optional[str] = None,
    field: Optional[str] = None,
) -> int:
    """Find the position of the column playing a given role.

    Tiers are tried in order and the first one to match wins:

    1. ``hint`` as an index into ``columns``
    2. ``hint`` equal to a column ``id`` or ``name`` (case-sensitive)
    3. column UCD starting with ``ucd`` or its legacy ``_`` encoding
    4. column utype equal to ``utype`` (case-insensitive)

    ``field`` only labels the error raised when nothing matches.
    """
    if _is_index(hint) and 0 <= hint < len(columns):
        return hint

    # ID or name given
    if isinstance(hint, str) and hint:
        for idx, col in enumerate(columns):
            if (col.id and col.id == hint) or (col.name and col.name == hint):
                logger.debug(f"{field or hint}: matched column {idx} by identity")
                return idx

    # Guess from UCDs; qualifiers after the prefix are ignored
    prefixes = ucd_encodings(ucd)
    if prefixes:
        for idx, col in enumerate(columns):
            if not col.ucd:
                continue
            col_ucd = normalize_tag(col.ucd)
            if any(col_ucd.startswith(p) for p in prefixes):
                logger.debug(f"{field or ucd}: matched column {idx} by ucd '{col.ucd}'")
                return idx

    # Last resort: exact utype
    wanted = normalize_tag(utype)
    if wanted:
        for idx, col in enumerate(columns):
            if col.utype and normalize_tag(col.utype) == wanted:
                logger.debug(f"{field or utype}: matched column {idx} by utype '{col.utype}'")
                return idx

    raise MandatoryFieldNotFound(hint=hint, ucd=ucd, utype=utype, field=field)
