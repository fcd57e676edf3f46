from typing import Optional, Tuple


def normalize_tag(tag: Optional[str]) -> str:
    """Normalize a UCD/utype tag for comparison.

    - strip surrounding whitespace
    - lowercase
    - None becomes the empty string (never matches)
    """
    if not tag:
        return ""
    return tag.strip().lower()


def legacy_ucd(ucd: str) -> str:
    """Return the UCD1-style encoding of a dotted UCD (``pos.eq.ra`` -> ``pos_eq_ra``)."""
    return ucd.replace(".", "_")


def ucd_encodings(ucd: Optional[str]) -> Tuple[str, ...]:
    """Normalized query UCD in its current and legacy encodings, duplicates removed."""
    current = normalize_tag(ucd)
    if not current:
        return ()
    legacy = legacy_ucd(current)
    return (current,) if legacy == current else (current, legacy)
