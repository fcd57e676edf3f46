from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, Sequence

from src.obscore.columns import ColumnDescriptor
from src.utils.logger import logger

ParsedCallback = Callable[[Sequence[ColumnDescriptor], Sequence[Any]], None]


class TableParser(Protocol):
    """
    Collaborator that fetches and parses a tabular resource (e.g. a DataLink VOTable).

    It may work asynchronously; once done it calls `callback(fields, rows)`.
    Retrieval and parse errors are its own business.
    """

    def __call__(self, locator: str, callback: ParsedCallback) -> None:  # pragma: no cover - interface
        ...


def log_parsed_fields(fields: Sequence[ColumnDescriptor], rows: Sequence[Any]) -> None:
    names = [f.label for f in fields]
    logger.info(f"Access URL resolved to {len(names)} fields, {len(rows)} rows: {names}")


def click_on_access_url_action(
    access_url: str,
    parser: TableParser,
    on_parsed: Optional[ParsedCallback] = None,
) -> None:
    """Hand the value of an `access_url` cell to the tabular parser."""
    if not access_url or not access_url.strip():
        raise ValueError("access_url must be a non-empty locator")
    callback = on_parsed or log_parsed_fields
    logger.debug(f"Following access URL {access_url}")
    parser(access_url.strip(), callback)
