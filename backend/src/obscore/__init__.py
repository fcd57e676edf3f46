"""
ObsCore field mapping package.

Core entrypoints:
- ObscoreFieldMapper: locates the critical ObsCore fields among observed table columns
- parse_fields: convenience function wrapping ObscoreFieldMapper.map_fields
- find_mandatory_field: single-field resolution (index/name, UCD, utype)

Usage example:

```
from src.obscore import parse_fields

fields = [
    {"name": "RA", "ucd": "pos.eq.ra"},
    {"name": "Dec", "ucd": "pos.eq.dec"},
    {"name": "region", "ucd": "pos.outline;obs.field"},
    {"name": "url", "ucd": "meta.ref.url"},
]
result = parse_fields(fields)
print(result["s_ra"])  # ResolvedField(name='RA', idx=0)
```
"""
from .access import TableParser, click_on_access_url_action
from .catalog import CRITICAL_FIELDS, MANDATORY_FIELDS, OBSCORE_COLOR, FieldSpec, get_field
from .columns import ColumnDescriptor, columns_from_dicts, columns_from_frame
from .mapper import ObscoreFieldMapper, ResolvedField, parse_fields
from .resolver import MandatoryFieldNotFound, find_mandatory_field

__all__ = [
    "CRITICAL_FIELDS",
    "MANDATORY_FIELDS",
    "OBSCORE_COLOR",
    "ColumnDescriptor",
    "FieldSpec",
    "MandatoryFieldNotFound",
    "ObscoreFieldMapper",
    "ResolvedField",
    "TableParser",
    "click_on_access_url_action",
    "columns_from_dicts",
    "columns_from_frame",
    "find_mandatory_field",
    "get_field",
    "parse_fields",
]
