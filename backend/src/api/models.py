from __future__ import annotations
from typing import Dict, List, Optional, Union
from pydantic import BaseModel, Field, StrictInt, model_validator


class ColumnModel(BaseModel):
    id: Optional[str] = Field(default=None, alias="ID")
    name: Optional[str] = None
    ucd: Optional[str] = None
    utype: Optional[str] = None
    unit: Optional[str] = None
    datatype: Optional[str] = None

    model_config = {"populate_by_name": True}


class FieldSpecModel(BaseModel):
    name: str
    ucd: Optional[str] = None
    utype: Optional[str] = None
    unit: Optional[str] = None


class FieldCatalog(BaseModel):
    fields: List[FieldSpecModel] = Field(default_factory=list)
    critical: List[str] = Field(default_factory=list)


class ResolveRequest(BaseModel):
    columns: List[ColumnModel]
    hint: Optional[Union[StrictInt, str]] = None
    ucd: Optional[str] = None
    utype: Optional[str] = None
    field: Optional[str] = None

    @model_validator(mode="after")
    def _needs_a_target(self) -> "ResolveRequest":
        if self.hint is None and not self.ucd and not self.utype and not self.field:
            raise ValueError("Provide a hint, a ucd, a utype or a catalog field name")
        return self


class ResolvedFieldModel(BaseModel):
    name: Optional[str]
    idx: int


class MapRequest(BaseModel):
    columns: List[ColumnModel]
    hints: Dict[str, Union[StrictInt, str]] = Field(default_factory=dict)


class MapResponse(BaseModel):
    fields: Dict[str, ResolvedFieldModel]
