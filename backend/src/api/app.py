from __future__ import annotations
import time
from dataclasses import asdict
from datetime import datetime, timezone
from typing import List

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.models import (
    ColumnModel,
    FieldCatalog,
    FieldSpecModel,
    MapRequest,
    MapResponse,
    ResolvedFieldModel,
    ResolveRequest,
)
from src.obscore import (
    CRITICAL_FIELDS,
    MANDATORY_FIELDS,
    ColumnDescriptor,
    MandatoryFieldNotFound,
    find_mandatory_field,
    get_field,
    parse_fields,
)
from src.utils.config import get_settings
from src.utils.logger import logger

API_TITLE = "ObsCore Field Mapping API"
settings = get_settings()
API_VERSION = settings.api_version

app = FastAPI(title=API_TITLE, version=API_VERSION, openapi_url="/openapi.json")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request Logging Middleware
@app.middleware("http")
async def log_requests(request, call_next):
    start_time = time.time()
    try:
        response = await call_next(request)
        process_time = (time.time() - start_time) * 1000

        log_data = {
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round(process_time, 2),
        }
        logger.info(f"Request processed: {log_data}")
        return response
    except Exception as e:
        process_time = (time.time() - start_time) * 1000
        logger.error(f"Request failed: {request.method} {request.url.path} - {str(e)} - {process_time:.2f}ms")
        raise


@app.exception_handler(MandatoryFieldNotFound)
async def mandatory_field_handler(request: Request, exc: MandatoryFieldNotFound):
    logger.warning(f"{request.url.path}: {exc}")
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "field": exc.identifier},
    )


# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal Server Error", "error": str(exc)},
    )


def _to_columns(columns: List[ColumnModel]) -> List[ColumnDescriptor]:
    return [ColumnDescriptor(**c.model_dump()) for c in columns]


def _spec_or_404(name: str):
    try:
        return get_field(name)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown ObsCore field: {name}")


@app.get("/api/v1/health")
def health():
    return {
        "status": "ok",
        "time": datetime.now(timezone.utc).isoformat(),
        "version": API_VERSION,
    }


@app.get("/api/v1/obscore/fields", response_model=FieldCatalog)
def list_fields():
    return FieldCatalog(
        fields=[FieldSpecModel(**asdict(spec)) for spec in MANDATORY_FIELDS.values()],
        critical=list(CRITICAL_FIELDS),
    )


@app.get("/api/v1/obscore/fields/{name}", response_model=FieldSpecModel)
def get_field_spec(name: str):
    return FieldSpecModel(**asdict(_spec_or_404(name)))


@app.post("/api/v1/obscore/resolve", response_model=ResolvedFieldModel)
def resolve_field(payload: ResolveRequest):
    ucd, utype = payload.ucd, payload.utype
    if payload.field:
        spec = _spec_or_404(payload.field)
        ucd = ucd or spec.ucd
        utype = utype or spec.utype
    columns = _to_columns(payload.columns)
    idx = find_mandatory_field(columns, payload.hint, ucd, utype, field=payload.field)
    return ResolvedFieldModel(name=columns[idx].label, idx=idx)


@app.post("/api/v1/obscore/map", response_model=MapResponse)
def map_fields(payload: MapRequest):
    unknown = [k for k in payload.hints if k not in CRITICAL_FIELDS]
    if unknown:
        raise HTTPException(status_code=400, detail=f"Hints given for non-critical fields: {unknown}")
    parsed = parse_fields(_to_columns(payload.columns), hints=payload.hints)
    # columns with neither name nor ID have no key to report under
    fields = {
        key: ResolvedFieldModel(name=f.name, idx=f.idx)
        for key, f in parsed.items()
        if key is not None
    }
    return MapResponse(fields=fields)
