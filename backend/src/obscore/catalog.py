from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class FieldSpec:
    name: str
    ucd: Optional[str]
    utype: Optional[str]
    unit: Optional[str] = None


_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("dataproduct_type", "meta.id", "ObsDataset.dataProductType"),
    FieldSpec("calib_level", "meta.code;obs.calib", "ObsDataset.calibLevel"),
    FieldSpec("obs_collection", "meta.id", "DataID.collection"),
    FieldSpec("obs_id", "meta.id", "DataID.observationID"),
    FieldSpec("obs_publisher_did", "meta.ref.uri;meta.curation", "Curation.publisherDID"),
    FieldSpec("access_url", "meta.ref.url", "Access.reference"),
    FieldSpec("access_format", "meta.code.mime", "Access.format"),
    FieldSpec("access_estsize", "phys.size;meta.file", "Access.size", "kbyte"),
    FieldSpec("target_name", "meta.id;src", "Target.name"),
    FieldSpec("s_ra", "pos.eq.ra", "Char.SpatialAxis.Coverage.Location.Coord.Position2D.Value2.C1", "deg"),
    FieldSpec("s_dec", "pos.eq.dec", "Char.SpatialAxis.Coverage.Location.Coord.Position2D.Value2.C2", "deg"),
    FieldSpec("s_fov", "phys.angSize;instr.fov", "Char.SpatialAxis.Coverage.Bounds.Extent.diameter", "deg"),
    FieldSpec("s_region", "pos.outline;obs.field", "Char.SpatialAxis.Coverage.Support.Area"),
    FieldSpec("s_resolution", "pos.angResolution", "Char.SpatialAxis.Resolution.Refval.value", "arcsec"),
    FieldSpec("s_xel1", "meta.number", "Char.SpatialAxis.numBins1"),
    FieldSpec("s_xel2", "meta.number", "Char.SpatialAxis.numBins2"),
    # Time axis
    FieldSpec("t_min", "time.start;obs.exposure", "Char.TimeAxis.Coverage.Bounds.Limits.StartTime", "d"),
    FieldSpec("t_max", "time.end;obs.exposure", "Char.TimeAxis.Coverage.Bounds.Limits.StopTime", "d"),
    FieldSpec("t_exptime", "time.duration;obs.exposure", "Char.TimeAxis.Coverage.Support.Extent", "s"),
    FieldSpec("t_resolution", "time.resolution", "Char.TimeAxis.Resolution.Refval.value", "s"),
    FieldSpec("t_xel", "meta.number", "Char.TimeAxis.numBins"),
    # Spectral axis
    FieldSpec("em_min", "em.wl;stat.min", "Char.SpectralAxis.Coverage.Bounds.Limits.LoLimit", "m"),
    FieldSpec("em_max", "em.wl;stat.max", "Char.SpectralAxis.Coverage.Bounds.Limits.HiLimit", "m"),
    FieldSpec("em_res_power", "spect.resolution", "Char.SpectralAxis.Resolution.ResolPower.refVal"),
    FieldSpec("em_xel", "meta.number", "Char.SpectralAxis.numBins"),
    # Observable, polarization, provenance
    FieldSpec("o_ucd", "meta.ucd", "Char.ObservableAxis.ucd"),
    FieldSpec("pol_states", "meta.code;phys.polarization", "Char.PolarizationAxis.stateList"),
    FieldSpec("pol_xel", "meta.number", "Char.PolarizationAxis.numBins"),
    FieldSpec("facility_name", "meta.id;instr.tel", "Provenance.ObsConfig.Facility.name"),
    FieldSpec("instrument_name", "meta.id;instr", "Provenance.ObsConfig.Instrument.name"),
)

MANDATORY_FIELDS: Mapping[str, FieldSpec] = MappingProxyType({f.name: f for f in _FIELDS})

# Resolved eagerly by the mapper; they rename whichever column they land on.
CRITICAL_FIELDS: Tuple[str, ...] = ("s_ra", "s_dec", "s_region", "access_url")

# Default footprint colour for ObsCore tables.
OBSCORE_COLOR = "#004500"


def get_field(name: str) -> FieldSpec:
    return MANDATORY_FIELDS[name]


def field_names() -> Tuple[str, ...]:
    return tuple(MANDATORY_FIELDS)
