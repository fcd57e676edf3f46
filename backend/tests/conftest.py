import pytest
import polars as pl

from src.obscore import ColumnDescriptor


@pytest.fixture
def obscore_columns():
    """The four critical ObsCore columns, identified by UCD only."""
    return [
        ColumnDescriptor(name="RA", ucd="pos.eq.ra"),
        ColumnDescriptor(name="Dec", ucd="pos.eq.dec"),
        ColumnDescriptor(name="region", ucd="pos.outline;obs.field"),
        ColumnDescriptor(name="url", ucd="meta.ref.url"),
    ]


@pytest.fixture
def obscore_frame():
    """Returns a Polars DataFrame whose column names are the canonical ObsCore names."""
    return pl.DataFrame({
        "obs_id": ["a", "b"],
        "s_ra": [10.5, 12.0],
        "s_dec": [-5.0, 41.2],
        "s_region": ["POLYGON 1 2 3 4 5 6", "CIRCLE 12 41 0.1"],
        "access_url": ["http://example.org/a", "http://example.org/b"],
    })
