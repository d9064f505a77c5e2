import pytest

from beamload.errors import BeamNotFoundError
from beamload.model import BEAM_CATALOG, BeamCatalog, load_catalog


def test_builtin_catalog_is_consistent():
    ids = [beam.id for beam in BEAM_CATALOG]

    assert len(ids) == len(set(ids))
    for beam in BEAM_CATALOG:
        assert beam.width > 0
        assert beam.height > 0
        assert beam.weight_12m > 0


def test_lookup(catalog):
    assert catalog.get("b12").width == 12.0
    assert "b12" in catalog
    assert "nope" not in catalog
    assert len(catalog) == 4


def test_lookup_miss_raises(catalog):
    with pytest.raises(BeamNotFoundError):
        catalog.get("nope")


def test_load_catalog_defaults_to_builtin():
    assert len(load_catalog(None)) == len(BEAM_CATALOG)


def test_load_catalog_from_csv(tmp_path):
    path = tmp_path / "beams.csv"
    path.write_text(
        "id,gauge,width,height,weight_12m\n"
        "x1,X 1,10.5,20,100\n"
        "x2,X 2,11,21.5,130.5\n"
    )

    catalog = load_catalog(str(path))

    assert len(catalog) == 2
    beam = catalog.get("x2")
    assert beam.gauge == "X 2"
    assert beam.height == 21.5
    assert beam.weight_12m == 130.5


def test_catalog_row_with_missing_value(tmp_path):
    path = tmp_path / "beams.csv"
    path.write_text("id,gauge,width,height,weight_12m\nx1,X 1,10,,100\n")

    with pytest.raises(ValueError):
        BeamCatalog.from_file(str(path))


def test_catalog_file_type_is_checked(tmp_path):
    with pytest.raises(ValueError):
        BeamCatalog.from_file(str(tmp_path / "beams.txt"))
