import pytest
import os
import sys
sys.path.append('.')
import burn_severity as bs
import geopandas as gpd
import numpy as np
from matplotlib.colors import to_hex
from shapely.geometry import MultiPolygon, Point, Polygon, box


def make_stats():
    return [bs.ClassStat(i, bs.CLASS_NAMES[i], pixels=i, hectares=i * 0.09, percentage=i / 28 * 100)
            for i in range(8)]


# --- Report Builder ---

def test_report_layout():
    report = bs.build_report(make_stats())

    assert report.index.name == 'system:index'
    assert list(report.columns) == ['Class', 'Hectares', 'Pixels', 'Percentage']
    assert report.index.tolist() == list(range(8))
    assert report['Class'].tolist() == list(bs.CLASS_NAMES)


def test_report_keeps_class_order():
    report = bs.build_report(list(reversed(make_stats())))

    assert report['Pixels'].tolist() == list(range(8))
    assert report.loc[1, 'Class'] == 'High Severity'


def test_report_csv_header(tmp_path):
    path = os.path.join(tmp_path, "BurnedAreaStats.csv")
    bs.build_report(make_stats()).to_csv(path)

    with open(path) as f:
        header = f.readline().strip()

    assert header == 'system:index,Class,Hectares,Pixels,Percentage'


def test_report_rejects_incomplete_stats():
    with pytest.raises(ValueError):
        bs.build_report(make_stats()[:7])
    with pytest.raises(ValueError):
        bs.build_report(make_stats()[:7] + make_stats()[:1])


# --- Regions ---

def test_region_from_rings():
    """Rectangle given as polygon rings, as in ee.Geometry.Polygon."""
    rings = [[[30.02, -4.07], [30.18, -4.07], [30.18, -3.97], [30.02, -3.97], [30.02, -4.07]]]

    region = bs.to_region(rings)

    assert isinstance(region, Polygon)
    assert region.bounds == pytest.approx((30.02, -4.07, 30.18, -3.97))


def test_region_from_geojson():
    region = bs.to_region({'type': 'Polygon', 'coordinates': [[[0, 0], [1, 0], [1, 1], [0, 0]]]})

    assert region.area == pytest.approx(0.5)


def test_region_from_geodataframe_is_reprojected_and_dissolved():
    gdf = gpd.GeoDataFrame(geometry=[box(0, 0, 1, 1), box(2, 0, 3, 1)], crs="EPSG:4326")

    region = bs.to_region(gdf, crs="EPSG:3857")

    assert isinstance(region, MultiPolygon)
    assert region.bounds[2] == pytest.approx(333958.47, rel=1e-6)


def test_region_from_file(tmp_path):
    path = os.path.join(tmp_path, "aoi.geojson")
    gpd.GeoDataFrame(geometry=[box(0, 0, 60, 60)], crs="EPSG:32633").to_file(path, driver="GeoJSON")

    region = bs.to_region(path, crs="EPSG:32633")

    assert region.equals(box(0, 0, 60, 60))


def test_region_rejects_non_polygons():
    with pytest.raises(ValueError):
        bs.to_region(Point(0, 0))
    with pytest.raises(ValueError):
        bs.to_region(Polygon())


# --- Legend and config ---

def test_legend_display_order():
    entries = bs.legend_entries()

    assert [name for _, name, _ in entries] == [
        'Enhanced Regrowth, High', 'Enhanced Regrowth, Low', 'Unburned', 'Low Severity',
        'Moderate-low Severity', 'Moderate-high Severity', 'High Severity', 'NA']
    assert entries[-1] == (0, 'NA', '#ffffff')


def test_colormap_indexed_by_class():
    cmap, norm = bs.severity_colormap()

    assert cmap.N == 8
    assert to_hex(cmap(norm(1))) == '#a41fd6'
    assert to_hex(cmap(norm(7))) == '#7a8737'
    assert norm(np.array([0.0, 7.0])).tolist() == [0, 7]


def test_platform_info():
    assert bs.platform_info('s2')['bands'] == ('B8', 'B12')
    assert bs.platform_info('L8')['resolution'] == 30
    with pytest.raises(ValueError):
        bs.platform_info('MODIS')


def test_errors_are_value_errors():
    for error in (bs.ShapeMismatchError, bs.InvalidThresholdTableError,
                  bs.NoValidPixelsError, bs.RegionTooLargeError):
        assert issubclass(error, bs.BurnSeverityError)
        assert issubclass(error, ValueError)
