"""Tests for the region catalog."""

import pytest

from weatherboard.models.common import Region
from weatherboard.transform.regions import REGION_CATALOG, canonical_order, region_of


class TestRegionOf:
    @pytest.mark.parametrize(
        "name,region",
        [
            ("基隆市", Region.NORTH),
            ("新竹市", Region.NORTH),
            ("臺中市", Region.CENTRAL),
            ("雲林縣", Region.CENTRAL),
            ("嘉義市", Region.SOUTH),
            ("屏東縣", Region.SOUTH),
            ("宜蘭縣", Region.EAST),
            ("臺東縣", Region.EAST),
            ("澎湖縣", Region.OUTLYING),
            ("連江縣", Region.OUTLYING),
        ],
    )
    def test_catalogued(self, name: str, region: Region):
        assert region_of(name) == region

    def test_every_entry_maps_to_its_region(self):
        for name, region in REGION_CATALOG.items():
            assert region_of(name) == region

    @pytest.mark.parametrize("name", ["測試市", "台北市", "", "Taipei"])
    def test_unknown_is_other(self, name: str):
        assert region_of(name) == Region.OTHER


class TestCanonicalOrder:
    def test_matches_catalog_insertion_order(self):
        order = canonical_order()
        assert order == tuple(REGION_CATALOG)
        assert order[0] == "基隆市"
        assert order[-1] == "連江縣"

    def test_size_and_uniqueness(self):
        order = canonical_order()
        assert len(order) == 22
        assert len(set(order)) == len(order)

    def test_regions_are_contiguous(self):
        regions = [REGION_CATALOG[n] for n in canonical_order()]
        assert regions == sorted(
            regions,
            key=[Region.NORTH, Region.CENTRAL, Region.SOUTH, Region.EAST, Region.OUTLYING].index,
        )

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            REGION_CATALOG["測試市"] = Region.NORTH  # type: ignore[index]
