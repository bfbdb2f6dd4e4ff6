from unittest.mock import MagicMock

from orphanage_form.map.headless_renderer import HeadlessMapRenderer
from orphanage_form.map.models import Location
from orphanage_form.map.position_selector import PositionSelector
from orphanage_form.storage.json_file_store import LATITUDE_KEY, LONGITUDE_KEY


class TestLocation:
    def test_origin_is_unset(self) -> None:
        assert Location().is_set is False

    def test_zero_latitude_is_unset(self) -> None:
        assert Location(latitude=0.0, longitude=5.0).is_set is False

    def test_zero_longitude_is_unset(self) -> None:
        assert Location(latitude=5.0, longitude=0.0).is_set is False

    def test_both_non_zero_is_set(self) -> None:
        assert Location(latitude=-3.7, longitude=-38.5).is_set is True


class TestPositionSelector:
    def test_starts_unset(self) -> None:
        selector = PositionSelector()
        assert selector.selected == Location()
        assert selector.is_set is False

    def test_click_on_renderer_updates_selection(self) -> None:
        renderer = HeadlessMapRenderer()
        selector = PositionSelector(renderer=renderer)
        renderer.click(-3.7, -38.5)
        assert selector.selected == Location(latitude=-3.7, longitude=-38.5)
        assert renderer.marker == selector.selected

    def test_latest_click_replaces_previous(self) -> None:
        renderer = HeadlessMapRenderer()
        selector = PositionSelector(renderer=renderer)
        renderer.click(1.0, 2.0)
        renderer.click(3.0, 4.0)
        assert selector.selected == Location(latitude=3.0, longitude=4.0)
        assert renderer.marker == Location(latitude=3.0, longitude=4.0)

    def test_selection_is_mirrored_into_cache(self) -> None:
        cache = MagicMock()
        selector = PositionSelector(cache=cache)
        selector.select(Location(latitude=1.5, longitude=2.5))
        cache.set.assert_any_call(LATITUDE_KEY, "1.5")
        cache.set.assert_any_call(LONGITUDE_KEY, "2.5")

    def test_reset_clears_selection(self) -> None:
        selector = PositionSelector()
        selector.select(Location(latitude=1.0, longitude=2.0))
        selector.reset()
        assert selector.selected == Location()
        assert selector.is_set is False
