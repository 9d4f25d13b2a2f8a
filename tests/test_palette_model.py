"""Tests for PaletteModel ordering and mutation rules."""

from unittest.mock import Mock

import pytest

from swatchbook.models import InsertPosition, PaletteEntry
from swatchbook.protocols import PaletteEvent
from swatchbook.services import PaletteModel


def keys(model: PaletteModel) -> list[str]:
    return [entry.key for entry in model.snapshot()]


@pytest.fixture
def model(rgb_entries):
    """Palette holding red, green, blue in that order."""
    return PaletteModel(rgb_entries)


@pytest.fixture
def observer(model):
    """Mock observer registered on the model."""
    observer = Mock()
    model.register_observer(observer)
    return observer


@pytest.mark.unit
class TestQueries:
    """Test read-only access."""

    def test_initial_order_preserved(self, model):
        assert keys(model) == ["#ff0000", "#00ff00", "#0000ff"]
        assert len(model) == 3

    def test_lookup(self, model):
        assert model.contains("#00ff00")
        assert model.index_of("#0000ff") == 2
        assert model.get("#ff0000").hex_color == "#ff0000"
        assert model.get("#123456") is None
        assert model.index_of("#123456") is None

    def test_last_key(self, model):
        assert model.last_key() == "#0000ff"
        assert PaletteModel().last_key() is None

    def test_duplicate_initial_entries_dropped(self):
        """Test that the first entry wins when initial entries share a key."""
        model = PaletteModel([PaletteEntry.create("#ff0000"), PaletteEntry.create("#FF0000")])
        assert keys(model) == ["#ff0000"]


@pytest.mark.unit
class TestMergeInsert:
    """Test merge_insert."""

    def test_inserts_at_front_by_default(self, model):
        assert model.merge_insert(PaletteEntry.create("#ffffff")) is True
        assert keys(model) == ["#ffffff", "#ff0000", "#00ff00", "#0000ff"]

    def test_inserts_at_end(self, model):
        assert model.merge_insert(PaletteEntry.create("#ffffff"), InsertPosition.END) is True
        assert keys(model)[-1] == "#ffffff"

    def test_existing_key_is_noop(self, model, observer):
        """Test that inserting a present key never grows the palette."""
        assert model.merge_insert(PaletteEntry.create("#00ff00")) is False
        assert len(model) == 3
        assert keys(model) == ["#ff0000", "#00ff00", "#0000ff"]
        observer.on_palette_event.assert_not_called()

    def test_same_hex_with_name_is_new_entry(self, model):
        assert model.merge_insert(PaletteEntry.create("#00ff00", "Lime")) is True
        assert keys(model)[0] == "#00ff00_Lime"
        assert len(model) == 4

    def test_insert_into_empty_palette(self):
        model = PaletteModel()
        assert model.merge_insert(PaletteEntry.create("#00ff00")) is True
        assert keys(model) == ["#00ff00"]

    def test_emits_added_with_snapshot(self, model, observer):
        model.merge_insert(PaletteEntry.create("#ffffff"))

        observer.on_palette_event.assert_called_once()
        event, entries = observer.on_palette_event.call_args.args
        assert event is PaletteEvent.ENTRY_ADDED
        assert [entry.key for entry in entries] == keys(model)


@pytest.mark.unit
class TestRemove:
    """Test remove."""

    def test_removes_and_keeps_order(self, model, observer):
        assert model.remove("#00ff00") is True
        assert keys(model) == ["#ff0000", "#0000ff"]
        assert observer.on_palette_event.call_args.args[0] is PaletteEvent.ENTRY_REMOVED

    def test_unknown_key_is_noop(self, model, observer):
        assert model.remove("#123456") is False
        assert len(model) == 3
        observer.on_palette_event.assert_not_called()


@pytest.mark.unit
class TestMoveToIndex:
    """Test move_to_index."""

    def test_move_forward_to_last(self, model):
        """Test that the moved entry lands where the destination was."""
        assert model.move_to_index("#ff0000", "#0000ff") is True
        assert keys(model) == ["#00ff00", "#0000ff", "#ff0000"]

    def test_move_backward_to_first(self, model):
        assert model.move_to_index("#0000ff", "#ff0000") is True
        assert keys(model) == ["#0000ff", "#ff0000", "#00ff00"]

    def test_move_to_neighbor_swaps(self, model):
        assert model.move_to_index("#ff0000", "#00ff00") is True
        assert keys(model) == ["#00ff00", "#ff0000", "#0000ff"]

    def test_move_onto_itself_is_noop(self, model, observer):
        assert model.move_to_index("#00ff00", "#00ff00") is False
        assert keys(model) == ["#ff0000", "#00ff00", "#0000ff"]
        observer.on_palette_event.assert_not_called()

    @pytest.mark.parametrize(
        "source, destination",
        [("#123456", "#ff0000"), ("#ff0000", "#123456"), ("#123456", "#654321")],
    )
    def test_unknown_keys_are_noop(self, model, observer, source, destination):
        assert model.move_to_index(source, destination) is False
        assert keys(model) == ["#ff0000", "#00ff00", "#0000ff"]
        observer.on_palette_event.assert_not_called()

    def test_move_keeps_same_entries(self, model):
        """Test that a move is a permutation of the palette."""
        before = set(model.snapshot())
        model.move_to_index("#00ff00", "#ff0000")

        assert set(model.snapshot()) == before
        assert len(model) == 3

    def test_emits_moved(self, model, observer):
        model.move_to_index("#ff0000", "#0000ff")
        assert observer.on_palette_event.call_args.args[0] is PaletteEvent.ENTRY_MOVED


@pytest.mark.unit
class TestReplaceAll:
    """Test replace_all."""

    def test_replaces_and_emits_loaded(self, model, observer):
        model.replace_all([PaletteEntry.create("#111111"), PaletteEntry.create("#111111")])

        assert keys(model) == ["#111111"]
        assert observer.on_palette_event.call_args.args[0] is PaletteEvent.PALETTE_LOADED

    def test_unregistered_observer_not_notified(self, model, observer):
        model.unregister_observer(observer)
        model.merge_insert(PaletteEntry.create("#ffffff"))
        observer.on_palette_event.assert_not_called()

    def test_failing_observer_does_not_block_others(self, model):
        """Test that an observer raising an exception does not stop notification."""
        broken = Mock()
        broken.on_palette_event.side_effect = RuntimeError("boom")
        healthy = Mock()
        model.register_observer(broken)
        model.register_observer(healthy)

        assert model.merge_insert(PaletteEntry.create("#ffffff")) is True
        healthy.on_palette_event.assert_called_once()
