"""Tests for PickerSession wiring and hotkeys."""

import pytest

from swatchbook.exceptions import PaletteStoreNotFoundError
from swatchbook.models import AppConfig, EndOfListToken, InsertPosition, Position, StagingToken
from swatchbook.orchestration import PickerSession
from swatchbook.sampling import FrameSampler


@pytest.fixture
def sampler(frame):
    """Sampler with the pointer over the (10, 20, 30) pixel."""
    return FrameSampler(frame, pointer=Position(x=2, y=1), radius=1)


@pytest.fixture
def session(config, memory_store, sampler):
    session = PickerSession(config, store=memory_store, sampler=sampler)
    session.start()
    return session


@pytest.mark.unit
class TestSession:
    """Test session operations."""

    def test_start_with_missing_palette(self, session):
        assert session.sync.is_loaded
        assert session.entries() == ()

    def test_start_fails_when_creation_disabled(self, config, memory_store):
        config = config.model_copy(update={"create_missing_palette": False})
        session = PickerSession(config, store=memory_store)

        with pytest.raises(PaletteStoreNotFoundError):
            session.start()

    def test_add_current_commits_staging(self, session, memory_store):
        session.staging.set_from_hex("#ff8800")
        session.staging.set_name("Orange")

        assert session.add_current() is True
        assert session.add_current() is False
        assert [entry.key for entry in session.entries()] == ["#ff8800_Orange"]
        assert len(memory_store.saves) == 1

    def test_add_current_at_end(self, session):
        session.staging.set_from_hex("#111111")
        session.add_current()
        session.staging.set_from_hex("#222222")
        session.add_current(InsertPosition.END)

        assert [entry.key for entry in session.entries()] == ["#111111", "#222222"]

    def test_remove(self, session):
        session.add_current()
        assert session.remove("#000000") is True
        assert session.remove("#000000") is False

    def test_drag_through_session(self, session):
        session.staging.set_from_hex("#00ff00")
        assert session.drag.drag_end(StagingToken(), EndOfListToken()) is True
        assert [entry.key for entry in session.entries()] == ["#00ff00"]

    def test_default_store_uses_config_path(self, config):
        session = PickerSession(config)
        assert session.store.path == config.palette_path


@pytest.mark.unit
class TestHotkeys:
    """Test sample and refresh keys."""

    @pytest.mark.asyncio
    async def test_ctrl_samples_under_pointer(self, session):
        assert await session.handle_key("Control") is True

        assert session.staging.hex_color == "#0a141e"
        assert session.staging.position == Position(x=2, y=1)
        assert len(session.staging.neighborhood) == 9

    @pytest.mark.asyncio
    async def test_shift_resamples_stored_position(self, session):
        session.staging.set_position(4, 4)

        assert await session.handle_key("shift") is True
        assert session.staging.hex_color == "#ff8800"

    @pytest.mark.asyncio
    async def test_other_keys_ignored(self, session):
        assert await session.handle_key("a") is False
        assert await session.handle_key("Alt") is False
        assert session.staging.hex_color == "#000000"

    @pytest.mark.asyncio
    async def test_configured_hotkeys(self, temp_dir, memory_store, sampler):
        config = AppConfig(resources_dir=temp_dir, sample_hotkey="alt", refresh_hotkey="ctrl")
        session = PickerSession(config, store=memory_store, sampler=sampler)
        session.start()

        assert await session.handle_key("Option") is True
        assert session.staging.hex_color == "#0a141e"
        assert await session.handle_key("Shift") is False

    @pytest.mark.asyncio
    async def test_sampling_failure_keeps_staging(self, config, memory_store, frame):
        session = PickerSession(config, store=memory_store, sampler=FrameSampler(frame))
        session.start()

        assert await session.handle_key("ctrl") is False
        assert session.staging.hex_color == "#000000"
