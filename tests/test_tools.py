"""
Tests for MCP tools.

Tests the jam session tools end to end against a real notation engine and
a recording player.
"""

import json
import os
from pathlib import Path

import pytest

from chuk_mcp_jam.errors import PlaybackUnavailable
from chuk_mcp_jam.session import SongOrchestrator
from chuk_mcp_jam.song import SkeletonLibrary
from chuk_mcp_jam.tools import register_session_tools

from conftest import FakePlayer, FakeSong


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def session(fake_song: FakeSong, fake_player: FakePlayer, temp_dir: Path) -> SongOrchestrator:
    return SongOrchestrator(fake_song, player=fake_player, output_dir=temp_dir)


@pytest.fixture
def tools(session: SongOrchestrator) -> dict:
    mcp = MockMCPServer("test")
    return register_session_tools(mcp, session, SkeletonLibrary())


async def call(tools: dict, name: str, **kwargs) -> dict:
    return json.loads(await tools[name](**kwargs))


class TestRegistration:
    """Tests for tool registration."""

    def test_registers_all_tools(self, session: SongOrchestrator) -> None:
        """Every tool lands on the server under its own name."""
        mcp = MockMCPServer("test")
        tools = register_session_tools(mcp, session)

        assert set(mcp.tools) == set(tools)
        assert set(tools) == {
            "jam_generate",
            "jam_export",
            "jam_play",
            "jam_stop",
            "jam_set_key",
            "jam_set_tempo",
            "jam_set_melody_instrument",
            "jam_set_chords_instrument",
            "jam_set_percussion_instrument",
            "jam_toggle_melody",
            "jam_toggle_chords",
            "jam_toggle_percussion",
            "jam_get_session",
            "jam_transpose",
            "jam_list_skeletons",
        }


class TestPipelineTools:
    """Tests for generate, export, play and stop."""

    @pytest.mark.asyncio
    async def test_generate(self, tools: dict) -> None:
        """Generate returns the concrete notation."""
        data = await call(tools, "jam_generate")
        assert data["status"] == "success"
        assert data["notation"] == "T[Andantino] I0 V1 I0 Cmajw Gmajw Aminw Fmajw"
        assert data["session"]["key"] == 0

    @pytest.mark.asyncio
    async def test_generate_malformed(self, tools: dict, fake_song: FakeSong) -> None:
        """Rejected notation becomes an error response."""
        fake_song.skeleton = "V1 FIRSTw ZZZ"
        data = await call(tools, "jam_generate")
        assert data["status"] == "error"
        assert "ZZZ" in data["message"]

    @pytest.mark.asyncio
    async def test_export_before_generate(self, tools: dict) -> None:
        """Exporting with no song is an error response."""
        data = await call(tools, "jam_export")
        assert data["status"] == "error"
        assert "No song generated" in data["message"]

    @pytest.mark.asyncio
    async def test_export(self, tools: dict, temp_dir: Path) -> None:
        """Export writes jam<N>.mid files."""
        await call(tools, "jam_generate")
        first = await call(tools, "jam_export")
        second = await call(tools, "jam_export")

        assert Path(first["path"]).name == "jam0.mid"
        assert Path(second["path"]).name == "jam1.mid"
        assert (temp_dir / "jam1.mid").exists()

    @pytest.mark.asyncio
    async def test_play_and_stop(
        self, tools: dict, fake_player: FakePlayer, temp_dir: Path
    ) -> None:
        """Play writes a tempjam file and reports the export directory."""
        await call(tools, "jam_generate")
        data = await call(tools, "jam_play")

        assert data["status"] == "success"
        assert Path(data["path"]).name == "tempjam0.mid"
        assert data["export_directory"] == f"{temp_dir.absolute()}{os.sep}"
        assert len(fake_player.started) == 1

        stopped = await call(tools, "jam_stop")
        assert stopped["status"] == "success"
        assert fake_player.pauses == 1

    @pytest.mark.asyncio
    async def test_play_unavailable(self, fake_song: FakeSong, temp_dir: Path) -> None:
        """Playback failures become error responses."""
        player = FakePlayer(error=PlaybackUnavailable("Cannot open MIDI output: none"))
        session = SongOrchestrator(fake_song, player=player, output_dir=temp_dir)
        tools = register_session_tools(MockMCPServer("test"), session)

        await call(tools, "jam_generate")
        data = await call(tools, "jam_play")

        assert data["status"] == "error"
        assert "Cannot open MIDI output" in data["message"]


class TestConfigurationTools:
    """Tests for setters and toggles."""

    @pytest.mark.asyncio
    async def test_set_key(self, tools: dict) -> None:
        """Key changes show up in the next song."""
        data = await call(tools, "jam_set_key", key=7)
        assert data["session"]["key"] == 7

        generated = await call(tools, "jam_generate")
        assert generated["notation"].endswith("Gmajw Dmajw Eminw Cmajw")

    @pytest.mark.asyncio
    async def test_set_key_invalid(self, tools: dict, session: SongOrchestrator) -> None:
        """Out-of-range keys are refused."""
        data = await call(tools, "jam_set_key", key=12)
        assert data["status"] == "error"
        assert session.config.key == 0

    @pytest.mark.asyncio
    async def test_set_tempo(self, tools: dict) -> None:
        """Defined BPMs change the marking; gaps keep it."""
        data = await call(tools, "jam_set_tempo", bpm=120)
        assert data == {"status": "success", "tempo": "Allegro", "changed": True}

        data = await call(tools, "jam_set_tempo", bpm=142)
        assert data == {"status": "success", "tempo": "Allegro", "changed": False}

    @pytest.mark.asyncio
    async def test_set_instruments(self, tools: dict) -> None:
        """Instrument setters update the session summary."""
        melody = await call(tools, "jam_set_melody_instrument", instrument=73)
        chords = await call(tools, "jam_set_chords_instrument", instrument=24)
        percussion = await call(tools, "jam_set_percussion_instrument", flavor=2)

        assert melody["session"]["melody_instrument"] == 73
        assert chords["session"]["chords_instrument"] == 24
        assert percussion["session"]["percussion_instrument"] == 2

    @pytest.mark.asyncio
    async def test_set_instrument_invalid(self, tools: dict) -> None:
        """Out-of-range instruments are refused."""
        data = await call(tools, "jam_set_melody_instrument", instrument=200)
        assert data["status"] == "error"
        data = await call(tools, "jam_set_percussion_instrument", flavor=-1)
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_toggles(self, tools: dict, fake_song: FakeSong) -> None:
        """Toggles report the new state and reach the song generator."""
        assert (await call(tools, "jam_toggle_melody"))["melody"] is False
        assert (await call(tools, "jam_toggle_chords"))["chords"] is False
        assert (await call(tools, "jam_toggle_percussion"))["percussion"] is False
        assert (await call(tools, "jam_toggle_chords"))["chords"] is True

        await call(tools, "jam_generate")
        call_args = fake_song.calls[-1]
        assert call_args["melody_enabled"] is False
        assert call_args["chords_enabled"] is True
        assert call_args["percussion_enabled"] is False


class TestInspectionTools:
    """Tests for session, transpose and skeleton listing tools."""

    @pytest.mark.asyncio
    async def test_get_session(self, tools: dict) -> None:
        """Session view includes notation and written files."""
        data = await call(tools, "jam_get_session")
        assert data["notation"] is None
        assert data["export_directory"] == ""
        assert data["artifacts"] == []

        await call(tools, "jam_generate")
        await call(tools, "jam_play")
        data = await call(tools, "jam_get_session")

        assert data["notation"].startswith("T[Andantino]")
        assert data["export_directory"] != ""
        assert data["artifacts"][0]["transient"] is True

    @pytest.mark.asyncio
    async def test_transpose(self, tools: dict) -> None:
        """Transpose works on any skeleton without touching the session."""
        data = await call(tools, "jam_transpose", skeleton="FIRSTw FIFTHw SIXTHw FOURTHw", key=2)
        assert data["notation"] == "Dmajw Amajw Bminw Gmajw"
        assert data["chords"]["SEVENTH"] == "C#dim"

    @pytest.mark.asyncio
    async def test_transpose_invalid_key(self, tools: dict) -> None:
        """Keys outside 0-11 are refused."""
        data = await call(tools, "jam_transpose", skeleton="FIRSTw", key=-3)
        assert data["status"] == "error"
        assert "Invalid key" in data["message"]

    @pytest.mark.asyncio
    async def test_list_skeletons(self, tools: dict) -> None:
        """Built-in skeletons are listed with their percussion flavours."""
        data = await call(tools, "jam_list_skeletons")
        skeletons = {s["name"]: s for s in data["skeletons"]}

        assert sorted(skeletons) == ["fifties", "minor-drift", "pop-anthem"]
        assert skeletons["fifties"]["percussion"] == ["rock", "shuffle"]
        assert skeletons["pop-anthem"]["percussion"] == ["rock", "funk"]
