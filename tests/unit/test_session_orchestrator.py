from __future__ import annotations

import asyncio
import json
from io import StringIO
from pathlib import Path
from typing import List, Optional

import pytest

from vtscli.commands import (
    ConfigInit,
    ConfigShow,
    EventsTest,
    HotkeysTrigger,
    Selector,
    Stats,
)
from vtscli.config import ConnectionConfig, load_config, persist_config
from vtscli.exceptions import ApiError, ConfigNotFound, PersistError, SessionError
from vtscli.output import OutputFormat
from vtscli.rpc.events import ApiEvent, EventStream, TokenRotated
from vtscli.session import SessionOrchestrator, SessionState


def _stored_token(path: Path) -> Optional[str]:
    return json.loads(path.read_text(encoding="utf-8"))["token"]


class _RecordingStream(EventStream):
    """Records the token on disk each time the consumer polls."""

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path
        self.tokens_at_poll: List[Optional[str]] = []

    async def next(self):
        self.tokens_at_poll.append(_stored_token(self.path))
        return await super().next()


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "config.json"
    persist_config(path, ConnectionConfig(token="old-token"))
    return path


def _orchestrator(command, path: Path, client, **kwargs) -> SessionOrchestrator:
    kwargs.setdefault("stream", StringIO())
    return SessionOrchestrator(
        command, path, client_factory=lambda config: client, **kwargs
    )


@pytest.mark.asyncio
async def test_transactional_command_releases_before_draining(
    config_path: Path, make_client
) -> None:
    client = make_client({"StatisticsRequest": {"uptime": 1}})
    out = StringIO()
    orch = _orchestrator(Stats(), config_path, client, stream=out)

    await asyncio.wait_for(orch.run(), timeout=1)

    assert client.release_calls == 1
    assert client.stream_open_at_release is True
    assert orch.state is SessionState.TERMINATED
    assert json.loads(out.getvalue()) == {"uptime": 1}


@pytest.mark.asyncio
async def test_subscription_releases_only_after_stream_ends(
    config_path: Path, make_client
) -> None:
    event = ApiEvent(event_type="TestEvent", data={"yourTestMessage": "hi"}, timestamp=1)
    client = make_client(push_on_send=[event], close_after_send=True)
    out = StringIO()
    orch = _orchestrator(EventsTest(message="hi"), config_path, client, stream=out)

    await asyncio.wait_for(orch.run(), timeout=1)

    assert client.sent_types == ["EventSubscriptionRequest"]
    assert client.release_calls == 1
    assert client.stream_open_at_release is False
    # Subscriptions always print one compact JSON document per line
    assert out.getvalue() == (
        '{"type":"TestEvent","data":{"yourTestMessage":"hi"},"timestamp":1}\n'
    )


@pytest.mark.asyncio
async def test_subscription_output_is_compact_even_when_pretty_requested(
    config_path: Path, make_client
) -> None:
    client = make_client(close_after_send=True)
    orch = _orchestrator(
        EventsTest(), config_path, client, fmt=OutputFormat(compact=False)
    )

    assert orch.printer.fmt.compact is True
    await asyncio.wait_for(orch.run(), timeout=1)


@pytest.mark.asyncio
async def test_rotation_is_persisted_before_next_poll(
    config_path: Path, make_client
) -> None:
    events = _RecordingStream(config_path)
    client = make_client(
        push_on_send=[
            TokenRotated("new-token"),
            ApiEvent(event_type="TestEvent", data={}),
        ],
        events=events,
    )
    orch = _orchestrator(Stats(), config_path, client)

    await asyncio.wait_for(orch.run(), timeout=1)

    assert events.tokens_at_poll[0] == "old-token"
    assert events.tokens_at_poll[1] == "new-token"
    assert load_config(config_path).token == "new-token"


@pytest.mark.asyncio
async def test_two_rotations_are_each_persisted(config_path: Path, make_client) -> None:
    events = _RecordingStream(config_path)
    client = make_client(
        push_on_send=[TokenRotated("first"), TokenRotated("second")],
        events=events,
    )
    orch = _orchestrator(Stats(), config_path, client)

    await asyncio.wait_for(orch.run(), timeout=1)

    assert events.tokens_at_poll == ["old-token", "first", "second"]


@pytest.mark.asyncio
async def test_rotation_survives_a_failing_command(
    config_path: Path, make_client
) -> None:
    client = make_client(
        {"HotkeyTriggerRequest": ApiError(50, "hotkey not found")},
        push_on_send=[TokenRotated("rotated")],
    )
    orch = _orchestrator(HotkeysTrigger(selector=Selector(id="h1")), config_path, client)

    with pytest.raises(SessionError) as excinfo:
        await orch.run()

    assert excinfo.value.stage == "dispatching"
    assert isinstance(excinfo.value.error, ApiError)
    assert load_config(config_path).token == "rotated"
    assert client.release_calls == 1


@pytest.mark.asyncio
async def test_persist_failure_is_fatal(
    config_path: Path, make_client, monkeypatch
) -> None:
    def fail(path, config):
        raise PersistError("read-only filesystem")

    monkeypatch.setattr("vtscli.session.orchestrator.persist_config", fail)
    client = make_client(push_on_send=[TokenRotated("new-token")])
    orch = _orchestrator(Stats(), config_path, client)

    with pytest.raises(SessionError) as excinfo:
        await orch.run()

    assert excinfo.value.stage == "draining"
    assert isinstance(excinfo.value.__cause__, PersistError)
    assert client.release_calls == 1


@pytest.mark.asyncio
async def test_missing_config_fails_while_loading(tmp_path: Path, make_client) -> None:
    created = []

    def factory(config):
        created.append(config)
        return make_client()

    orch = SessionOrchestrator(Stats(), tmp_path / "missing.json", client_factory=factory)

    with pytest.raises(SessionError) as excinfo:
        await orch.run()

    assert excinfo.value.stage == "loading"
    assert isinstance(excinfo.value.error, ConfigNotFound)
    assert created == []


@pytest.mark.asyncio
async def test_token_override_replaces_stored_token(
    config_path: Path, make_client
) -> None:
    seen = []
    client = make_client()

    def factory(config):
        seen.append(config.token)
        return client

    orch = SessionOrchestrator(
        Stats(),
        config_path,
        token_override="env-token",
        client_factory=factory,
        stream=StringIO(),
    )
    await asyncio.wait_for(orch.run(), timeout=1)

    assert seen == ["env-token"]


@pytest.mark.asyncio
async def test_config_show_prints_stored_token_not_override(
    config_path: Path, make_client
) -> None:
    out = StringIO()
    orch = _orchestrator(
        ConfigShow(show_token=True),
        config_path,
        make_client(),
        token_override="ENV-SECRET",
        stream=out,
    )

    await asyncio.wait_for(orch.run(), timeout=1)

    assert json.loads(out.getvalue())["token"] == "old-token"
    assert "ENV-SECRET" not in out.getvalue()


@pytest.mark.asyncio
async def test_config_init_persists_issued_token(tmp_path: Path, make_client) -> None:
    path = tmp_path / "new" / "config.json"
    client = make_client(push_on_send=[TokenRotated("fresh-token")])
    orch = _orchestrator(
        ConfigInit(config=ConnectionConfig(port=9000)), path, client
    )

    await asyncio.wait_for(orch.run(), timeout=1)

    stored = load_config(path)
    assert stored.port == 9000
    assert stored.token == "fresh-token"
    assert client.sent_types == ["StatisticsRequest"]


@pytest.mark.asyncio
async def test_config_init_persists_without_rotation(tmp_path: Path, make_client) -> None:
    path = tmp_path / "config.json"
    client = make_client()
    orch = _orchestrator(
        ConfigInit(config=ConnectionConfig(token="given")), path, client
    )

    await asyncio.wait_for(orch.run(), timeout=1)

    assert load_config(path).token == "given"


@pytest.mark.asyncio
async def test_interrupt_still_saves_queued_rotation(
    config_path: Path, make_client
) -> None:
    client = make_client(
        {"StatisticsRequest": asyncio.CancelledError()},
        push_on_send=[TokenRotated("queued-token")],
    )
    orch = _orchestrator(Stats(), config_path, client)

    with pytest.raises(asyncio.CancelledError):
        await orch.run()

    assert load_config(config_path).token == "queued-token"
    assert client.release_calls == 1
