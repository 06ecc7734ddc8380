from __future__ import annotations

import json
from dataclasses import dataclass
from io import StringIO
from typing import List, Optional

import pytest

from vtscli.commands import (
    ALL_COMMANDS,
    ArtmeshesTint,
    Command,
    ConfigShow,
    EventsModelLoaded,
    HotkeysTrigger,
    ItemsAnimation,
    ModelsLoad,
    NdiSetConfig,
    ParamsInject,
    PhysicsKind,
    PhysicsSetBase,
    PhysicsSetMultiplier,
    PlayState,
    Selector,
    StopFrames,
)
from vtscli.config import ConnectionConfig
from vtscli.exceptions import AmbiguousOrMissingSelector, NameNotFound, UnhandledCommand
from vtscli.output import OutputFormat, Printer
from vtscli.routing import HANDLERS, CommandRouter, resolve_name
from vtscli.routing.items import build_animation_request
from vtscli.routing.physics import build_physics_request


def _router(
    client,
    *,
    sleeps: Optional[List[float]] = None,
    out: Optional[StringIO] = None,
    config: Optional[ConnectionConfig] = None,
):
    async def fake_sleep(seconds: float) -> None:
        if sleeps is not None:
            sleeps.append(seconds)

    return CommandRouter(
        client,
        Printer(OutputFormat(compact=True), out or StringIO()),
        config=config or ConnectionConfig(),
        sleep=fake_sleep,
    )


def test_every_command_has_exactly_one_handler() -> None:
    assert set(HANDLERS) == set(ALL_COMMANDS)


@pytest.mark.asyncio
async def test_unknown_command_is_rejected(make_client) -> None:
    @dataclass(frozen=True)
    class Bogus(Command):
        pass

    with pytest.raises(UnhandledCommand):
        await _router(make_client()).dispatch(Bogus())


def test_resolve_name_first_match_wins() -> None:
    records = [
        {"name": "Bob", "hotkeyID": "b1"},
        {"name": "Alice", "hotkeyID": "a1"},
        {"name": "Alice", "hotkeyID": "a2"},
    ]

    assert (
        resolve_name("Alice", records, id_key="hotkeyID", name_key="name", kind="hotkey")
        == "a1"
    )
    with pytest.raises(NameNotFound):
        resolve_name("alice", records, id_key="hotkeyID", name_key="name", kind="hotkey")


@pytest.mark.asyncio
async def test_hotkey_trigger_by_name_uses_first_match(make_client) -> None:
    client = make_client(
        {
            "HotkeysInCurrentModelRequest": {
                "availableHotkeys": [
                    {"name": "Alice", "hotkeyID": "a1"},
                    {"name": "Alice", "hotkeyID": "a2"},
                ]
            }
        }
    )

    await _router(client).dispatch(HotkeysTrigger(selector=Selector(name="Alice")))

    assert client.sent[-1] == ("HotkeyTriggerRequest", {"hotkeyID": "a1"})


@pytest.mark.asyncio
async def test_hotkey_trigger_by_id_skips_listing(make_client) -> None:
    client = make_client()

    await _router(client).dispatch(
        HotkeysTrigger(selector=Selector(id="h1"), item="item-1")
    )

    assert client.sent == [
        ("HotkeyTriggerRequest", {"hotkeyID": "h1", "itemInstanceID": "item-1"})
    ]


@pytest.mark.asyncio
async def test_unknown_name_sends_no_trigger(make_client) -> None:
    client = make_client(
        {"HotkeysInCurrentModelRequest": {"availableHotkeys": [{"name": "Bob"}]}}
    )

    with pytest.raises(NameNotFound):
        await _router(client).dispatch(HotkeysTrigger(selector=Selector(name="Alice")))

    assert client.sent_types == ["HotkeysInCurrentModelRequest"]


@pytest.mark.asyncio
async def test_missing_selector_fails_before_any_request(make_client) -> None:
    client = make_client()

    with pytest.raises(AmbiguousOrMissingSelector):
        await _router(client).dispatch(ModelsLoad(selector=Selector()))

    assert client.sent == []


@pytest.mark.asyncio
async def test_model_load_by_name(make_client) -> None:
    client = make_client(
        {
            "AvailableModelsRequest": {
                "availableModels": [
                    {"modelName": "Alice", "modelID": "a1"},
                    {"modelName": "Alice", "modelID": "a2"},
                ]
            }
        }
    )

    await _router(client).dispatch(ModelsLoad(selector=Selector(name="Alice")))

    assert client.sent[-1] == ("ModelLoadRequest", {"modelID": "a1"})


def test_wind_multiplier_goes_into_wind_overrides_only() -> None:
    command = PhysicsSetMultiplier(
        kind=PhysicsKind.WIND, value=1.5, group_id="Hair", duration=0.5
    )

    assert build_physics_request(command) == {
        "strengthOverrides": [],
        "windOverrides": [
            {"id": "Hair", "value": 1.5, "setBaseValue": False, "overrideSeconds": 0.5}
        ],
    }


def test_strength_base_has_empty_id() -> None:
    request = build_physics_request(
        PhysicsSetBase(kind=PhysicsKind.STRENGTH, value=40, duration=2.0)
    )

    assert request["windOverrides"] == []
    assert request["strengthOverrides"] == [
        {"id": "", "value": 40.0, "setBaseValue": True, "overrideSeconds": 2.0}
    ]


@pytest.mark.asyncio
async def test_tint_with_no_matches_exits_without_delay(make_client) -> None:
    client = make_client({"ColorTintRequest": {"matchedArtMeshes": 0}})
    sleeps: List[float] = []

    await _router(client, sleeps=sleeps).dispatch(ArtmeshesTint(duration=5.0, all=True))

    assert sleeps == []


@pytest.mark.asyncio
async def test_tint_with_matches_holds_connection(make_client) -> None:
    client = make_client({"ColorTintRequest": {"matchedArtMeshes": 3}})
    sleeps: List[float] = []
    out = StringIO()

    await _router(client, sleeps=sleeps, out=out).dispatch(
        ArtmeshesTint(duration=5.0, name_contains=("hair",))
    )

    assert sleeps == [5.0]
    assert json.loads(out.getvalue()) == {"matchedArtMeshes": 3}
    matcher = client.sent[0][1]["artMeshMatcher"]
    assert matcher["nameContains"] == ["hair"]
    assert matcher["tintAll"] is False


def test_animation_defaults_leave_everything_unchanged() -> None:
    request = build_animation_request(ItemsAnimation(item_instance_id="i1"))

    assert request == {
        "itemInstanceID": "i1",
        "setAnimationPlayState": False,
        "animationPlayState": True,
        "setAutoStopFrames": False,
        "autoStopFrames": [],
    }


def test_animation_stop_and_reset_are_explicit() -> None:
    request = build_animation_request(
        ItemsAnimation(
            item_instance_id="i1",
            play_state=PlayState.STOP,
            stop_frames=StopFrames(reset=True),
            opacity=0.5,
        )
    )

    assert request["setAnimationPlayState"] is True
    assert request["animationPlayState"] is False
    assert request["setAutoStopFrames"] is True
    assert request["autoStopFrames"] == []
    assert request["opacity"] == 0.5


def test_animation_play_with_frames() -> None:
    request = build_animation_request(
        ItemsAnimation(
            item_instance_id="i1",
            play_state=PlayState.PLAY,
            stop_frames=StopFrames(frames=(10, 20)),
        )
    )

    assert request["setAnimationPlayState"] is True
    assert request["animationPlayState"] is True
    assert request["setAutoStopFrames"] is True
    assert request["autoStopFrames"] == [10, 20]


@pytest.mark.asyncio
async def test_ndi_set_sends_only_given_fields(make_client) -> None:
    client = make_client()

    await _router(client).dispatch(NdiSetConfig(active=True, width=1920))

    assert client.sent == [
        (
            "NDIConfigRequest",
            {"setNewConfig": True, "ndiActive": True, "customWidthNDI": 1920},
        )
    ]


@pytest.mark.asyncio
async def test_inject_add_mode(make_client) -> None:
    client = make_client()

    await _router(client).dispatch(ParamsInject(id="MyParam", value=-1.0, add=True))

    assert client.sent == [
        (
            "InjectParameterDataRequest",
            {
                "faceFound": False,
                "mode": "add",
                "parameterValues": [{"id": "MyParam", "value": -1.0}],
            },
        )
    ]


@pytest.mark.asyncio
async def test_subscription_sends_request_and_prints_nothing(make_client) -> None:
    client = make_client()
    out = StringIO()

    await _router(client, out=out).dispatch(EventsModelLoaded(model_ids=("m-1",)))

    assert client.sent == [
        (
            "EventSubscriptionRequest",
            {
                "eventName": "ModelLoadedEvent",
                "subscribe": True,
                "config": {"modelID": ["m-1"]},
            },
        )
    ]
    assert out.getvalue() == ""


@pytest.mark.asyncio
async def test_config_show_masks_token_unless_asked(make_client) -> None:
    config = ConnectionConfig(token="secret-token")
    masked, shown = StringIO(), StringIO()

    await _router(make_client(), out=masked, config=config).dispatch(ConfigShow())
    await _router(make_client(), out=shown, config=config).dispatch(
        ConfigShow(show_token=True)
    )

    assert json.loads(masked.getvalue())["token"] == "[REDACTED]"
    assert json.loads(shown.getvalue())["token"] == "secret-token"
