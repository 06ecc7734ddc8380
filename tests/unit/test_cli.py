from __future__ import annotations

import asyncio
import json
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from vtscli.cli import create_parser, runner
from vtscli.cli.convert import to_command
from vtscli.commands import (
    ALL_COMMANDS,
    ArtmeshesTint,
    Color,
    ConfigInit,
    EventsTest,
    HotkeysTrigger,
    ItemsAnimation,
    ModelsMove,
    ParamsInject,
    PhysicsKind,
    PhysicsSetMultiplier,
    PlayState,
    Selector,
    StopFrames,
)
from vtscli.config import ConnectionConfig, load_config, persist_config
from vtscli.utils.redaction import RedactionFilter


def _console() -> Console:
    return Console(file=StringIO(), force_terminal=False, color_system=None, width=300)


def _command(*argv: str):
    return to_command(create_parser().parse_args(list(argv)))


ALL_ARGVS = [
    ["config", "init"],
    ["config", "show"],
    ["config", "path"],
    ["state"],
    ["stats"],
    ["folders"],
    ["scene-colors"],
    ["face-found"],
    ["params", "get", "FaceAngleX"],
    ["params", "create", "MyParam"],
    ["params", "inject", "MyParam", "1"],
    ["params", "delete", "MyParam"],
    ["params", "list-inputs"],
    ["params", "list-live2d"],
    ["hotkeys", "list"],
    ["hotkeys", "trigger", "h1"],
    ["artmeshes", "list"],
    ["artmeshes", "tint", "--duration", "1s"],
    ["artmeshes", "select"],
    ["models", "list"],
    ["models", "current"],
    ["models", "load", "m1"],
    ["models", "move"],
    ["expressions", "list"],
    ["expressions", "activate", "smile.exp3.json"],
    ["expressions", "deactivate", "smile.exp3.json"],
    ["ndi", "get-config"],
    ["ndi", "set-config", "--active", "true"],
    ["physics", "get"],
    ["physics", "set", "base", "strength", "50"],
    ["physics", "set", "multiplier", "wind", "1.5", "--id", "Hair"],
    ["items", "list"],
    ["items", "load", "item.png"],
    ["items", "unload", "--all"],
    ["items", "move", "i1"],
    ["items", "animation", "i1"],
    ["events", "test"],
    ["events", "model-loaded"],
    ["events", "tracking-status"],
    ["events", "hotkey-triggered"],
]


def test_every_command_is_reachable_from_the_command_line() -> None:
    built = {type(_command(*argv)) for argv in ALL_ARGVS}

    assert built == set(ALL_COMMANDS)


def test_aliases() -> None:
    assert _command("param", "get", "X") == _command("params", "get", "X")
    assert isinstance(_command("hotkey", "trigger", "h1"), HotkeysTrigger)
    assert isinstance(_command("event", "test"), EventsTest)


def test_trigger_by_name() -> None:
    assert _command("hotkeys", "trigger", "--name", "Wave") == HotkeysTrigger(
        selector=Selector(name="Wave")
    )


def test_id_and_name_conflict() -> None:
    with pytest.raises(SystemExit) as excinfo:
        _command("models", "load", "m1", "--name", "Akari")

    assert excinfo.value.code == 2


def test_negative_numbers_are_values() -> None:
    assert _command("params", "inject", "FaceAngleX", "-10") == ParamsInject(
        id="FaceAngleX", value=-10.0
    )
    assert _command("models", "move", "--x", "-0.5", "--duration", "1s") == ModelsMove(
        duration=1.0, x=-0.5
    )


def test_physics_multiplier() -> None:
    assert _command(
        "physics", "set", "multiplier", "wind", "1.5", "--id", "Hair"
    ) == PhysicsSetMultiplier(kind=PhysicsKind.WIND, value=1.5, group_id="Hair")


def test_tint_arguments() -> None:
    command = _command(
        "artmeshes", "tint", "--all", "--color", "#f00", "--duration", "1m30s",
        "--name-contains", "hair", "--name-contains", "eye",
    )

    assert command == ArtmeshesTint(
        duration=90.0,
        color=Color(255, 0, 0, 255),
        all=True,
        name_contains=("hair", "eye"),
    )


@pytest.mark.parametrize(
    "argv",
    [
        ["artmeshes", "tint", "--duration", "1s", "--color", "zz"],
        ["artmeshes", "tint", "--duration", "soon"],
        ["artmeshes", "tint", "--duration", "inf"],
        ["models", "move", "--x", "nan"],
        ["physics", "set", "base", "wind", "inf"],
        ["artmeshes", "tint"],
        ["items", "animation", "i1", "--play", "--stop"],
        ["items", "animation", "i1", "--stop-frame", "3", "--reset-stop-frames"],
        ["ndi", "set-config", "--active", "maybe"],
        ["physics", "set", "base", "gravity", "1"],
    ],
)
def test_invalid_arguments_exit_with_usage_error(argv) -> None:
    with pytest.raises(SystemExit) as excinfo:
        create_parser().parse_args(argv)

    assert excinfo.value.code == 2


def test_item_animation_flags() -> None:
    assert _command(
        "items", "animation", "i1", "--stop", "--stop-frame", "3", "--stop-frame", "7"
    ) == ItemsAnimation(
        item_instance_id="i1",
        play_state=PlayState.STOP,
        stop_frames=StopFrames(frames=(3, 7)),
    )


def test_config_init_defaults() -> None:
    assert _command("config", "init") == ConfigInit(config=ConnectionConfig())


def test_global_flags_come_before_the_command(tmp_path: Path) -> None:
    args = create_parser().parse_args(
        ["--compact", "--config-file", str(tmp_path / "c.json"), "-v", "state"]
    )

    assert args.compact is True
    assert args.verbose is True
    assert args.config_file == tmp_path / "c.json"


@pytest.fixture
def quiet_logging(monkeypatch):
    monkeypatch.setattr(runner, "setup_logging", lambda *a, **k: RedactionFilter())


@pytest.mark.asyncio
async def test_run_success_prints_response(
    tmp_path: Path, make_client, quiet_logging
) -> None:
    path = tmp_path / "config.json"
    persist_config(path, ConnectionConfig(token="file-token"))
    client = make_client({"APIStateRequest": {"active": True}})
    seen = []

    def factory(config):
        seen.append(config.token)
        return client

    out = StringIO()
    args = create_parser().parse_args(["--compact", "state"])

    rc = await runner.run(
        _console(),
        args,
        environ={"VTS_CONFIG": str(path), "VTS_TOKEN": "env-token"},
        dotenv_path=tmp_path / ".env",
        client_factory=factory,
        stream=out,
    )

    assert rc == runner.EXIT_OK
    assert out.getvalue() == '{"active":true}\n'
    assert seen == ["env-token"]


@pytest.mark.asyncio
async def test_run_reports_stage_on_failure(tmp_path: Path, quiet_logging) -> None:
    console = _console()
    args = create_parser().parse_args(
        ["--config-file", str(tmp_path / "missing.json"), "stats"]
    )

    rc = await runner.run(console, args, environ={}, dotenv_path=tmp_path / ".env")

    assert rc == runner.EXIT_ERROR
    output = console.file.getvalue()
    assert "Error (loading)" in output
    assert "vts config init" in output


@pytest.mark.asyncio
async def test_run_interrupt_returns_130(
    tmp_path: Path, make_client, quiet_logging
) -> None:
    path = tmp_path / "config.json"
    persist_config(path, ConnectionConfig())
    client = make_client({"StatisticsRequest": asyncio.CancelledError()})
    args = create_parser().parse_args(["--config-file", str(path), "stats"])

    rc = await runner.run(
        _console(),
        args,
        environ={},
        dotenv_path=tmp_path / ".env",
        client_factory=lambda config: client,
    )

    assert rc == runner.EXIT_INTERRUPTED
    assert client.release_calls == 1


@pytest.mark.asyncio
async def test_config_init_writes_file(tmp_path: Path, make_client, quiet_logging) -> None:
    path = tmp_path / "config.json"
    args = create_parser().parse_args(
        ["--config-file", str(path), "config", "init", "--port", "8002", "--token", "t"]
    )

    rc = await runner.run(
        _console(),
        args,
        environ={},
        dotenv_path=tmp_path / ".env",
        client_factory=lambda config: make_client(),
    )

    assert rc == runner.EXIT_OK
    assert load_config(path) == ConnectionConfig(port=8002, token="t")
    assert json.loads(path.read_text())["port"] == 8002
