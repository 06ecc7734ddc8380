"""Turn a parsed ``argparse.Namespace`` into a ``Command`` value.

Every leaf subparser stores one of these builders as ``args.build``.
"""

from __future__ import annotations

import argparse

from ..commands import (
    ArtmeshesList,
    ArtmeshesSelect,
    ArtmeshesTint,
    Command,
    ConfigInit,
    ConfigPath,
    ConfigShow,
    EventsHotkeyTriggered,
    EventsModelLoaded,
    EventsTest,
    EventsTrackingStatus,
    ExpressionsActivate,
    ExpressionsDeactivate,
    ExpressionsList,
    FaceFound,
    Folders,
    HotkeysList,
    HotkeysTrigger,
    ItemsAnimation,
    ItemsList,
    ItemsLoad,
    ItemsMove,
    ItemsUnload,
    ModelsCurrent,
    ModelsList,
    ModelsLoad,
    ModelsMove,
    NdiGetConfig,
    NdiSetConfig,
    ParamsCreate,
    ParamsDelete,
    ParamsGet,
    ParamsInject,
    ParamsListInputs,
    ParamsListLive2D,
    PhysicsGet,
    PhysicsKind,
    PhysicsSetBase,
    PhysicsSetMultiplier,
    PlayState,
    SceneColors,
    Selector,
    State,
    Stats,
    StopFrames,
)
from ..config.models import ConnectionConfig

__all__ = ["to_command"]


def to_command(args: argparse.Namespace) -> Command:
    """Build the command selected on the command line."""
    build = getattr(args, "build", None)
    if build is None:
        raise ValueError("no command selected")
    return build(args)


def _tuple(values) -> tuple:
    return tuple(values or ())


def _selector(args: argparse.Namespace) -> Selector:
    return Selector(id=args.id, name=args.name)


# config


def config_init(args: argparse.Namespace) -> Command:
    return ConfigInit(
        config=ConnectionConfig(
            host=args.host,
            port=args.port,
            token=args.token,
            plugin_name=args.plugin_name,
            plugin_developer=args.plugin_developer,
        )
    )


def config_show(args: argparse.Namespace) -> Command:
    return ConfigShow(show_token=args.show_token)


def config_path(args: argparse.Namespace) -> Command:
    return ConfigPath()


# status


def state(args: argparse.Namespace) -> Command:
    return State()


def stats(args: argparse.Namespace) -> Command:
    return Stats()


def folders(args: argparse.Namespace) -> Command:
    return Folders()


def scene_colors(args: argparse.Namespace) -> Command:
    return SceneColors()


def face_found(args: argparse.Namespace) -> Command:
    return FaceFound()


def ndi_get_config(args: argparse.Namespace) -> Command:
    return NdiGetConfig()


def ndi_set_config(args: argparse.Namespace) -> Command:
    return NdiSetConfig(
        active=args.active,
        use_ndi5=args.use_ndi5,
        use_custom_resolution=args.use_custom_resolution,
        width=args.width,
        height=args.height,
    )


# params


def params_get(args: argparse.Namespace) -> Command:
    return ParamsGet(name=args.name)


def params_create(args: argparse.Namespace) -> Command:
    return ParamsCreate(
        name=args.name,
        default=args.default,
        min=args.min,
        max=args.max,
        explanation=args.explanation,
    )


def params_inject(args: argparse.Namespace) -> Command:
    return ParamsInject(
        id=args.id,
        value=args.value,
        weight=args.weight,
        face_found=args.face_found,
        add=args.add,
    )


def params_delete(args: argparse.Namespace) -> Command:
    return ParamsDelete(name=args.name)


def params_list_inputs(args: argparse.Namespace) -> Command:
    return ParamsListInputs()


def params_list_live2d(args: argparse.Namespace) -> Command:
    return ParamsListLive2D()


# hotkeys


def hotkeys_list(args: argparse.Namespace) -> Command:
    return HotkeysList(model_id=args.model_id, live2d_file=args.live2d_file)


def hotkeys_trigger(args: argparse.Namespace) -> Command:
    return HotkeysTrigger(selector=_selector(args), item=args.item)


# artmeshes


def artmeshes_list(args: argparse.Namespace) -> Command:
    return ArtmeshesList()


def artmeshes_tint(args: argparse.Namespace) -> Command:
    return ArtmeshesTint(
        duration=args.duration,
        color=args.color,
        rainbow=args.rainbow,
        mix_scene_lighting=args.mix_scene_lighting,
        all=args.all,
        art_mesh_number=_tuple(args.art_mesh_number),
        name_exact=_tuple(args.name_exact),
        name_contains=_tuple(args.name_contains),
        tag_exact=_tuple(args.tag_exact),
        tag_contains=_tuple(args.tag_contains),
    )


def artmeshes_select(args: argparse.Namespace) -> Command:
    return ArtmeshesSelect(
        set_text=args.set_text,
        set_help=args.set_help,
        count=args.count,
        preselect=_tuple(args.preselect),
    )


# models and expressions


def models_list(args: argparse.Namespace) -> Command:
    return ModelsList()


def models_current(args: argparse.Namespace) -> Command:
    return ModelsCurrent()


def models_load(args: argparse.Namespace) -> Command:
    return ModelsLoad(selector=_selector(args))


def models_move(args: argparse.Namespace) -> Command:
    return ModelsMove(
        duration=args.duration,
        relative=args.relative,
        x=args.x,
        y=args.y,
        rotation=args.rotation,
        size=args.size,
    )


def expressions_list(args: argparse.Namespace) -> Command:
    return ExpressionsList(details=args.details, file=args.file)


def expressions_activate(args: argparse.Namespace) -> Command:
    return ExpressionsActivate(file=args.file)


def expressions_deactivate(args: argparse.Namespace) -> Command:
    return ExpressionsDeactivate(file=args.file)


# physics


def physics_get(args: argparse.Namespace) -> Command:
    return PhysicsGet()


def physics_set_base(args: argparse.Namespace) -> Command:
    return PhysicsSetBase(
        kind=PhysicsKind(args.kind), value=args.value, duration=args.duration
    )


def physics_set_multiplier(args: argparse.Namespace) -> Command:
    return PhysicsSetMultiplier(
        kind=PhysicsKind(args.kind),
        value=args.value,
        group_id=args.group_id,
        duration=args.duration,
    )


# items


def items_list(args: argparse.Namespace) -> Command:
    return ItemsList(
        spots=args.spots,
        instances=args.instances,
        files=args.files,
        with_file_name=args.with_file_name,
        with_instance_id=args.with_instance_id,
    )


def items_load(args: argparse.Namespace) -> Command:
    return ItemsLoad(
        file_name=args.file_name,
        x=args.x,
        y=args.y,
        size=args.size,
        rotation=args.rotation,
        fade_time=args.fade_time,
        order=args.order,
        fail_if_order_taken=args.fail_if_order_taken,
        smoothing=args.smoothing,
        censored=args.censored,
        flipped=args.flipped,
        locked=args.locked,
    )


def items_unload(args: argparse.Namespace) -> Command:
    return ItemsUnload(
        all=args.all,
        from_this_plugin=args.from_this_plugin,
        from_other_plugins=args.from_other_plugins,
        ids=_tuple(args.ids),
        files=_tuple(args.files),
    )


def items_move(args: argparse.Namespace) -> Command:
    return ItemsMove(
        id=args.id,
        duration=args.duration,
        fade_mode=args.fade_mode,
        x=args.x,
        y=args.y,
        size=args.size,
        rotation=args.rotation,
        order=args.order,
        set_flip=args.set_flip,
        flip=args.flip,
        user_can_stop=args.user_can_stop,
    )


def items_animation(args: argparse.Namespace) -> Command:
    return ItemsAnimation(
        item_instance_id=args.id,
        framerate=args.framerate,
        frame=args.frame,
        brightness=args.brightness,
        opacity=args.opacity,
        play_state=PlayState.from_flags(args.play, args.stop),
        stop_frames=StopFrames(
            frames=_tuple(args.stop_frames), reset=args.reset_stop_frames
        ),
    )


# events


def events_test(args: argparse.Namespace) -> Command:
    return EventsTest(message=args.message)


def events_model_loaded(args: argparse.Namespace) -> Command:
    return EventsModelLoaded(model_ids=_tuple(args.model_ids))


def events_tracking_status(args: argparse.Namespace) -> Command:
    return EventsTrackingStatus()


def events_hotkey_triggered(args: argparse.Namespace) -> Command:
    return EventsHotkeyTriggered(action=args.action)
