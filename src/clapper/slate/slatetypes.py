from __future__ import annotations

import enum
import typing

import msgspec


class TakeMode(enum.Enum):
    NORMAL = "normal"
    SERIES = "series"
    ONLY_SERIES = "only_series"
    REHEARSAL = "rehearsal"
    PLATE = "plate"

    @enum.property
    def next(self):
        match self:
            case TakeMode.NORMAL:
                return TakeMode.SERIES
            case TakeMode.SERIES:
                return TakeMode.REHEARSAL
            case TakeMode.REHEARSAL:
                return TakeMode.PLATE
            case TakeMode.PLATE:
                return TakeMode.ONLY_SERIES
            case TakeMode.ONLY_SERIES:
                return TakeMode.NORMAL


class OverflowPolicy(enum.Enum):
    CLAMP = "clamp"
    WRAP = "wrap"


class CodeOverlayChanged(msgspec.Struct, frozen=True):
    visible: bool


class RollChanged(msgspec.Struct, frozen=True):
    cam_index: int
    value: int


class CameraSelected(msgspec.Struct, frozen=True):
    cam_index: int


class CameraCountChanged(msgspec.Struct, frozen=True):
    num_cams: int
    cam_index: int
    roll_values: tuple[int, ...]


class SceneNumberChanged(msgspec.Struct, frozen=True):
    number: int


class PrefixChanged(msgspec.Struct, frozen=True):
    prefix: int


class DualModeChanged(msgspec.Struct, frozen=True):
    enabled: bool
    prefix: int
    editing_prefix: bool


class EditTargetChanged(msgspec.Struct, frozen=True):
    editing_prefix: bool


class SceneLetterChanged(msgspec.Struct, frozen=True):
    letter: typing.Optional[str]
    secondary: typing.Optional[str]


class TakeChanged(msgspec.Struct, frozen=True):
    number: int
    mode: TakeMode


SlateEvent = (
    CodeOverlayChanged
    | RollChanged
    | CameraSelected
    | CameraCountChanged
    | SceneNumberChanged
    | PrefixChanged
    | DualModeChanged
    | EditTargetChanged
    | SceneLetterChanged
    | TakeChanged
)


class SlateSnapshot(msgspec.Struct, frozen=True, kw_only=True):
    roll_values: tuple[int, ...]
    num_cams: int
    current_cam_index: int
    scene_number: int
    scene_letter: typing.Optional[str] = None
    scene_secondary_letter: typing.Optional[str] = None
    dual_mode: bool = False
    prefix_number: int = 1
    editing_prefix: bool = False
    take_number: int = 1
    take_mode: TakeMode = TakeMode.NORMAL
    code_visible: bool = False
