import dataclasses
import json
import pathlib
import typing

import cattrs
from cattrs.errors import BaseValidationError
from cattrs.gen import make_dict_structure_fn

from .commontypes import ClapperError
from .device.capture import INITIAL_FOCUS_DELAY, REFOCUS_INTERVAL
from .input.commands import DEFAULT_KEYMAP, Command
from .input.dispatcher import DEFAULT_BUFFER_LIMIT
from .slate.cameras import DEFAULT_MAX_RIG_CAMERAS
from .slate.counters import SLATE_CEILING
from .slate.slatetypes import OverflowPolicy

KEYMAP = {character: command.value for character, command in DEFAULT_KEYMAP.items()}

DEFAULTS = {
    "keymap": KEYMAP,
    "buffer_limit": DEFAULT_BUFFER_LIMIT,
    "max_rig_cameras": DEFAULT_MAX_RIG_CAMERAS,
    "scene_overflow": OverflowPolicy.CLAMP.value,
    "scene_wrap_from": SLATE_CEILING,
    "refocus_interval": REFOCUS_INTERVAL,
    "initial_focus_delay": INITIAL_FOCUS_DELAY,
}


settings_converter = cattrs.Converter()
settings_converter.register_unstructure_hook(pathlib.Path, str)
settings_converter.register_structure_hook(pathlib.Path, lambda v, _: pathlib.Path(v))


@dataclasses.dataclass(kw_only=True)
class Settings:
    _path: typing.Optional[pathlib.Path]
    keymap: dict[str, Command]
    buffer_limit: int
    max_rig_cameras: int
    scene_overflow: OverflowPolicy
    scene_wrap_from: int
    refocus_interval: float
    initial_focus_delay: float

    def __post_init__(self):
        for character in self.keymap:
            if len(character) != 1:
                raise ValueError(f"Keymap keys must be single characters, not {character!r}")
        if self.buffer_limit < 1:
            raise ValueError("buffer_limit must be at least 1")
        if self.max_rig_cameras < 1:
            raise ValueError("max_rig_cameras must be at least 1")

    def save(self, dest: typing.Optional[pathlib.Path] = None):
        if dest is None:
            dest = self._path
        if dest is None:
            raise ClapperError("These settings were not loaded from a file; a destination is required")
        raw = settings_converter.unstructure(self)
        del raw["_path"]
        try:
            with dest.open("w") as outfile:
                json.dump(raw, outfile, indent=2)
        except OSError as exc:
            raise ClapperError(f"Could not write settings to {dest}: {exc}") from exc

    @classmethod
    def load(cls, src: pathlib.Path):
        try:
            with src.open() as infile:
                raw = json.load(infile)
        except (OSError, json.JSONDecodeError) as exc:
            raise ClapperError(f"Could not read settings from {src}: {exc}") from exc
        if not isinstance(raw, dict):
            raise ClapperError(f"Settings file {src} must hold a JSON object")
        # settings files only need to mention what they change
        raw = {**DEFAULTS, **raw, "_path": src}
        try:
            return settings_converter.structure(raw, cls)
        except (BaseValidationError, ValueError) as exc:
            raise ClapperError(f"Invalid settings in {src}: {exc}") from exc

    @classmethod
    def default(cls):
        return settings_converter.structure({**DEFAULTS, "_path": None}, cls)

    @classmethod
    def for_test(cls):
        return settings_converter.structure(
            {
                "_path": "test.settings.json",
                "keymap": KEYMAP,
                "buffer_limit": 5,
                "max_rig_cameras": 4,
                "scene_overflow": "clamp",
                "scene_wrap_from": 999,
                "refocus_interval": 2.0,
                "initial_focus_delay": 0.1,
            },
            cls,
        )


settings_converter.register_structure_hook(Settings, make_dict_structure_fn(Settings, settings_converter))
