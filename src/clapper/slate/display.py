from .cameras import camera_letter
from .letters import format_letters
from .slatetypes import SlateSnapshot, TakeMode

# the roll block only has room for this many camera lines
VISIBLE_CAMERA_LINES = 4

TAKE_MODE_LABELS = {
    TakeMode.NORMAL: "",
    TakeMode.SERIES: "SERIES",
    TakeMode.ONLY_SERIES: "ONLY SERIES",
    TakeMode.REHEARSAL: "REHEARSE",
    TakeMode.PLATE: "PLATE",
}


def roll_lines(snapshot: SlateSnapshot) -> list[str]:
    visible = min(snapshot.num_cams, VISIBLE_CAMERA_LINES)
    return ["{}{:03}".format(camera_letter(index), snapshot.roll_values[index]) for index in range(visible)]


def camera_count_text(num_cams: int) -> str:
    return "{:02}".format(num_cams)


def scene_text(snapshot: SlateSnapshot) -> str:
    suffix = format_letters(snapshot.scene_letter, snapshot.scene_secondary_letter)
    if snapshot.dual_mode:
        return "{:02}.{:03}{}".format(snapshot.prefix_number, snapshot.scene_number, suffix)
    return "{:03}{}".format(snapshot.scene_number, suffix)


def take_text(take_number: int) -> str:
    return "{:02}".format(take_number)


def status_line(snapshot: SlateSnapshot) -> str:
    rolls = []
    for index, line in enumerate(roll_lines(snapshot)):
        marker = "*" if snapshot.num_cams > 1 and index == snapshot.current_cam_index else ""
        rolls.append(marker + line)
    parts = [
        "ROLL " + " ".join(rolls),
        "CAMS " + camera_count_text(snapshot.num_cams),
        "SCENE " + scene_text(snapshot),
        " ".join(filter(None, ["TAKE " + take_text(snapshot.take_number), TAKE_MODE_LABELS[snapshot.take_mode]])),
    ]
    if snapshot.code_visible:
        parts.append("[CODE]")
    return " | ".join(parts)
