"""Options shared by the manager, the frame driver and the CLI."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

logger = logging.getLogger(__name__)

OPTIONS_FILE = Path("tweenline_options.json")


@dataclass
class AnimationOptions:
    default_ease: str = "linear"
    time_scale: float = 1.0
    target_fps: int = 60
    loop: bool = False
    log_level: str = "INFO"
    log_file: str = "tweenline.log"


def load_options(path: str | Path = OPTIONS_FILE) -> AnimationOptions:
    """Read options from ``path``, falling back to defaults on any problem."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load options: %s", exc)
        return AnimationOptions()
    if not isinstance(data, dict):
        logger.warning("Failed to load options: expected an object, got %s", type(data).__name__)
        return AnimationOptions()
    known = {f.name for f in fields(AnimationOptions)}
    unknown = sorted(set(data) - known)
    if unknown:
        logger.warning("Ignoring unknown options: %s", ", ".join(unknown))
    return AnimationOptions(**{k: v for k, v in data.items() if k in known})


def save_options(options: AnimationOptions, path: str | Path = OPTIONS_FILE) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(asdict(options), f, indent=2)
    except OSError as exc:
        logger.warning("Failed to save options: %s", exc)


__all__ = ["OPTIONS_FILE", "AnimationOptions", "load_options", "save_options"]
