#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import nestedtext as nt
from inform import fatal, os_error

from repeatkit.constants import DEFAULT_JSON_INDENT, EVENTS_PAYLOAD_KEY
from repeatkit.events import EventForm


def save_json(data: Any, path: str | Path, indent: int = DEFAULT_JSON_INDENT):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)


def save_nestedtext(data: Any, opath: Path | str):
    """Save data in NestedText format."""

    try:
        with open(opath, "w", encoding="utf-8") as f:
            nt.dump(data, f, default=str)
    except nt.NestedTextError as e:
        e.terminate()
    except OSError as e:
        fatal(os_error(e))


def events_batch(events: Sequence[EventForm]) -> dict[str, list[dict[str, Any]]]:
    """The body of a create-many request for `events`."""
    return {EVENTS_PAYLOAD_KEY: [e.to_payload() for e in events]}


def save_events_batch(
    events: Sequence[EventForm],
    path: str | Path,
    indent: int = DEFAULT_JSON_INDENT,
):
    """Write `events` as a single batch. The extension of `path` selects
    JSON or NestedText output."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix == ".nt":
        save_nestedtext(events_batch(events), path)
    else:
        save_json(events_batch(events), path, indent=indent)
