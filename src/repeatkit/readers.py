#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import json
import logging
from pathlib import Path
from typing import Any

import nestedtext as nt

from repeatkit.aliases import EventPayload
from repeatkit.constants import EVENTS_PAYLOAD_KEY
from repeatkit.events import AnchorEvent
from repeatkit.exceptions import ParseError

logger = logging.getLogger(__name__)


def load_json(path: str | Path):
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return data


def load_nestedtext(opath: Path | str) -> Any:
    """Read the context of a NestedText file."""
    with open(opath, "r", encoding="utf-8") as f:
        data = nt.load(f, top="any")
    return data


_LOADER_MAP = {"json": load_json, "nt": load_nestedtext}


def read_event_payloads(path: str | Path) -> list[EventPayload]:
    """Read the raw events stored in `path`.

    The file may contain a single event, a list of events or a batch of the
    form `{"events": [...]}`. The file extension selects the format.
    """
    path = Path(path)
    extension = path.suffix.lstrip(".")
    try:
        loader = _LOADER_MAP[extension]
    except KeyError:
        raise ValueError(f"Undefined loader for extension {extension}")
    data = loader(path)
    if isinstance(data, dict) and EVENTS_PAYLOAD_KEY in data:
        data = data[EVENTS_PAYLOAD_KEY]
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list) or not all(isinstance(e, dict) for e in data):
        raise ParseError(f"Could not find any events in {path}")
    logger.debug(f"Read {len(data)} events from {path}")
    return data


def read_anchor_events(path: str | Path) -> list[AnchorEvent]:
    return [AnchorEvent.model_validate(p) for p in read_event_payloads(path)]
