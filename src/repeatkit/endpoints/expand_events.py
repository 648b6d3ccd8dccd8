#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import datetime
import logging
from collections.abc import Iterable

import hydra
import pydantic
from inform import fatal
from omegaconf import DictConfig, OmegaConf

from repeatkit.aliases import EventPayload
from repeatkit.calendar_arithmetic import parse_date
from repeatkit.display import display_occurrences
from repeatkit.events import AnchorEvent, EventForm
from repeatkit.exceptions import EventDefinitionError, ParseError
from repeatkit.generator import create_repeating_events
from repeatkit.readers import read_event_payloads
from repeatkit.writers import save_events_batch

logger = logging.getLogger(__name__)


def expand_batch(
    payloads: Iterable[EventPayload], max_horizon: datetime.date
) -> tuple[list[EventForm], list[str]]:
    """Expand each repeating event in `payloads` into its occurrences.

    Events which do not repeat are kept as they are. Events which cannot be
    parsed or expanded are left out of the batch.

    Returns
    -------
    events
        The events to save, in input order and chronological order within
        each series.
    errors
        A message for each event left out of the batch.
    """
    events, errors = [], []
    for i, payload in enumerate(payloads):
        try:
            anchor = AnchorEvent.model_validate(payload)
            if not anchor.repeat.is_repeating:
                events.append(anchor)
                continue
            occurrences = create_repeating_events(anchor, max_horizon=max_horizon)
        except (pydantic.ValidationError, ParseError, EventDefinitionError) as e:
            logger.warning(f"Skipping event {i}: {e}")
            errors.append(f"event {i}: {e}")
            continue
        logger.info(f"Expanded {anchor} into {len(occurrences)} occurrences")
        events.extend(occurrences)
    return events, errors


@hydra.main(
    version_base=None,
    config_name="expand_events",
    config_path="pkg://repeatkit.configs.endpoints",
)
def expand_events(cfg: DictConfig):
    logger.debug(OmegaConf.to_yaml(cfg, resolve=True))
    max_horizon = parse_date(str(cfg.max_horizon))
    payloads = read_event_payloads(cfg.input_path)
    events, errors = expand_batch(payloads, max_horizon)
    if cfg.show:
        display_occurrences(events, title=str(cfg.input_path))
    if cfg.output_path is not None:
        save_events_batch(events, cfg.output_path, indent=cfg.indent)
        logger.info(f"Saved {len(events)} events to {cfg.output_path}")
    if errors:
        fatal(
            f"{len(errors)} of {len(payloads)} events could not be expanded:",
            *errors,
            sep="\n    ",
        )


if __name__ == "__main__":
    expand_events()
