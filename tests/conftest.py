#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
from collections.abc import Callable

import pytest

from repeatkit.events import AnchorEvent
from tests.event_utils import anchor_event


@pytest.fixture
def make_event() -> Callable[..., AnchorEvent]:
    return anchor_event
