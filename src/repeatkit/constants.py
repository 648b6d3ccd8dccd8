#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import datetime

DATE_FORMAT = "%Y-%m-%d"
DEFAULT_MAX_HORIZON = datetime.date(2025, 10, 30)
"""Last date occurrences are generated up to when a rule has no end date."""
EVENTS_PAYLOAD_KEY = "events"
DEFAULT_JSON_INDENT = 2
