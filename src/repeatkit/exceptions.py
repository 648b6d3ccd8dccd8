#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
class ParseError(Exception):
    pass


class EventDefinitionError(Exception):
    pass


class ValidationError(EventDefinitionError):
    """Raised when a repeating rule has a non-positive interval."""
