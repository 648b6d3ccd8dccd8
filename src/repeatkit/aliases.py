#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
# a calendar date in YYYY-MM-DD form, as found in event payloads
DateStr = str
# a wall clock time in HH:MM form; never interpreted by the engine
TimeStr = str
# minutes before the event start at which a notification fires
NotificationMinutes = int
# the JSON-compatible dict form of an event, camelCase keys
EventPayload = dict
