"""Fixed zone layout and default lighting state."""

ZONE_COUNT = 8

DEFAULT_MODE = "off"
DEFAULT_CHANNEL_VALUE = 255

# Fields a PATCH request is allowed to overwrite.
PATCHABLE_FIELDS = ("mode", "r", "g", "b")

INVALID_ZONE_ID_MESSAGE = "Invalid zone id"
MALFORMED_BODY_MESSAGE = "Malformed JSON body"
