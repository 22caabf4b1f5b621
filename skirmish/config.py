"""
Configuration - Environment driven defaults.

Command line flags override these values.
"""

import os


def _env_int(name, default):
    """Integer from the environment; unset or malformed values give the default."""
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


# Delay before each turn, in milliseconds
TURN_DELAY_MS = _env_int("SKIRMISH_TURN_DELAY_MS", 200)

# Colored narration on the console
COLOR_OUTPUT = os.getenv("SKIRMISH_COLOR", "1").lower() not in ("0", "false", "no", "off")

LOG_LEVEL = os.getenv("SKIRMISH_LOG_LEVEL", "WARNING").upper()
