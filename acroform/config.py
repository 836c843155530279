"""
Configuration settings for acroform-fields.
Consolidates constants shared by the field model and the command line.
"""

# Button appearance states
CHECKED_STATE = "Yes"
OFF_STATE = "Off"

# Command-line value parsing (case-insensitive)
TRUE_TOKENS = {"true", "yes", "on", "1", "x"}
FALSE_TOKENS = {"false", "no", "off", "0", ""}
LIST_SEPARATOR = ","

# Logging
LOG_LEVEL_ENV = "ACROFORM_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
