"""Constants for straitjacket."""

# Joins individual validation messages into one error message
VALIDATION_DELIMITER = "; "

# What call() does with an outcome nobody asked for
POLICY_DISCARD = "discard"
POLICY_WARN = "warn"
POLICY_RAISE = "raise"
MISSING_CONTINUATION_POLICIES = (POLICY_DISCARD, POLICY_WARN, POLICY_RAISE)
DEFAULT_MISSING_CONTINUATION_POLICY = POLICY_DISCARD

# Environment variable naming a YAML settings overlay
CONFIG_ENV_VAR = "STRAITJACKET_CONFIG"

# Logger namespace configured by setup_logging()
LOGGER_NAME = "straitjacket"
