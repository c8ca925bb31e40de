"""
Centralized constants for the indicator library.

Default periods are the conventional horizons each indicator is built
with when no period is given. They are also the fallback values for the
environment-driven defaults in config.py.
"""


# ==================== Default Periods ====================

DEFAULT_EMA_PERIOD = 9
DEFAULT_DEMA_PERIOD = 9
DEFAULT_TRIX_PERIOD = 15


# ==================== Numeric Tolerances ====================

# Accumulated volume below this magnitude is treated as zero by VWAP,
# which then publishes the raw accumulated price-volume sum.
VOLUME_EPSILON = 1e-4

# Scale factor for rate-of-change outputs (percent).
PERCENT = 100.0


# ==================== Environment Variables ====================

ENV_PREFIX = "TASTREAM_"
