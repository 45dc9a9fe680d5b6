"""
Configuration constants for the Mars robot simulation.

All tunable parameters in one place.
"""

# =============================================================================
# INPUT LIMITS
# =============================================================================

MAX_COORDINATE = 50  # Upper limit for either grid bound
MAX_INSTRUCTION_LENGTH = 100  # Characters per instruction line

# =============================================================================
# OUTPUT
# =============================================================================

LOST_MARKER = "LOST"

# =============================================================================
# LOGGING
# =============================================================================

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# =============================================================================
# STATISTICS
# =============================================================================

DEFAULT_STAT_RUNS = 20
MAX_RANDOM_ROBOTS = 10  # Robots per randomly generated mission
