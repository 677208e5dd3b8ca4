"""
find E - Configuration
"""

import logging

# Search
DEFAULT_MAX_ERROR  = 0.01    # 1 % when -err is not given
FIRST_SERIES       = 3       # E3 is the coarsest series tried
SERIES_LIMIT       = 0xFFFF  # stop doubling once n * 2 reaches this
SYNTHETIC_DECIMALS = 3       # rounding of synthesized series members (n > 24)

# Console table
TABLE_WIDTH = 41             # including both border characters

# 256-colour ANSI palette indices
COLOR_TITLE = 214   # orange banner text
COLOR_VALUE = 76    # green values / series name
COLOR_ERROR = 190   # yellow-green error figures
COLOR_FAIL  = 196   # red failure banner

# Logging goes to stderr so it never mixes with the tables on stdout.
LOG_LEVEL = logging.WARNING
