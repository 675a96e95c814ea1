"""Exit codes used by the command-line tool.

Each error category maps to its own code so callers can tell them apart
without reading messages.
"""

SUCCESS = 0
IO_ERROR = 1
USAGE_ERROR = 2
PARSE_ERROR = 3
