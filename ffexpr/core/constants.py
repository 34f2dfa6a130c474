"""Separator and wrapper tokens of the ffmpeg filter-graph syntax."""

# Value separator: key=value
VALUE_SEPARATOR = "="
# Filter parameter separator: a=1:b=2
PARAMETER_SEPARATOR = ":"
# Filter graph (chain) separator
GROUP_SEPARATOR = ";"
# Filters inside one chain
PART_SEPARATOR = ","
# Flag lists: mv=pf+bf
APPEND_SEPARATOR = "+"
# Alternatives: format=gray|yuv420p
LIST_SEPARATOR = "|"

# Stream label brackets
INPUT_TOKEN_START = "["
INPUT_TOKEN_END = "]"

QUOTE = "'"

# Default (empty) wrapper around the argument part
ARGUMENT_WRAPPER: tuple[str, str] = ("", "")

# Renders for boolean options
TRUE = "true"
FALSE = "false"

# Floats with more decimal digits than this are rounded when rendered
MAX_DECIMAL_DIGITS = 3
