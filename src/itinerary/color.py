# SPDX-License-Identifier: MIT

# Calendar pill colors
RANGE_EDGE_STYLE = "bold black on green_yellow"
RANGE_BODY_STYLE = "black on dark_olive_green3"
UNAVAILABLE_DAY_STYLE = "bright_black"

# Timeline colors
PAST_ACTIVITY_COLOR = "bright_black"
UPCOMING_ACTIVITY_COLOR = "white"
HOUR_LABEL_COLOR = "cyan"

CONFIRMED_COLOR = "green"
PENDING_COLOR = "yellow"
ERROR_COLOR = "red"
