# chemistry/config/config_display.py
"""
Text formatting tags used in player-facing messages.
The renderer swaps these for colors; tests strip them.
"""

FORMAT_HIGHLIGHT = "[[HI]]"      # Green, for important information
FORMAT_SUCCESS = "[[OK]]"        # Green, for success messages
FORMAT_ERROR = "[[ERR]]"         # Red, for error messages
FORMAT_RESET = "[[/]]"           # Reset to default text color
