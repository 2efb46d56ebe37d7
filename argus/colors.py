"""
ANSI color codes used for rendered chat and activity lines
"""

RESET = "\033[0m"
RED = "\033[31m"
TWITCH_PURPLE = "\033[38;2;145;70;255m"  # Twitch brand purple (#9146FF)
WHITE = "\033[97m"
PURPLE = "\033[35m"
CYAN = "\033[36m"

# Role colors for chat usernames
PRIVILEGED = RED
DEFAULT = TWITCH_PURPLE

# Activity feed colors
SUBSCRIBER = WHITE
CHEER = PURPLE
REDEMPTION = CYAN
