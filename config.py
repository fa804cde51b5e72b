"""
Game configuration and constants.
"""

# Bag capacities: the most cubes of each color the elf could have in the bag
CAPACITIES = {
    "red": 12,
    "green": 13,
    "blue": 14,
}

# Input resource, bundled next to the modules
INPUT_RESOURCE = "input.txt"
INPUT_ENCODING = "utf-8"

# Messages
WRONG_INPUT_FILE_MESSAGE = "Erm... excuse me little elf, but those don't look like cubes."
ANSWER_TEMPLATE = "A-ha! The answer to your little game is: {total}"

# Line format delimiters
GAME_KEYWORD = "Game "
HEADER_SEPARATOR = ": "
ROUND_SEPARATOR = "; "
WITHDRAWAL_SEPARATOR = ", "
AMOUNT_SEPARATOR = " "

# Logging
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Colors for plotting
COLOR_MAP = {
    "Red": "#e41a1c",      # red
    "Green": "#4daf4a",    # green
    "Blue": "#377eb8",     # blue
}
