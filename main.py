"""
Command-line entry point: prints the sum of ids of the possible games.
"""

import logging

from config import LOG_FORMAT
from loader import extract_input_lines
from analytics import format_answer, solve


def main() -> None:
    """Run the whole pipeline over the bundled input; errors are left to propagate."""
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    result = solve(extract_input_lines())
    print(format_answer(result))


if __name__ == "__main__":
    main()
