"""Entry point for flashcard CLI client."""

import argparse
import sys

from cli.api_client import FlashcardAPIClient
from cli.console import ConsoleUI


def main():
    parser = argparse.ArgumentParser(description='Flashcard - English/Chinese vocabulary practice')
    parser.add_argument(
        '--server',
        default='http://localhost:8000',
        help='Server URL (default: http://localhost:8000)'
    )
    parser.add_argument(
        '--mode',
        choices=['flashcard', 'quiz'],
        default='flashcard',
        help='Drill mode (default: flashcard)'
    )
    args = parser.parse_args()

    client = FlashcardAPIClient(base_url=args.server)
    ui = ConsoleUI(client, drill_mode=args.mode)

    try:
        ui.run()
    except (KeyboardInterrupt, EOFError):
        print('\nGoodbye!')
        sys.exit(0)


if __name__ == '__main__':
    main()
