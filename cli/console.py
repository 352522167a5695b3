"""Console UI for flashcard application."""

import requests

from cli.api_client import FlashcardAPIClient, error_detail


class ConsoleUI:
    """Console user interface for flashcard application."""

    def __init__(self, client: FlashcardAPIClient, drill_mode: str = 'flashcard'):
        self.client = client
        self.drill_mode = drill_mode

    def print_words(self, data: dict):
        """Print the saved word list."""
        print('\n' + '=' * 40)
        print(f'SAVED WORDS ({data["total"]})')
        print('=' * 40)
        for word in data['words']:
            print(f'  {word["english"]:<20} {word["chinese"]}')
        print('=' * 40 + '\n')

    def print_card(self, card: dict):
        """Print a flashcard."""
        side = 'Chinese' if card['revealed'] else 'English'
        print('\n' + '-' * 30)
        print(f'  [{side}]  {card["face"]}')
        print('-' * 30)

    def prompt_save(self, english: str, chinese: str):
        """Ask whether to save a translated pair."""
        print(f'\nSave this word? {english} - {chinese}')
        choice = input('Save (y/n) ==> ').strip().lower()
        if choice not in ('y', 'yes'):
            print('Not saved.')
            return
        try:
            result = self.client.save_word(english, chinese)
        except requests.RequestException as e:
            print(f'Error saving word: {error_detail(e)}')
            return
        if result['added']:
            print(f'Saved. {result["total"]} words in your list.')
        else:
            print(f'"{result["word"]["english"]}" is already saved.')

    def query_word(self, english: str):
        """Translate a word and offer to save it."""
        print('Translating...')
        try:
            result = self.client.translate(english)
        except requests.RequestException as e:
            print(f'Translation failed: {error_detail(e)}')
            return
        print(f'Chinese: {result["chinese"]}')
        self.prompt_save(result['english'], result['chinese'])

    def run_flashcards(self):
        """Flashcard drill: random cards, flip to see the translation."""
        card = self.client.start_flashcards()
        if card['total'] == 0:
            print('No saved words yet.')
            return
        print('\nCommands: Enter to flip, "n" for next card, "q" to go back')
        self.print_card(card)
        while True:
            user_input = input('==> ').strip().lower()
            if user_input == 'q':
                return
            elif user_input == 'n':
                card = self.client.next_flashcard()
            else:
                card = self.client.reveal_flashcard()
            self.print_card(card)

    def run_quiz(self):
        """Quiz drill: type the Chinese for each English word in order."""
        state = self.client.start_quiz()
        if state['total'] == 0:
            print('No saved words yet.')
            return
        print('\nType the Chinese translation. "q" to go back')
        while True:
            print(f'\n>>> {state["prompt"]}')
            answer = input('==> ')
            if answer.strip().lower() == 'q':
                return
            state = self.client.answer_quiz(answer)
            if state['last_answer_correct']:
                print('Correct!')
            else:
                print(f'Wrong. Answer: {state["correct_answer"]}')
            state = self.client.advance_quiz()

    def run_drill(self):
        try:
            if self.drill_mode == 'quiz':
                self.run_quiz()
            else:
                self.run_flashcards()
        except requests.RequestException as e:
            print(f'Error during drill: {error_detail(e)}')

    def run(self):
        """Run the main application loop."""
        # Check server connection
        try:
            health = self.client.health_check()
            print(f"Connected to flashcard server ({health['service']})")
        except requests.RequestException:
            print(f"Error: Cannot connect to server at {self.client.base_url}")
            print("Make sure the server is running: python run_server.py")
            return

        print('\nEnter an English word to translate it.')
        print('Commands: "list" saved words, "drill" to practice, "exit" to quit\n')

        while True:
            user_input = input('==> ')
            command = user_input.strip().lower()

            if command == 'exit':
                print('Goodbye!')
                return

            elif command == 'list':
                try:
                    self.print_words(self.client.list_words())
                except requests.RequestException as e:
                    print(f'Error listing words: {error_detail(e)}')

            elif command == 'drill':
                self.run_drill()

            elif user_input == '':
                print('Please enter an English word.')

            else:
                self.query_word(user_input)
