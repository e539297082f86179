"""Interactive terminal menu for triedict."""

from __future__ import annotations

from collections.abc import Callable

from triedict import __version__
from triedict.constants import PROGRAM_NAME
from triedict.dictionary import Dictionary
from triedict.errors import InvalidWordError

MENU = [
    ("1", "Display program details"),
    ("2", "Insert a word into the dictionary"),
    ("3", "List all words in the dictionary"),
    ("4", "Count the number of words in the dictionary"),
    ("5", "Check the membership of a word in the dictionary"),
    ("6", "Check the correctness of a list of words"),
    ("7", "Delete a word from the dictionary"),
    ("8", "Exit"),
]

# Options that read a line of words after the menu choice.
PROMPTS = {
    "2": "Enter a word: ",
    "5": "Enter a word: ",
    "6": "Enter a list of words, divided by spaces: ",
    "7": "Enter a word: ",
}


def _first_word(line: str) -> str | None:
    tokens = line.split()
    return tokens[0] if tokens else None


def about(dictionary: Dictionary, line: str = "") -> list[str]:
    return [f"{PROGRAM_NAME} {__version__} -- trie-backed dictionary and spell checker"]


def insert_word(dictionary: Dictionary, line: str) -> list[str]:
    word = _first_word(line)
    if word is None:
        return ["No word entered"]
    try:
        inserted = dictionary.add(word)
    except InvalidWordError as exc:
        return [f"Invalid word: {exc.word}"]
    return ["Word inserted" if inserted else "Word already exists"]


def list_words(dictionary: Dictionary, line: str = "") -> list[str]:
    words = list(dictionary)
    return words or ["Dictionary is empty"]


def count_words(dictionary: Dictionary, line: str = "") -> list[str]:
    return [f"Membership is {len(dictionary)}"]


def check_word(dictionary: Dictionary, line: str) -> list[str]:
    word = _first_word(line)
    if word is None:
        return ["No word entered"]
    return ["Word found" if word in dictionary else "Word not found"]


def check_words(dictionary: Dictionary, line: str) -> list[str]:
    mistakes = dictionary.check_text(line)
    if not mistakes:
        return ["No spelling mistakes"]
    return [f"Spelling mistake {w}" for w in mistakes]


def delete_word(dictionary: Dictionary, line: str) -> list[str]:
    word = _first_word(line)
    if word is None:
        return ["No word entered"]
    return ["Word deleted" if dictionary.remove(word) else "Word not present"]


ACTIONS: dict[str, Callable[[Dictionary, str], list[str]]] = {
    "1": about,
    "2": insert_word,
    "3": list_words,
    "4": count_words,
    "5": check_word,
    "6": check_words,
    "7": delete_word,
}


def print_menu() -> None:
    print()
    print("Select an option from the following:")
    for key, label in MENU:
        print(f"  {key}. {label}")


def run_cli(dictionary: Dictionary) -> None:
    """Menu loop; returns on option 8, EOF or Ctrl-C."""
    while True:
        print_menu()
        try:
            choice = input("Enter a selection: ").strip()
            if choice == "8":
                break
            action = ACTIONS.get(choice)
            if action is None:
                print("Invalid menu option")
                continue
            line = input(PROMPTS[choice]) if choice in PROMPTS else ""
        except (EOFError, KeyboardInterrupt):
            print()
            break

        for out in action(dictionary, line):
            print(out)
