"""A console game of hangman for two players sharing one keyboard."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from typing import TextIO

TRIES = 5
_WRONG_WIDTH = 25
_CLEAR = "\x1b[2J\x1b[H"
_BODY = {
    4: "CABECA",
    3: "CABECA E TRONCO",
    2: "CABECA, TRONCO E BRACOS",
    1: "CABECA, TRONCO, BRACOS E PERNAS",
}


class HangmanGame:
    """State of one round: the secret word, revealed letters, misses and tries left."""

    def __init__(self, word: str, tries: int = TRIES) -> None:
        if not word:
            raise ValueError("the word must not be empty")
        self.word = word
        self.tries = tries
        self.wrong_letters: list[str] = []
        self.hits = 0
        self._revealed = ["_"] * len(word)

    @property
    def revealed(self) -> str:
        """The word with unguessed letters shown as underscores."""
        return "".join(self._revealed)

    @property
    def won(self) -> bool:
        return self.hits == len(self.word)

    @property
    def lost(self) -> bool:
        return self.tries <= 0

    @property
    def finished(self) -> bool:
        return self.won or self.lost

    def guess(self, letter: str) -> int:
        """Try a letter and return how many positions of the word it fills."""
        if len(letter) != 1:
            raise ValueError("a guess must be a single character")
        if self.finished:
            raise ValueError("the game is over")
        matches = 0
        for index, char in enumerate(self.word):
            if char == letter:
                self._revealed[index] = letter
                matches += 1
        self.hits += matches
        if not matches:
            self.tries -= 1
            self.wrong_letters.append(letter)
        return matches


def _wrong_display(game: HangmanGame) -> str:
    return "".join(game.wrong_letters).ljust(_WRONG_WIDTH)


def _play_round(
    game: HangmanGame, read: Callable[[], str], write: Callable[[str], object]
) -> bool:
    """Play one word to the end; False if the input ran out."""
    while not game.won:
        write(
            f"Voce tem {game.tries} tentativas. "
            f"Letra erradas: {_wrong_display(game)}\n\n"
        )
        write("Digite uma letra: ")
        token = read()
        if not token:
            return False
        write("\n")
        game.guess(token[0])
        write(_CLEAR)
        write(f"{game.revealed}\n\n")
        if game.won:
            write("VOCE VENCEU\n\n")
        body = _BODY.get(game.tries)
        if body:
            write(f"{body}\n\n")
        if game.lost:
            write(_CLEAR)
            write(f"A palavra era: {game.word}\n\n")
            write("VOCE PERDEU\n\n")
            break
    return True


def play(read: Callable[[], str], write: Callable[[str], object]) -> None:
    """Run games until the player declines or ``read`` returns an empty string."""
    while True:
        write("JOGO DA FORCA\n\n")
        write("Quer jogar? Digite 's' para sim ou 'n' caso contrario: ")
        choice = read()
        if not choice:
            return
        write("\n")
        option = choice[0]
        if option in "nN":
            return
        if option not in "sS":
            write(_CLEAR)
            continue
        write("Digite a palavra: ")
        word = read()
        if not word:
            return
        write("\n")
        write(_CLEAR)
        game = HangmanGame(word)
        write(f"{game.revealed}\n\n")
        if not _play_round(game, read, write):
            return
        write(_CLEAR)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Play hangman on the terminal."""
    parser = argparse.ArgumentParser(prog="forca", description="Play hangman.")
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)

    def write(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    play(lambda: next(tokens, ""), write)
    return 0