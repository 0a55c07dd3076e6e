"""Solutions to introductory olympiad programming problems and a terminal hangman game."""

__version__ = "0.1.0"