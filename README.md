# olimpiada

Short, self-contained solutions to introductory olympiad-style programming
problems: arithmetic exercises, number theory, small decision problems,
sequence and matrix puzzles, a call-centre scheduling simulation, and a
terminal hangman game.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

Every problem is a plain function that takes Python values and returns the
answer, so it can be used without going through standard input.

```python
from olimpiada.numbers import is_prime
from olimpiada.sequences import bubble_sort

is_prime(7)              # True
bubble_sort([5, 1, 4])   # [1, 4, 5]
```

The modules group the problems by kind:

- `olimpiada.arithmetic` – formulas and simple decisions: `grade_status`,
  `right_triangle_area`, `robot_basketball_points`, `cable_car_fits`,
  `divide`, `treasure_share`, `to_minutes`, `weighted_average`,
  `split_minutes`, `forgotten_grade`, `operate`, `floor_tiles`, `power`,
  `square_roots`, `installments`, `seesaw`, `chessboard_colour`, `pinball`,
  `fits_limit`, `balanced_mobile`. Integer divisions round toward zero, and
  floating divisions by zero give `inf` or `nan` instead of raising.
- `olimpiada.numbers` – `is_prime`, `is_composite`, `divisors`,
  `perfect_squares`, `open_lockers`.
- `olimpiada.choices` – picking among a few values: `odd_card`,
  `middle_age`, `largest`, `medal_order`, `odd_one_out`,
  `pokemon_capture`, `rectangles_collide`.
- `olimpiada.sequences` – problems over lists: `bubble_sort`,
  `minesweeper_counts`, `longest_run`, `digit_counts`,
  `queue_after_departures`, `element_sum`, `days_to_million`,
  `attempts_before_password`, `toggle_lamps`, `correct_answers`,
  `glasses_dropped`, `trapped_rain`, `colored_tape`.
- `olimpiada.matrices` – `largest_cross_sum`, and `magic_square_sum`, which
  returns the magic constant or `-1`.
- `olimpiada.telemarketing` – `distribute_calls`, which assigns pending
  calls to sellers and returns how many calls each seller took.
- `olimpiada.hangman` – `HangmanGame` with its `guess` method, and `play`,
  which runs a full session over any pair of read and write callables.

Invalid input, such as an empty sequence where one value is needed or a
departure that is not in the queue, raises `ValueError`.

## Commands

Two commands are installed.

`olimpiada` reads whitespace-separated data from standard input and solves
one of three problems, chosen by a subcommand:

- `senha` – counts the attempts made before the code 2018 is entered.
- `algarismos` – reads a count `N` followed by `N` numbers and prints how
  many times each digit 0–9 appears, one `digit - count` line per digit.
- `operacoes` – reads `M` (multiply) or `D` (divide) and two numbers, and
  prints the result with two decimals; any other operation prints nothing.

```
echo "1234 99 2018" | olimpiada senha        # 2
echo "M 2.5 4" | olimpiada operacoes         # 10.00
olimpiada --help
```

When the input is incomplete or invalid, the command writes a message to
standard error and exits with status 1.

`olimpiada-forca` starts an interactive game of hangman (*jogo da forca*)
in the terminal, with prompts in Portuguese. One player types the secret
word, the other guesses letters; five wrong guesses lose the round. The
screen is cleared with ANSI escape codes between turns. The session ends
when the player answers `n` to "Quer jogar?" or the input runs out.

```
olimpiada-forca
```

## What the package does not do

Only the three problems above can be run from the `olimpiada` command; every
other problem is available as a library function alone and has no command
that reads its input from standard input.