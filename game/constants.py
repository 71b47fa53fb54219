"""Game constants shared across modules.

This module contains the fixed grid dimensions, dice faces and run length
used by the board, the legality engine and the turn driver.
"""

# Grid dimensions (9x9, row-major from the top-left square)
BOARD_WIDTH = 9
NUM_SQUARES = BOARD_WIDTH * BOARD_WIDTH

# Returned by rank/file queries for squares that are off the board
INVALID_SQUARE = -1

# Anchor starts in the bottom-left corner (a1)
START_SQUARE = NUM_SQUARES - BOARD_WIDTH

# Index differences that count as "touching" on a 9-wide row-major grid
TOUCHING_DIFFERENCES = frozenset({1, BOARD_WIDTH - 1, BOARD_WIDTH, BOARD_WIDTH + 1})

# Candidate squares produced per legality query (at most 2 are ever used)
MOVE_LIST_CAPACITY = 16

# Turns played after the priming turn
NUM_TURNS = 10000

# Die faces, one entry per face
DICE_FACES = ("CARROT", "CARROT", "CARROT", "CURVE", "CURVE", "STRAIGHT")

# File letters used by square labels (a1 is the bottom-left square)
FILE_LETTERS = "abcdefghi"

# Placeholder drawn for an empty square
EMPTY_SYMBOL = "."
