"""guessgame — a small command-line number-guessing game.

A secret number is drawn from an injectable number source and the player
guesses until they get it right or type 'quit'. A numbered text menu sits
in front of the game so several rounds can be played in one session.

Usage:
    python -m guessgame                      # Menu session
    python -m guessgame play --max 50        # Menu session, narrower range
    python -m guessgame round --secret 7     # One round, fixed secret
"""

__version__ = "0.1.0"
