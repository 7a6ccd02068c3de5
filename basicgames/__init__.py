"""Small games: tic-tac-toe, guess my number, word jumble and a pet farm in the terminal; Pong, Brick Breaker and Space Rogue with pygame."""

__version__ = "0.1.0"