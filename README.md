# basicgames

A handful of small games. Four of them run in the terminal. Three open a
window through pygame.

## Installation

```
pip install .
```

To install and run the test suite:

```
pip install ".[test]"
pytest
```

## Terminal games

### Tic-tac-toe

```
basicgames-tictactoe
```

You play `o` and the computer plays `x`. A random draw decides who moves first.
The cells are numbered 0 to 8, and on your turn you type a cell number. If you
type something that is not a free cell from 0 to 8, you are asked again.

The computer chooses its move in this order:

1. It completes or blocks a line that already holds two of the same mark.
2. Otherwise it takes the centre, or else the first free corner in the order 0, 2, 6, 8.
3. Otherwise it takes the first free cell.

The game ends in one of two ways. Either somebody has three in a row, or no
line is left that still has two free cells or two matching marks with no
opposing mark. The second case is reported as a tie.

### Guess my number

```
basicgames-guess-number
```

The number is fixed at 10. After each wrong guess you are told whether the
number is lower or higher. Input that is not a whole number does not count as a
guess. When you find the number, you are told how many guesses it took.

### Word jumble

```
basicgames-word-jumble
```

You are shown a word with its letters shuffled, and you type the real word.
Your score for a word starts at its length.

- `hint` shows a clue and costs one point.
- A correct answer starts a new word.
- `quit` shows the answer and ends the game.

### Tamagochi farm

```
basicgames-tamagochi
```

The farm starts with two pets, Richard and Willy. At each prompt you type one
of these commands:

- `listen`: the chosen pet says how hungry and how bored it is.
- `feed`: the chosen pet's hunger drops by 3.
- `play`: the chosen pet's boredom drops by 3.
- `pass`: time passes for Richard.
- `create`: adds a new pet with a name you type.
- `quit`: ends the game.

`listen`, `feed` and `play` each raise that pet's hunger and boredom by one
afterwards. `pass` does the same for Richard.

## Window games (pygame)

### Pong

```
basicgames-pong
```

You move the left paddle with `z` (up) and `s` (down). The computer moves the
right paddle by following the ball. The first side to reach 7 points wins.
After that the window stays open until you close it.

The sound files `victory.wav`, `paddleHit.wav` and `score.wav` are played if
they are in the working directory. If they are missing, the game stays silent.

### Brick Breaker

```
basicgames-brickbreaker [LEVEL_DIR]
```

The levels are read from `scene00.txt`, `scene01.txt` and `scene02.txt` in
`LEVEL_DIR`, which defaults to the current directory. A level file looks like
this:

```
size=4,100,60,160,60,
```

`size` is the number of values that follow. The values are pairs of brick
coordinates, `x,y`. A file that does not begin with `size=` holds no bricks.

Move the paddle with `q` (left) and `s` (right). While the ball rests on the
paddle, your first key press launches it diagonally in that direction. The
counter in the corner starts at 5 and drops each time the ball falls past the
bottom edge. The game ends when it would drop below 0. Clearing every brick
loads the next level. Clearing the last level ends the game.

### Space Rogue

```
basicgames-space-rogue
```

This shows a 4×4 grid of sectors. Each sector is one of these kinds:

- start
- end
- uncharted space
- civilised space
- asteroid field

Each sector has its own randomly laid out local map of encounter sites. The
sites are coloured by kind: stranded ship, trade beacon, wreckage or live ship.
Hovering over a site or sector outlines it. Clicking a sector shows its local
map.

## What the games do not do

- Space Rogue has no play beyond browsing maps. Clicking a local-map site
  starts no encounter. The ship is neither moved nor drawn.
- Pong and Brick Breaker have no menu and no restart. When a game is over, you
  start the command again.
- Brick Breaker plays no sounds. It does not ship with level files.
- Tic-tac-toe has no two-player mode.

## Using the pieces from Python

The game rules do not depend on a display, so you can drive them from your own
code:

```python
import random
from basicgames.tictactoe import new_board, cpu_move, format_board
from basicgames.tamagochi import Tamagochi, Farm
from basicgames.brickbreaker_scene import parse_level
from basicgames.general_map import GeneralMap

board = new_board()
print(format_board(board))
print(cpu_move(board))          # 4: the centre

farm = Farm()
farm.add(Tamagochi("Richard"))
print(farm.roll_call())         # ['Richard']

print(parse_level("size=4,100,60,160,60,"))   # [(100, 60), (160, 60)]

galaxy = GeneralMap(random.Random(1))
galaxy.generate()
print([node.loc_type.name for node in galaxy.nodes])
```

The Pong rules are in `basicgames.pong.PongMatch`. The Brick Breaker rules are
in `basicgames.brickbreaker_scene.Scene` and `basicgames.brickbreaker.BrickBreaker`.
Each of these has an `update()` method that advances one frame.