# chrust

A small chess engine. White is the human side. Black is played by a minimax
search with alpha-beta pruning. You can play in the terminal, or start a
Flask server that answers moves through a JSON API.

## Installation

```
pip install .
```

## Running

```
chrust [options]
```

| Option | Values | Default | Meaning |
| --- | --- | --- | --- |
| `-z`, `--visualization_mode` | `TERM` or `WEB` | `WEB` | Play in the terminal or start the web server |
| `-h`, `--human_plays` | `true` or `false` | `true` | If `false`, the white side makes random moves |
| `-t`, `--tick_speed` | non-negative integer | `1000` | Pause in milliseconds before the AI's move when White plays randomly |
| `-p`, `--num_plies` | non-negative integer | `3` | Search depth that the web API's `process` endpoint uses |
| `-V`, `--version` | | | Print the version and exit |
| `--help` | | | Print the help text and exit |

`-h` selects the human side. It does not show help. An invalid value prints
`Error: ...` to standard error, and the command exits with status 1.

### Terminal mode (`-z TERM`)

The game starts from the standard opening position. After each move the
board is printed with Unicode piece symbols, followed by a FEN line.

When `--human_plays true` is set, you make each move in three steps:

1. Enter the file letter of your piece.
2. Enter its rank number.
3. Enter the number of one of the listed destination squares.

If your input cannot be used, you are asked again. A choice number that is
out of range stops the game with an error.

In terminal mode the AI always searches at depth 2, whatever `-p` says. The
game ends when a king has been captured, and then `Winner: <name>` is printed.
The players are named `kasparov` (White) and `rusty` (Black).

### Web mode (`-z WEB`)

A Flask server starts on `127.0.0.1:8000`. It has these JSON routes:

- `POST /chrust/api/process/<fen>`: Black answers the position, searching
  `--num_plies` deep. The response is the piece-placement section of the new
  position as plain text.
- `GET /chrust/api/possible/<fen>/<location>`: returns
  `{"options": [{"x": "e", "y": 3}, ...]}`, the squares that the white piece
  on `location` (for example `e2`) can reach. The list is empty for a black
  piece or an invalid request.
- `GET /chrust/api/validate/<fen>/<from>/<to>`: returns
  `{"is_valid": true|false}` for a white move.
- `GET /chrust/api/settings`: returns the options the program was started
  with.

The server also has routes for a browser page: `/chrust/`,
`/chrust/js/chrust.js`, `/chrust/css/chrust.css` and
`/img/chesspieces/wikipedia/<piece>.png`. These read their files from a
`static` directory inside the package.

## What it does not include

The package does not ship the browser page, script, stylesheet or piece
images. Those routes return 404 until the files are placed under
`chrust/static/` (`index.html`, `js/chrust.js`, `css/chrust.css`,
`img/chesspieces/wikipedia/*.png`). The JSON API works without them.

## Using it as a library

```python
from chrust.board import Board
from chrust.pieces import Color
from chrust.minimax import max_decision

board = Board.load("game_start")          # or "empty_board"
move = max_decision(board, Color.BLACK, 2)
print(board.apply_action(move).fen_section())
```

The modules:

- `chrust.pieces`: `Color`, `PieceType`, `ChessPiece` and `Cell`.
- `chrust.coordinate`: `Coordinate`, with `Coordinate.parse("e2")` and
  methods that shift a square in a direction.
- `chrust.movegen`: `available_moves(piece, position, board)`.
- `chrust.board`:
  - `Board`, with `from_fen`, `fen_section`, `possible_moves`,
    `all_possible_moves`, `apply_action`, `move_piece` and `render`.
  - `PieceMove`.
  - `BoardError`, a subclass of `ValueError`.
- `chrust.evaluate`: `evaluate(board)`. Positive scores favour Black.
- `chrust.minimax`: `max_decision(board, color, max_depth)`. It prints the
  time the search took. It raises `NoMoveError` when there is no move.
- `chrust.game`:
  - `ChessGame`.
  - `process_fen`, `is_valid` and `valid_moves`, which take FEN strings and
    square names.
- `chrust.settings`: `parse_args`, `ProgramState` and `VizType`.
- `chrust.server`: `create_app(program_state)` and `run_frontend`.

## Rules it follows

Moves are generated for pawns, rooks, knights, bishops, queens and kings.
Castling, en passant, promotion, check and checkmate are not modelled, and a
game is won by capturing the opposing king. In the FEN line that
`ChessGame.fen()` prints, the castling field is always `KQkq` and the en
passant field is always `h3`.

## Tests

```
pip install .[test]
pytest
```