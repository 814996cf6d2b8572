# Board
GRID_WIDTH = 16
GRID_HEIGHT = 16
INITIAL_LENGTH = 3

# Timing (seconds unless noted)
TICK_RATE = 10.0        # ticks per second
POLL_INTERVAL = 0.005   # idle sleep between input polls
DEATH_PAUSE = 1.0       # how long the end screen stays up
ESCAPE_TIMEOUT = 0.01   # wait for the rest of an arrow-key sequence

# Keys -> Direction member names
KEY_BINDINGS = {
    "w": "UP",
    "s": "DOWN",
    "a": "LEFT",
    "d": "RIGHT",
}

ARROW_KEYS = {
    "\x1b[A": "UP",
    "\x1b[B": "DOWN",
    "\x1b[D": "LEFT",
    "\x1b[C": "RIGHT",
    # application cursor mode
    "\x1bOA": "UP",
    "\x1bOB": "DOWN",
    "\x1bOD": "LEFT",
    "\x1bOC": "RIGHT",
}

# Tile styles used by ui.board
TILE_STYLES = {
    "empty": "",
    "food": "bold red",
    "snake": "green",
}
BORDER_STYLE = "dim"
