import sys
import time

from rich.console import Group
from rich.live import Live

from config import DEATH_PAUSE, GRID_HEIGHT, GRID_WIDTH, POLL_INTERVAL, TICK_RATE
from games.snake import GameState
from input_handler import KeyReader
from log import log, set_log_fn
from terminal import TerminalError, TerminalSession
import ui


def run_game(game, reader, draw, tick_rate=TICK_RATE, clock=time.monotonic, sleep=time.sleep):
    """
    Fixed-step loop: poll input every pass, advance the game once per
    1/tick_rate seconds, hand each new snapshot to `draw`.
    Returns once the game is over (dead or won).
    """
    interval = 1.0 / tick_rate
    last_update = clock()
    wanted = game.direction

    while not game.over:
        direction = reader.poll()
        if direction is not None:
            wanted = direction

        now = clock()
        if now - last_update >= interval:
            last_update = now
            # a reversal is just ignored; the snake keeps its heading
            game.set_direction(wanted)
            game.tick()
            draw(game.snapshot())
        else:
            sleep(POLL_INTERVAL)

    return game


def main():
    set_log_fn(ui.console.print)

    game = GameState(GRID_WIDTH, GRID_HEIGHT)
    fd = sys.stdin.fileno()

    try:
        with TerminalSession(fd):
            reader = KeyReader(fd)
            reader.start()

            with Live(console=ui.console, screen=True, auto_refresh=False) as live:
                live.update(ui.frame(game.snapshot()), refresh=True)
                run_game(game, reader, lambda snap: live.update(ui.frame(snap), refresh=True))

                final = game.snapshot()
                live.update(Group(ui.frame(final), ui.game_over_panel(final)), refresh=True)
                time.sleep(DEATH_PAUSE)
    except TerminalError as e:
        log(f"[bold red]❌ Terminal error:[/] {e}")
        return 1
    except KeyboardInterrupt:
        log("\n[yellow]Cancelled.[/]")
        return 0

    log(f"[bold]{ui.end_message(game.snapshot()).strip()}[/] Final length: [cyan]{game.length}[/]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
