import argparse
import os
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

from balloon_pop.core.runtime.game_loop import GameLoop
from balloon_pop.core.runtime.game_settings import Canvas, Display


def parse_size(value: str):
    try:
        w, h = map(int, value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, got '{value}'")
    return w, h


def main(argv=None):
    parser = argparse.ArgumentParser(description="Balloon Pop")
    parser.add_argument("--window", type=parse_size, default=(Display.WIDTH, Display.HEIGHT),
                        help="Window size WxH, e.g. 800x720")
    parser.add_argument("--canvas-width", type=int, default=Canvas.WIDTH, help="Play area width")
    parser.add_argument("--fps", type=int, default=Display.FPS, help="Frame cap")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible spawns")
    parser.add_argument("--config", default="balloons.json", help="Balloon tuning file")
    args = parser.parse_args(argv)

    GameLoop(
        window_size=args.window,
        canvas_width=args.canvas_width,
        fps=args.fps,
        seed=args.seed,
        config_file=args.config,
    ).run()


if __name__ == "__main__":
    main()
