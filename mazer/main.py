import argparse
import sys
import os
import time
import logging

# Ensure project root is in path so we can import 'mazer' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from mazer.engine import ALGORITHMS, MazeConfig, MazeGenerator
from mazer.core.complexity import MazePostProcessor

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mazer: maze generator with animated replay")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--width", type=int, default=25, help="Maze Width")
    gen_parser.add_argument("--height", type=int, default=25, help="Maze Height")
    gen_parser.add_argument("--algo", type=str, default="kruskal",
                            choices=list(ALGORITHMS) + ["huntAndKill"], help="Generation Algorithm")
    gen_parser.add_argument("--braid", type=float, default=0.3, help="Braid Factor (0.0 - 1.0)")
    gen_parser.add_argument("--extra", type=float, default=0.05, help="Extra Wall Removal (0.0 - 1.0)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--visual", action="store_true", help="Replay generation in a window")
    gen_parser.add_argument("--delay", type=float, default=15.0, help="Milliseconds between replayed steps")
    gen_parser.add_argument("--record", action="store_true", help="Record the replay to video")
    gen_parser.add_argument("--stats", action="store_true", help="Log dead end / corridor statistics")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time every algorithm on one size")
    bench_parser.add_argument("--size", type=int, default=100, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser

def run_generate(args, parser, logger):
    try:
        maze = MazeGenerator(args.width, args.height, algorithm=args.algo,
                             braiding_factor=args.braid, extra_wall_removal=args.extra,
                             seed=args.seed)
    except ValueError as e:
        parser.error(str(e))

    record_steps = args.visual or args.record
    logger.info(f"Generating {args.width}x{args.height} maze with {maze.config.algorithm.upper()}...")

    t0 = time.time()
    grid = maze.generate(record_steps=record_steps)
    logger.info(f"Generation complete in {time.time() - t0:.4f}s")

    steps = maze.get_generation_steps()
    if record_steps:
        logger.info(f"Recorded {len(steps)} steps")

    if args.stats:
        logger.info(f"Stats: {MazePostProcessor.calculate_stats(grid)}")

    if record_steps:
        from mazer.core.grid import Grid
        from mazer.viz.replay import StepAdapter
        from mazer.viz.renderer import Renderer

        # Replay onto a blank copy; the engine's grid stays untouched
        display = Grid(grid.width, grid.height)
        adapter = StepAdapter(display, steps)
        renderer = Renderer(display, adapter=adapter,
                            start=maze.get_start_position(), exit_pos=maze.get_exit_position(),
                            delay_ms=args.delay, record=args.record,
                            close_when_done=args.record and not args.visual)

        if args.record:
            from mazer.viz.recorder import VideoRecorder
            if not os.path.exists("recordings"):
                os.makedirs("recordings")
            prefix = f"gen_{maze.config.algorithm}_{args.width}x{args.height}"
            renderer.recorder.output_file = VideoRecorder.default_filename(prefix)
            logger.info(f"Recording video to {renderer.recorder.output_file}")

        logger.info("Visual mode enabled - Opening window...")
        renderer.init_window()
        renderer.run_loop()

def run_benchmark(args, parser, logger):
    if args.size < 1:
        parser.error("--size must be at least 1")

    logger.info(f"Running Generator Benchmark (Size: {args.size}x{args.size})...")
    from mazer.engine import generate

    print(f"\n{'ALGORITHM':<15} | {'TIME (s)':<10} | {'DEAD ENDS':<10} | {'PASSAGES':<10}")
    print("-" * 55)

    for name in ALGORITHMS:
        config = MazeConfig(args.size, args.size, algorithm=name,
                            braiding_factor=0.0, extra_wall_removal=0.0)
        t_start = time.time()
        result = generate(config, seed=args.seed)
        duration = time.time() - t_start

        stats = MazePostProcessor.calculate_stats(result.grid)
        print(f"{name:<15} | {duration:<10.4f} | {stats['dead_ends']:<10} | {stats['passages']:<10}")

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("mazer")

    if args.command is None:
        parser.print_help()
        return

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        run_generate(args, parser, logger)
    elif args.command == "benchmark":
        run_benchmark(args, parser, logger)

if __name__ == "__main__":
    main()
