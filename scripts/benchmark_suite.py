import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from mazer.engine import ALGORITHMS, MazeConfig, generate
from mazer.core.complexity import MazePostProcessor

def benchmark_size(width: int, height: int, seed: int = 42):
    print(f"\n--- Benchmarking {width}x{height} ({width*height:,} cells) ---")
    print(f"{'ALGORITHM':<15} | {'GEN (s)':<8} | {'FULL (s)':<9} | {'DEAD ENDS':<9} | {'AFTER':<6} | {'STEPS':<8}")
    print("-" * 70)

    for name in ALGORITHMS:
        # Perfect maze first, then the same seed with the default relaxation
        perfect = MazeConfig(width, height, name, braiding_factor=0.0, extra_wall_removal=0.0)
        t0 = time.time()
        grid, _ = generate(perfect, seed=seed)
        gen_time = time.time() - t0
        before = MazePostProcessor.calculate_stats(grid)

        relaxed = MazeConfig(width, height, name)
        t0 = time.time()
        grid, steps = generate(relaxed, seed=seed, record_steps=True)
        full_time = time.time() - t0
        after = MazePostProcessor.calculate_stats(grid)

        print(f"{name:<15} | {gen_time:<8.4f} | {full_time:<9.4f} | "
              f"{before['dead_ends']:<9} | {after['dead_ends']:<6} | {len(steps):<8}")

def run_suite():
    sizes = [
        (25, 25),      # game size
        (100, 100),
        (150, 150),
    ]

    for w, h in sizes:
        benchmark_size(w, h)

if __name__ == "__main__":
    run_suite()
