import unittest
import sys
import os

# Headless SDL so the renderer can run without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from mazer.core.grid import Grid
from mazer.engine import MazeConfig, generate
from mazer.viz.replay import StepAdapter

class TestViewer(unittest.TestCase):
    def test_replay_window_runs_to_completion(self):
        """Replays a whole step log through the pygame renderer headlessly."""
        try:
            from mazer.viz.renderer import Renderer
        except ImportError as e:
            self.skipTest(f"Viewer dependencies unavailable: {e}")

        config = MazeConfig(8, 6, "hunt_and_kill", braiding_factor=0.3, extra_wall_removal=0.05)
        grid, steps = generate(config, seed=5, record_steps=True)

        display = Grid(grid.width, grid.height)
        adapter = StepAdapter(display, steps)
        renderer = Renderer(display, adapter=adapter, delay_ms=0, width=320, height=240,
                            close_when_done=True)
        try:
            renderer.init_window()
        except Exception as e:
            self.skipTest(f"pygame could not open a dummy display: {e}")

        renderer.run_loop()

        self.assertTrue(renderer.replay_finished)
        self.assertEqual(adapter.applied, len(steps))
        self.assertEqual(display.cells.tobytes(), grid.cells.tobytes())

    def test_delay_paces_steps(self):
        try:
            from mazer.viz.renderer import Renderer
        except ImportError as e:
            self.skipTest(f"Viewer dependencies unavailable: {e}")

        config = MazeConfig(5, 5, "backtrack", braiding_factor=0, extra_wall_removal=0)
        _, steps = generate(config, seed=2, record_steps=True)
        adapter = StepAdapter(Grid(5, 5), steps)
        renderer = Renderer(Grid(5, 5), adapter=adapter, delay_ms=15.0)

        it = adapter.run()
        renderer.advance(40.0, it)    # two whole steps, 10ms carried over
        self.assertEqual(adapter.applied, 2)
        renderer.advance(5.0, it)     # 15ms banked -> one more
        self.assertEqual(adapter.applied, 3)
        self.assertFalse(renderer.replay_finished)

if __name__ == '__main__':
    unittest.main()
