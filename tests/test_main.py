import unittest
import io
import sys
import os
from contextlib import redirect_stdout, redirect_stderr

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from mazer.main import build_parser, main

class TestCLI(unittest.TestCase):
    def test_parser_defaults(self):
        args = build_parser().parse_args(["generate"])
        self.assertEqual((args.width, args.height), (25, 25))
        self.assertEqual(args.algo, "kruskal")
        self.assertEqual(args.braid, 0.3)
        self.assertEqual(args.extra, 0.05)
        self.assertFalse(args.visual)

    def test_headless_generate(self):
        with redirect_stdout(io.StringIO()):
            main(["generate", "--width", "6", "--height", "4", "--algo", "huntAndKill",
                  "--seed", "3", "--stats"])

    def test_invalid_config_exits(self):
        for argv in (["generate", "--width", "0"], ["generate", "--braid", "1.5"]):
            with self.subTest(argv=argv):
                with redirect_stderr(io.StringIO()):
                    with self.assertRaises(SystemExit):
                        main(argv)

    def test_benchmark_table(self):
        out = io.StringIO()
        with redirect_stdout(out):
            main(["benchmark", "--size", "6", "--seed", "1"])
        table = out.getvalue()
        for name in ("backtrack", "kruskal", "hunt_and_kill"):
            self.assertIn(name, table)
        # 6x6 perfect maze -> 35 passages on every row
        self.assertEqual(table.count("| 35"), 3)

if __name__ == '__main__':
    unittest.main()
