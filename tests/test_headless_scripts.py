import contextlib
import io
import textwrap
import unittest

import dsl
import main


def run_script_text(script_text: str, **kwargs):
    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        state = dsl.run_script(script_text, **kwargs)
    return state, buf.getvalue().strip()


class HeadlessScriptOutputsTest(unittest.TestCase):
    def test_single_grain_falls_one_row(self):
        _state, output = run_script_text("fill 1,1; tick", size=4)
        expected = textwrap.dedent(
            """
            Script complete
            Angle: 0 deg. | Cell Count: 16 | Empty Cells: 15 | Filled Cells: 1
               0123
             0 ....
             1 ....
             2 .#..
             3 ....
            """
        ).strip()
        self.assertEqual(output, expected)

    def test_wait_ms_converts_to_ticks(self):
        state, _output = run_script_text("fill 0,0\nwait_ms 90", size=4)
        self.assertEqual(list(state.grid.filled_cells()), [(0, 3)])

    def test_add_then_remove_leaves_grid_empty(self):
        state, _output = run_script_text("# add and take back\nangle 0; add; remove")
        self.assertEqual(state.grid.count_filled(), 0)
        self.assertEqual(state.filled_count, 0)
        self.assertEqual(state.empty_count, 1024)

    def test_angle_is_clamped(self):
        state, _output = run_script_text("angle 720", size=4)
        self.assertEqual(state.angle, 360)
        state, _output = run_script_text("angle -1000", size=4)
        self.assertEqual(state.angle, -360)

    def test_scene_command_loads_cells(self):
        state, _output = run_script_text("scene column")
        self.assertEqual(state.filled_count, 160)

    def test_out_of_range_fill_is_ignored(self):
        state, _output = run_script_text("fill 9,9; clear 5,-1", size=4)
        self.assertEqual(state.grid.count_filled(), 0)

    def test_bad_input_raises(self):
        with self.assertRaises(ValueError):
            run_script_text("explode")
        with self.assertRaises(ValueError):
            run_script_text("scene nowhere")
        with self.assertRaises(ValueError):
            run_script_text("fill 3")
        with self.assertRaises(ValueError):
            run_script_text("angle")


class MainHeadlessTest(unittest.TestCase):
    def test_headless_run_prints_summary(self):
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            main.main(["--headless", "--scene", "column", "--duration-ms", "30", "--size", "32"])
        lines = buf.getvalue().splitlines()
        self.assertEqual(lines[0], "Simulated 1 steps (~30 ms)")
        self.assertEqual(
            lines[1],
            "Angle: 0 deg. | Cell Count: 1024 | Empty Cells: 864 | Filled Cells: 160",
        )

    def test_script_argument_takes_precedence(self):
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            main.main(["--headless", "--scene", "empty", "--size", "4", "--script", "fill 2,0"])
        self.assertTrue(buf.getvalue().startswith("Script complete"))


if __name__ == "__main__":
    unittest.main()
