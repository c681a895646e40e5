import unittest

from dsl import load_scene
from grid_state import GridState
from scenes import get_scene, parse_scene, scene_lines
from simulation_state import SandState


class ScenesTest(unittest.TestCase):
    def test_column_scene_is_ten_wide_over_top_half(self):
        cells = get_scene("column", 32)
        self.assertEqual(len(cells), 160)
        self.assertEqual({x for x, _y in cells}, set(range(11, 21)))
        self.assertEqual({y for _x, y in cells}, set(range(16)))

    def test_funnel_ramps_stay_inside_grid(self):
        cells = get_scene("funnel", 32)
        self.assertEqual(len(cells), 256)
        self.assertIn((0, 0), cells)
        self.assertIn((31, 1), cells)
        self.assertNotIn((31, 0), cells)
        self.assertTrue(all(0 <= x < 32 and 0 <= y < 32 for x, y in cells))

    def test_default_scene_is_the_sand_block(self):
        self.assertEqual(get_scene("default", 32), get_scene("column", 32))

    def test_default_scene_starts_with_reference_counters(self):
        state = SandState(grid=GridState(32))
        load_scene(state, "default")
        self.assertEqual((state.filled_count, state.empty_count), (160, 864))
        self.assertFalse(state.grid.is_filled(0, 0))

    def test_column_funnel_is_union_of_column_and_funnel(self):
        cells = get_scene("column_funnel", 32)
        self.assertEqual(cells, get_scene("column", 32) | get_scene("funnel", 32))
        self.assertEqual(len(cells), 391)

    def test_empty_scene(self):
        self.assertEqual(get_scene("empty", 8), set())

    def test_unknown_scene(self):
        with self.assertRaises(KeyError):
            get_scene("nope", 8)

    def test_parse_ascii_scene(self):
        cells = parse_scene(["..o.", "....", "oo.."])
        self.assertEqual(cells, {(2, 0), (0, 2), (1, 2)})
        self.assertEqual(scene_lines(cells, 3), ["..o", "...", "oo."])


if __name__ == "__main__":
    unittest.main()
