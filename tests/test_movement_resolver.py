import unittest

from grid_state import GridState
from movement_resolver import MovementResolver, TickOccupancy, direction_from_angle


def make_resolver(cells, direction, size=4):
    grid = GridState(size)
    grid.load(cells)
    occupancy = TickOccupancy(size)
    return grid, occupancy, MovementResolver(grid, occupancy, direction)


class DirectionTest(unittest.TestCase):
    def test_zero_angle_points_straight_down(self):
        self.assertEqual(direction_from_angle(0), (0, 1))

    def test_diagonal_quadrants(self):
        self.assertEqual(direction_from_angle(45), (1, 1))
        self.assertEqual(direction_from_angle(-45), (-1, 1))
        self.assertEqual(direction_from_angle(135), (1, -1))
        self.assertEqual(direction_from_angle(225), (-1, -1))
        self.assertEqual(direction_from_angle(-135), (-1, -1))

    def test_exact_axis_angles(self):
        self.assertEqual(direction_from_angle(-90)[0], -1)
        self.assertEqual(direction_from_angle(90)[0], 1)


class MovementResolverTest(unittest.TestCase):
    def test_straight_down_moves_one_row(self):
        grid, occupancy, resolver = make_resolver([(1, 1)], (0, 1))
        self.assertEqual(resolver.apply(1, 1), (1, 2))
        self.assertTrue(grid.is_empty(1, 1))
        self.assertTrue(grid.is_filled(1, 2))
        self.assertEqual(occupancy.writes, [(1, 2)])

    def test_horizontal_fallback_degenerates_without_dx(self):
        _grid, _occupancy, resolver = make_resolver([(1, 1), (1, 2)], (0, 1))
        primary, horizontal, vertical = resolver.candidates(1, 1)
        self.assertEqual(primary, (1, 2))
        self.assertEqual(horizontal, (1, 1))
        self.assertEqual(vertical, (1, 2))
        self.assertIsNone(resolver.resolve(1, 1))

    def test_diagonal_primary_wins(self):
        _grid, _occupancy, resolver = make_resolver([(1, 1)], (1, 1))
        self.assertEqual(resolver.resolve(1, 1), (2, 2))

    def test_diagonal_falls_back_to_horizontal(self):
        _grid, _occupancy, resolver = make_resolver([(1, 1), (2, 2)], (1, 1))
        self.assertEqual(resolver.resolve(1, 1), (2, 1))

    def test_diagonal_falls_back_to_vertical(self):
        _grid, _occupancy, resolver = make_resolver([(1, 1), (2, 2), (2, 1)], (1, 1))
        self.assertEqual(resolver.resolve(1, 1), (1, 2))

    def test_no_candidate_means_no_move(self):
        grid, occupancy, resolver = make_resolver([(1, 1), (2, 2), (2, 1), (1, 2)], (1, 1))
        self.assertIsNone(resolver.apply(1, 1))
        self.assertTrue(grid.is_filled(1, 1))
        self.assertEqual(occupancy.writes, [])

    def test_grid_edges_block_every_candidate(self):
        _grid, _occupancy, resolver = make_resolver([(3, 3)], (1, 1))
        self.assertIsNone(resolver.resolve(3, 3))

    def test_marked_cell_is_rejected_even_when_empty(self):
        _grid, occupancy, resolver = make_resolver([(1, 1)], (1, 1))
        occupancy.mark(2, 2)
        self.assertEqual(resolver.resolve(1, 1), (2, 1))

    def test_malformed_direction_is_rejected(self):
        grid = GridState(4)
        with self.assertRaises(ValueError):
            MovementResolver(grid, TickOccupancy(4), (2, 0))

    def test_occupancy_rejects_out_of_range_coordinates(self):
        occupancy = TickOccupancy(4)
        with self.assertRaises(IndexError):
            occupancy.is_marked(-1, 0)
        with self.assertRaises(IndexError):
            occupancy.mark(0, 4)
        self.assertEqual(occupancy.writes, [])
        self.assertFalse(occupancy.is_marked(3, 0))

    def test_double_mark_is_rejected(self):
        occupancy = TickOccupancy(4)
        occupancy.mark(0, 0)
        with self.assertRaises(ValueError):
            occupancy.mark(0, 0)


if __name__ == "__main__":
    unittest.main()
