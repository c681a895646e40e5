from typing import Tuple

Coord = Tuple[int, int]
Direction = Tuple[int, int]
