MATRIX_SIZE = 32
CELL_SIZE = 8
STEP_MS = 30
ADD_RADIUS = 3

ANGLE_MIN = -360
ANGLE_MAX = 360

WINDOW_SIZE = (512, 512)
FPS = 60

SAND_COLOR = (255, 200, 0)
CLEAR_COLOR = (255, 255, 255)
GRID_LINE_COLOR = (0, 0, 0, 50)
BORDER_COLOR = (0, 0, 0)

FILLED_CHAR = "#"
EMPTY_CHAR = "."
