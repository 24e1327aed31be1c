# IN THIS FILE: ALL CONSTANTS (GRAMMAR, OUTPUT FORMAT, DIAGNOSTICS)

# -----------------------------------------------------------------------------
# 1. GRAMMAR
# -----------------------------------------------------------------------------
GRID_KEYWORD = "GRID"
OBSTACLE_KEYWORD = "OBSTACLE"
GRID_SEPARATOR = "x"            # GRID <width>x<height>
FIELD_SEPARATOR = " "           # Only plain spaces separate fields on a line
DIRECTION_LETTERS = "NESW"
COMMAND_LETTERS = "LRF"

# Largest accepted integer literal (signed 32-bit)
MAX_INT = 2_147_483_647

# -----------------------------------------------------------------------------
# 2. OUTPUT LINES
# -----------------------------------------------------------------------------
SUCCESS_LINE = "SUCCESS {x} {y} {d}"
# OUT OF BOUNDS carries no coordinates. Kept as-is for compatibility with
# existing consumers of the output, see DESIGN.md.
OUT_OF_BOUNDS_LINE = "OUT OF BOUNDS"
CRASHED_LINE = "CRASHED {x} {y}"
FAILURE_LINE = "FAILURE {x} {y} {d}"

PARSING_PREFIX = "Parsing: "
VALIDATION_PREFIX = "Validation: "

# -----------------------------------------------------------------------------
# 3. ASCII VISUALISATION
# -----------------------------------------------------------------------------
VIEW_RANGE = 2                  # Cells drawn on each side of the robot
DIRECTION_SYMBOLS = {"N": "^", "E": ">", "S": "v", "W": "<"}
OBSTACLE_SYMBOL = "O"

# -----------------------------------------------------------------------------
# 4. LOGGING
# -----------------------------------------------------------------------------
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"

# -----------------------------------------------------------------------------
# 5. TRAJECTORY PLOT
# -----------------------------------------------------------------------------
PLOT_FIGSIZE = (8, 8)
PLOT_DPI = 100
# Outcome kind -> marker colour for the journey's last state
OUTCOME_COLORS = {
    "SUCCESS": "green",
    "OUT OF BOUNDS": "orange",
    "CRASHED": "red",
    "FAILURE": "purple",
}
# Direction letter -> heading in degrees (matplotlib convention, 0 = +x)
HEADING_DEGREES = {"N": 90, "E": 0, "S": -90, "W": 180}
