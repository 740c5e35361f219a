"""Constants used for YAML parsing of spline configurations."""

# Spline name key
NAME_KEY = "name"

# Boundary condition key
BOUNDARY_KEY = "boundary"

# Point keys
POINTS_KEY = "points"
X_KEY = "x"
Y_KEY = "y"

# File point keys
FILE_PATH_KEY = "file_path"
X_COLUMN_KEY = "x_column"
Y_COLUMN_KEY = "y_column"

# Query key
QUERIES_KEY = "queries"

# Solver keys
SOLVER_KEY = "solver"
PRECISION_KEY = "precision"
PIVOT_TOLERANCE_KEY = "pivot_tolerance"
STRICT_KEY = "strict"

# Automatically export all constants (those that don't start with underscore)
__all__ = [name for name in globals() if not name.startswith('_') and name.isupper()]
