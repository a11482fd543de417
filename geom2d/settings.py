# geom2d global settings

# Linear tolerance used by are_near/are_same when no eps is passed
LINEAR_EPSILON = 1e-9
ANGULAR_EPSILON = 1e-9  # radians, sine of the largest angle treated as parallel
PARAMETRIC_EPSILON = 1e-9

# Samples used to approximate Bezier arc length
BEZIER_LENGTH_SAMPLES = 1024
