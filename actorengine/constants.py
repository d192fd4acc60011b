"""Mathematical constants shared across the engine."""

PI = 3.14159265358979
TWO_PI = 2 * PI
DEG_TO_RAD = PI / 180.0
RAD_TO_DEG = 180.0 / PI

# Single-precision variants; Python floats are all double precision,
# so these carry the same values under the names the math code uses.
PI_F = PI
TWO_PI_F = 2 * PI_F
DEG_TO_RAD_F = PI_F / 180.0
RAD_TO_DEG_F = 180.0 / PI_F