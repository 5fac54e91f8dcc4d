"""Application-wide constants.

Design constants of the scattering experiment live here so that
EngineConfig defaults and the UI share one source.
"""

APP_NAME = "Rutherford Scattering Simulator"
APP_VERSION = "0.1.0"
APP_ORGANIZATION = "Rutherford Lab"

# Window constraints
MIN_WINDOW_WIDTH = 1200
MIN_WINDOW_HEIGHT = 760

# Experiment canvas (render-surface pixels)
RENDER_WIDTH_PX = 900
RENDER_HEIGHT_PX = 520
RENDER_FILL_FRACTION = 0.9  # 2·b_max spans 90% of the height
START_X_FRACTION = 0.8  # particles start at 80% of the left half-width
FOIL_LENGTH_PX = 220
NUCLEUS_RADIUS_PX = 8
DETECTOR_RADIUS_PX = 220
PARTICLE_DOT_RADIUS_PX = 3

# Beam / target
PROJECTILE_Z = 2  # alpha particle
TARGET_Z = 79  # gold
PROJECTILE_MASS_AMU = 4.0

# Trajectory discretization
PRE_FRAME_COUNT = 24
POST_FRAME_COUNT = 120
FRAME_DT_S = 1e-17  # abstract animation timestep, not physically calibrated

# Display classification
LARGE_ANGLE_THRESHOLD_RAD = 0.2

# Simulation limits and UI defaults
MIN_PARTICLE_COUNT = 100
DEFAULT_PARTICLE_COUNT = 1000
DEFAULT_ENERGY_MEV = 5.0
DEFAULT_MAX_IMPACT_ANGSTROM = 1.0
DEFAULT_BIN_COUNT = 18

# Playback
PLAYBACK_INTERVAL_MS = 16  # ~60 fps
PLAYBACK_FRAME_WRAP = 6000
PLAYBACK_SPEED_GAIN = 0.2
DEFAULT_PLAYBACK_SPEED = 1.0
MAX_PLAYBACK_SPEED = 5.0
TRAIL_LENGTH = 6

# Export
DEFAULT_ANGLES_FILENAME = "angles_export.csv"
DEFAULT_TRAJECTORIES_FILENAME = "trajectories.csv"
