### Geometry Constants ###
# Default hexapod dimensions (scene units)
BODY_RADIUS = 0.5
BODY_HEIGHT = 0.17
COXA_LENGTH = 0.0
COXA_RADIUS = 0.1
FEMUR_LENGTH = 0.5
TIBIA_LENGTH = 0.7

# Legs are sampled on the body circle every LEG_INTERVAL_DEG degrees
LEG_COUNT = 6
LEG_INTERVAL_DEG = 60

### Kinematics Constants ###
# Targets below -FLOOR_MARGIN are rejected before solving
FLOOR_MARGIN = 0.1
# acos arguments this close outside [-1, 1] are treated as the boundary
ACOS_TOLERANCE = 1e-9

### Animation Constants ###
DEFAULT_DURATION = 1.0
DEFAULT_TIMESCALE = 1.0
# Slack on t >= 1 so that ticks summing to the duration finish on time
T_EPSILON = 1e-9
# Newton iterations used to invert a cubic timing curve
CUBIC_BEZIER_ITERATIONS = 5
CUBIC_BEZIER_PRECISION = 1e-6

# Default endpoint of every leg, expressed relative to leg 0
DEFAULT_ENDPOINT = (1.0, 0.0, 0.0)

### Runtime Constants ###
FRAME_RATE_HZ = 60
TELEMETRY_UPDATE_INTERVAL = 30  # Log the pose every N frames
DEFAULT_RUN_DURATION = 5.0

### Configuration ###
CONFIG_ENV = 'HEXAPOD_CONFIG'
CONFIG_FOLDER = 'hexapod'
CONFIG_FILE_NAME = 'hexapod.json'
