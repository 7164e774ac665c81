"""
Log and status strings used across the hexapod package.

Keeping them in one place makes the log output consistent between the
kinematics core, the animation sequencer and the runtime.
"""

# Configuration
CONFIG_LOADED = 'Hexapod parameters loaded from {}'
CONFIG_DEFAULTS = 'No parameter file found at {}, using built-in defaults'
CONFIG_INVALID_JSON = 'Parameter file {} is not valid JSON: {}'
CONFIG_INVALID_VALUE = 'Invalid hexapod parameter {}: {!r}'

# Leg kinematics
LEG_IK_FAILED = 'LEG-{} IK failed: {}'
LEG_FK_RESULT = 'LEG-{} FK ({:.3f}, {:.3f}, {:.3f}) -> ({:.3f}, {:.3f}, {:.3f})'

# Body coordinator
BODY_CREATED = 'Hexapod body created with {} legs'
BODY_IK_REJECTED = 'Body IK rejected, failing legs: {}'
BODY_FK_REJECTED = 'Body FK rejected, joint angles lead to an invalid state'
BODY_WRONG_COUNT = 'Expected {} {}, got {}'

# Animation
ANIMATION_QUEUED = 'Animation {} queued ({} pending)'
ANIMATION_REJECTED = 'Animation {} rejected: expected {} endpoints per keyframe, got {}'
ANIMATION_STARTED = 'Animation {} started'
ANIMATION_FINISHED = 'Animation {} finished'
ANIMATION_STOPPED = 'Animation {} stopped: {}'
ANIMATION_ITERATION = 'Animation {} iteration done, {} remaining'
ANIMATION_REASON_IK = 'IK FAILURE'
ANIMATION_REASON_STOP = 'STOPPED'

# Controller
CONTROLLER_INPUT_DISABLED = 'Input ignored while an animation is running: {} {}={}'
CONTROLLER_BODY_FAILURE = 'Body IK failure, reverting {} to {}'
CONTROLLER_JOINT_FAILURE = 'Joint FK failure, reverting {} to {}'
CONTROLLER_ENDPOINT_FAILURE = 'Endpoint IK failure, reverting {} to {}'
CONTROLLER_INITIAL_POSE_FAILED = 'Initial pose could not be solved'

# Runtime
MAIN_STARTING = 'Hexapod simulation starting...'
MAIN_TELEMETRY = 'frame {:>5} pose x={:.3f} y={:.3f} z={:.3f} roll={:.3f} pitch={:.3f} yaw={:.3f}'
MAIN_TERMINATED_CTRL_C = 'Terminated due Control+C was pressed'
MAIN_TERMINATED_NORMAL = 'Normal termination'
