"""
User-facing and log strings for the hexapod runtime.

Kept in one module so the wording stays consistent between the console
and the log file.
"""

# Startup banner
APP_BANNER = "{} {}.{}"
APP_USAGE = "Use arrow keys to control hexapod.  Press any other key to exit."

# Fatal error acknowledgement
APP_ERROR = "Error: {}"
APP_PRESS_ANY_KEY = "Press any key to exit..."

# Main Runtime
MAIN_STARTING = 'Hexapod starting...'
MAIN_TERMINATED_NORMAL = 'Normal termination'
MAIN_TERMINATED_CTRL_C = 'Terminated due Control+C was pressed'
MAIN_FATAL_ERROR = 'Fatal error, stopping the control loop: {}'
MAIN_CLI_DESCRIPTION = 'Hexapod gait controller'

# Gait announcements
GAIT_FORWARD = "Step forwards"
GAIT_BACKWARD = "Step backwards"
GAIT_SPIN_RIGHT = "Spin right"
GAIT_SPIN_LEFT = "Spin left"

# Gait Sequencer
GAIT_PHASE_START = 'Phase {}/{} of {}: {} commands'
GAIT_CYCLE_ABORTED = 'Cycle {} aborted in phase {}: {}'
GAIT_CYCLE_COMPLETE = 'Cycle {} complete, {} commands sent'

# Command Loop
LOOP_STARTED = 'Command loop started'
LOOP_INTENT = 'Intent received: {}'
LOOP_TERMINATING = 'Terminating intent received, leaving the command loop'

# Servo Driver
SERVO_COMMAND = 'Setting {} (ch{}) to {} -> {:.2f}%'

# OSC Sender
OSC_OPENING = 'Opening OSC channel to {}:{}'
OSC_OPENED = 'OSC channel opened'
OSC_CLOSED = 'OSC channel closed'
OSC_NOT_OPEN = 'OSC channel is not open'
OSC_OPEN_ERROR = 'Unable to open OSC channel to {}:{}: {}'
OSC_SEND_ERROR = 'Unable to send {} to {}:{}: {}'

# Position Table
TABLE_UNREACHABLE = "Position {} is not defined for {} ({} joint)"
TABLE_ROW_MISSING = "Position table has no row for '{}'"
TABLE_ROW_LENGTH = "Position table row '{}' has {} values, expected {}"
TABLE_ROW_NOT_A_LIST = "Position table row '{}' must be a list, got {}"
TABLE_CELL_NOT_A_NUMBER = "Position table value {!r} for {} at {} is not a number"
TABLE_CELL_MISSING = "Position table has no value for {} at {}"
TABLE_CELL_NOT_ALLOWED = "Position table defines {} for {}, but {} joints cannot move {}"
TABLE_CELL_OUT_OF_RANGE = "Position table value {} for {} at {} must be between {} and {}"

# Gait definitions
PHASE_DUPLICATE_SERVO = "Phase assigns {} more than once"
CYCLE_EMPTY = "Gait cycle {} has no phases"

# Configuration Provider
CONFIG_LOADING = 'Loading configuration...'
CONFIG_LOADED_FROM = 'Configuration loaded from {}'
CONFIG_COPIED_DEFAULT = 'No configuration found, copied defaults to {}'
CONFIG_NOT_EXIST = "Configuration file {} doesn't exist"
CONFIG_INVALID_JSON = "Configuration file {} is not valid JSON: {}"
CONFIG_MISSING_KEY = "Configuration is missing '{}'"
CONFIG_MODULES = 'Detected configuration for the modules: {}'
CONFIG_NEGATIVE_DELAY = 'Phase delay must not be negative, got {}'

# Servo test tool
SERVO_TEST_TITLE = 'Select the servo you want to test'
SERVO_TEST_POSITION_TITLE = 'Select the position for {}'
SERVO_TEST_OPTION = '{} - CHANNEL[{}] - {}'
SERVO_TEST_SENT = 'Sent {} to {} (ch{}): {:.2f}%'
SERVO_TEST_EXIT = 'Exit'
SERVO_TEST_BACK = 'Back'
