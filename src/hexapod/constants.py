### Output Channel Constants ###
# Fixed peer of the servo controller board
DEFAULT_OSC_HOST = '169.254.1.1'
DEFAULT_OSC_PORT = 9000
# OSC address of the "set duty cycle" message, one per PWM channel
OSC_DUTY_CYCLE_ADDRESS = '/output/pwm/duty/{channel}'

### Gait Constants ###
# Settling time between two phases of a gait cycle (seconds)
DEFAULT_PHASE_DELAY = 0.1

### Servo Constants ###
NUM_SERVOS = 12
DUTY_CYCLE_MIN = 0.0  # percent
DUTY_CYCLE_MAX = 100.0  # percent

### Configuration Constants ###
CONFIG_FILE_NAME = 'hexapod.json'
DEFAULT_CONFIG_RESOURCE = 'hexapod.default.json'

### Logging Constants ###
LOGS_FOLDER = 'logs/'
