""" Default settings used when the corresponding keyword arguments are not
supplied
"""

# Step size of the online gradient descent update
DEFAULT_LEARNING_RATE = 0.3

# Initial weights are drawn uniformly from [low, high)
WEIGHT_INIT_LOW = -0.5
WEIGHT_INIT_HIGH = 0.5

# Number of training steps between progress log messages
DEFAULT_LOG_INTERVAL = 1000

LOG_FORMAT = '[%(asctime)s] %(levelname)-8s %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
