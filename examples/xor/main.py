import logging

import numpy as np

from ffnn import Network, TrainingLogger, TrainItem


random_state = np.random.RandomState(1234)


# Create the XOR dataset ######################################################

# The network has no bias terms, so a constant third input of 1 is
# appended to every example. Inputs and targets are kept away from the
# sigmoid's asymptotes.
train_set = [
    TrainItem(inputs=[0.01, 0.01, 1.0], targets=[0.01]),
    TrainItem(inputs=[0.01, 0.99, 1.0], targets=[0.99]),
    TrainItem(inputs=[0.99, 0.01, 1.0], targets=[0.99]),
    TrainItem(inputs=[0.99, 0.99, 1.0], targets=[0.01]),
]

# Set up the network and train it #############################################

logger = TrainingLogger(filename='xor-log.txt', level=logging.INFO)

net = Network(input_size=3, hidden_size=6, output_size=1,
              learning_rate=0.3, random_state=random_state,
              logger=logger, log_interval=5000)

logger.info("Initial loss: %.5f", net.loss(train_set))
net.train(train_set, 50000)
logger.info("Final loss: %.5f", net.loss(train_set))

for inputs, targets in train_set:
    logger.info("%s => %.3f (target %.2f)",
                inputs[:2], net.query(inputs)[0], targets[0])
