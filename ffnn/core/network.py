"""
A three-layer neural network trained by online backpropagation.

Input (R^n) => Hidden (R^h) => Output (R^m)

There are no bias terms. For a single input column vector x, the
computation chain is:

hidden = f(dot(weights_ih, x))
output = f(dot(weights_ho, hidden))

where f is the (swappable) elementwise activation function. Each
training step samples one example with replacement and immediately
applies a gradient descent update of the squared error.
"""
from collections import namedtuple
import logging
import numbers

import numpy
from sklearn.utils import check_random_state

from ffnn.activation import ActivationBase, Sigmoid
from ffnn.config import (
    DEFAULT_LEARNING_RATE, DEFAULT_LOG_INTERVAL,
    WEIGHT_INIT_HIGH, WEIGHT_INIT_LOW)
from ffnn.sampler import RandomIndexSampler, SamplerBase
from .exception import DimensionMismatch, InvalidArgument
from .logger import log_progress


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


TrainItem = namedtuple('TrainItem', ['inputs', 'targets'])

ForwardResult = namedtuple(
    'ForwardResult', ['hidden_outputs', 'final_outputs'])


def _is_positive_int(value):
    return (isinstance(value, numbers.Integral) and
            not isinstance(value, bool) and value > 0)


class Network(object):
    """
    Single hidden layer neural network with an arbitrary number of
    inputs and outputs.

    params: weights_ih, where weights_ih[j, i] = weight from input i to
                hidden unit j.
            weights_ho, where weights_ho[k, j] = weight from hidden unit j
                to output unit k.

    The weight arrays are owned by the network and only ever mutated by
    training. Every accessor returns a copy.

    Note
    ----
    Numerical problems (e.g., saturation or NaNs caused by a large
    learning rate) are not detected.
    """
    def __init__(self, input_size, hidden_size, output_size,
                 learning_rate=DEFAULT_LEARNING_RATE, activator=None,
                 sampler=None, random_state=None, logger=None,
                 log_interval=DEFAULT_LOG_INTERVAL):
        """
        Parameters
        ----------
        input_size: int
            Number of input units.

        hidden_size: int
            Number of hidden units.

        output_size: int
            Number of output units.

        learning_rate: float, default=0.3
            The gradient descent step size. Values outside of (0, 1] are
            permitted but risk divergence.

        activator: ActivationBase, default=None
            The elementwise activation applied after each layer. Defaults
            to :class:`ffnn.activation.Sigmoid`.

        sampler: SamplerBase, default=None
            Chooses the training example for each step. Defaults to a
            :class:`ffnn.sampler.RandomIndexSampler` sharing `random_state`.

        random_state: None, int, or numpy.random.RandomState, default=None
            Provide for reproducible results.

        logger: logging.Logger, default=None
            Receives training progress messages. Defaults to the module
            logger.

        log_interval: int, default=1000
            Number of training steps between progress messages.
        """
        for name, size in [('input_size', input_size),
                           ('hidden_size', hidden_size),
                           ('output_size', output_size)]:
            if not _is_positive_int(size):
                msg = "`{}` should be a positive integer but was {!r}"
                raise InvalidArgument(msg.format(name, size))

        if (not isinstance(learning_rate, numbers.Real) or
                isinstance(learning_rate, bool)):
            msg = "`learning_rate` should be a real number but was {!r}"
            raise InvalidArgument(msg.format(learning_rate))

        if not _is_positive_int(log_interval):
            msg = "`log_interval` should be a positive integer but was {!r}"
            raise InvalidArgument(msg.format(log_interval))

        self.input_size = input_size
        self.hidden_size = hidden_size
        self.output_size = output_size
        self.learning_rate = float(learning_rate)

        self.random_state = check_random_state(random_state)

        self.activator = Sigmoid() if activator is None else activator
        self._validate_activator(self.activator)

        if sampler is None:
            sampler = RandomIndexSampler(random_state=self.random_state)
        elif not isinstance(sampler, SamplerBase):
            msg = "sampler {!r} was not an instance of {}"
            raise InvalidArgument(msg.format(sampler, SamplerBase.__name__))
        self.sampler = sampler

        self.logger = (logging.getLogger(_logger_name) if logger is None
                       else logger)
        self.log_interval = log_interval

        # This both initializes and randomizes.
        self.randomize_params()

        self.logger.debug("Created %r with learning rate %g",
                          self, self.learning_rate)

    def __repr__(self):
        return "<Network input_size=%d, hidden_size=%d, output_size=%d>" % (
            self.input_size, self.hidden_size, self.output_size)

    def randomize_params(self):
        """
        Randomize the weights with IID uniform random variables on
        [-0.5, 0.5).
        """
        self._weights_ih = self._generate_weights(
            self.hidden_size, self.input_size)
        self._weights_ho = self._generate_weights(
            self.output_size, self.hidden_size)

    def _generate_weights(self, rows, columns):
        return self.random_state.uniform(
            WEIGHT_INIT_LOW, WEIGHT_INIT_HIGH, size=(rows, columns))

    @property
    def weights_ih(self):
        """ A copy of the input => hidden weights,
        shape=(hidden_size, input_size)
        """
        return self._weights_ih.copy()

    @property
    def weights_ho(self):
        """ A copy of the hidden => output weights,
        shape=(output_size, hidden_size)
        """
        return self._weights_ho.copy()

    def get_params(self):
        """
        Returns
        -------
        params: list
            Copies of the weights as [weights_ih, weights_ho].
        """
        return [self.weights_ih, self.weights_ho]

    def set_params(self, weights_ih, weights_ho):
        """
        Set the weights to copies of those provided in the arguments.
        """
        weights_ih = numpy.array(weights_ih, dtype=float)
        weights_ho = numpy.array(weights_ho, dtype=float)

        expected_ih = (self.hidden_size, self.input_size)
        expected_ho = (self.output_size, self.hidden_size)

        if weights_ih.shape != expected_ih:
            msg = "`weights_ih` was shape {} but should be {}"
            raise DimensionMismatch(msg.format(weights_ih.shape, expected_ih))

        if weights_ho.shape != expected_ho:
            msg = "`weights_ho` was shape {} but should be {}"
            raise DimensionMismatch(msg.format(weights_ho.shape, expected_ho))

        self._weights_ih = weights_ih
        self._weights_ho = weights_ho

    def train(self, train_set, count, activator=None):
        """
        Run `count` online gradient descent steps. Each step samples one
        item of `train_set` uniformly with replacement.

        Parameters
        ----------
        train_set: sequence of TrainItem or (inputs, targets) pairs
            The training examples. It must be non-empty if `count` > 0.

        count: int
            Number of training steps; zero is a no-op.

        activator: ActivationBase, default=None
            If given, this replaces the network's activation for this call
            *and all subsequent calls*.
        """
        if (not isinstance(count, numbers.Integral) or
                isinstance(count, bool) or count < 0):
            msg = "`count` should be a non-negative integer but was {!r}"
            raise InvalidArgument(msg.format(count))

        if activator is not None:
            self._validate_activator(activator)
            self.activator = activator

        if count == 0:
            return

        if len(train_set) == 0:
            msg = "Cannot run {} training steps on an empty training set"
            raise InvalidArgument(msg.format(count))

        # Reject malformed items before any step mutates the weights.
        for item in train_set:
            inputs, targets = item
            self._validate_vector(inputs, self.input_size, 'inputs')
            self._validate_vector(targets, self.output_size, 'targets')

        self.logger.debug("Training %r for %d steps on %d examples",
                          self, count, len(train_set))

        for step in range(count):
            index = self.sampler.uniform_index(0, len(train_set))
            inputs, targets = train_set[index]
            self.train_step(inputs, targets)

            if (step + 1) % self.log_interval == 0:
                log_progress(self.logger, "training steps", step + 1, count)

        self.logger.debug("Finished %d training steps", count)

    def query(self, inputs):
        """
        Parameters
        ----------
        inputs: array-like, shape=(input_size,)

        Returns
        -------
        outputs: ndarray, shape=(output_size,)
            The network's output, computed with the current weights.
        """
        input_column = self._as_column(inputs, self.input_size, 'inputs')
        result = self.forward_propagation(input_column)
        return result.final_outputs.ravel().copy()

    def loss(self, train_set):
        """
        Compute the mean over `train_set` of half the squared error
        between the network's output and the targets.
        """
        if len(train_set) == 0:
            raise InvalidArgument("Cannot compute the loss of an empty set")

        total = 0.0
        for inputs, targets in train_set:
            target_column = self._as_column(
                targets, self.output_size, 'targets')
            diff = target_column.ravel() - self.query(inputs)
            total += 0.5 * numpy.dot(diff, diff)

        return total / len(train_set)

    def train_step(self, inputs, targets):
        """
        Run a single forward pass and backward pass on one example and
        update the weights in place.
        """
        input_column = self._as_column(inputs, self.input_size, 'inputs')
        target_column = self._as_column(
            targets, self.output_size, 'targets')

        forward_result = self.forward_propagation(input_column)
        self.back_propagation(input_column, target_column, forward_result)

    def forward_propagation(self, input_column):
        """
        Parameters
        ----------
        input_column: ndarray, shape=(input_size, 1)

        Returns
        -------
        result: ForwardResult
            The hidden layer and final layer outputs as column vectors.
        """
        hidden_inputs = numpy.dot(self._weights_ih, input_column)
        hidden_outputs = self.activator.execute(hidden_inputs)

        final_inputs = numpy.dot(self._weights_ho, hidden_outputs)
        final_outputs = self.activator.execute(final_inputs)

        return ForwardResult(hidden_outputs=hidden_outputs,
                             final_outputs=final_outputs)

    def back_propagation(self, input_column, target_column, forward_result):
        """
        Propagate the output error backward and apply the gradient
        descent update to both weight matrices.

        The hidden error is computed through the transpose of the
        hidden => output weights *before* those weights are updated.
        """
        hidden_outputs, final_outputs = forward_result

        output_errors = target_column - final_outputs
        hidden_errors = numpy.dot(self._weights_ho.T, output_errors)

        delta_ho = self._weight_delta(
            inputs=hidden_outputs, outputs=final_outputs,
            errors=output_errors)
        delta_ih = self._weight_delta(
            inputs=input_column, outputs=hidden_outputs,
            errors=hidden_errors)

        self._weights_ho += delta_ho
        self._weights_ih += delta_ih

    def _weight_delta(self, inputs, outputs, errors):
        """
        Compute LR * dot(errors * f'(outputs), inputs.T), which has the
        shape of the weight matrix connecting `inputs` to `outputs`.
        """
        gradient = errors * self.activator.derivative_from_output(outputs)
        return self.learning_rate * numpy.dot(gradient, inputs.T)

    def _validate_activator(self, activator):
        if not isinstance(activator, ActivationBase):
            msg = "activator {!r} was not an instance of {}"
            raise InvalidArgument(
                msg.format(activator, ActivationBase.__name__))

    def _validate_vector(self, vector, size, name):
        length = numpy.size(vector)
        if numpy.ndim(vector) != 1 or length != size:
            msg = "`{}` was shape {} but should be ({},)"
            raise DimensionMismatch(
                msg.format(name, numpy.shape(vector), size))

    def _as_column(self, vector, size, name):
        self._validate_vector(vector, size, name)
        return numpy.array(vector, dtype=float).reshape(size, 1)
