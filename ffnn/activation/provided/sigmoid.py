import numpy
from scipy.special import expit

from ffnn.activation.activation_base import ActivationBase


class Sigmoid(ActivationBase):
    """ The logistic function, 1 / (1 + exp(-x)), with range (0, 1) """

    def activate(self, matrix):
        return expit(matrix)


class Tanh(ActivationBase):
    """ The hyperbolic tangent with range (-1, 1). Its derivative in terms
    of the output is 1 - y**2.
    """

    def activate(self, matrix):
        return numpy.tanh(matrix)

    def derivative_from_output(self, outputs):
        return 1.0 - outputs**2
