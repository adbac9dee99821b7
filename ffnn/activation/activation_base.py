import abc

import numpy


class ActivationBase(abc.ABC):
    """ The abstract base class for elementwise activation functions.

    Backpropagation in :class:`ffnn.core.network.Network` needs the
    derivative of the activation written in terms of the activation's
    *output*, y = f(x). The default, y * (1 - y), is the identity satisfied
    by the logistic sigmoid. Subclasses whose derivative has a different
    closed form in y must override :meth:`derivative_from_output`;
    otherwise the weight updates are incorrect.
    """

    def execute(self, matrix):
        """ Apply the activation elementwise. This function handles input
        conversion and output validation and calls the user-implemented
        `activate` member function.

        Parameters
        ----------
        matrix: array-like
            The values to transform, typically a column vector.

        Returns
        -------
        activated: numpy.ndarray, shape=matrix.shape
        """
        matrix = numpy.asarray(matrix, dtype=float)

        activated = self.activate(matrix)

        if not isinstance(activated, numpy.ndarray):
            msg = ("Returned activation was type {} but "
                   "should be numpy.ndarray")
            raise TypeError(msg.format(type(activated)))

        if activated.shape != matrix.shape:
            msg = "Returned activation was shape {} but should be {}"
            raise ValueError(msg.format(activated.shape, matrix.shape))

        return activated

    def derivative_from_output(self, outputs):
        """ The derivative f'(x) expressed in terms of y = f(x) """
        return outputs * (1.0 - outputs)

    @abc.abstractmethod
    def activate(self, matrix):
        raise NotImplementedError

    def __repr__(self):
        return "<{}>".format(self.__class__.__name__)
