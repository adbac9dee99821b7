import abc
import numbers

from ffnn.core.exception import InvalidArgument


class SamplerBase(abc.ABC):
    """ The abstract base class for training example samplers. A sampler
    draws a single index, uniformly and with replacement, from a half-open
    integer range.
    """

    def uniform_index(self, low, high):
        """ Draw an index from [low, high). This function handles
        validation and calls the user-implemented `sample` member function.

        Parameters
        ----------
        low: int
            Inclusive lower bound.

        high: int
            Exclusive upper bound; must be greater than `low`.

        Returns
        -------
        index: int
        """
        if high <= low:
            msg = "Cannot sample from the empty index range [{}, {})"
            raise InvalidArgument(msg.format(low, high))

        index = self.sample(low, high)

        if not isinstance(index, numbers.Integral):
            msg = "Returned index was type {} but should be an integer"
            raise TypeError(msg.format(type(index)))

        if not low <= index < high:
            msg = "Returned index {} was outside of [{}, {})"
            raise ValueError(msg.format(index, low, high))

        return int(index)

    @abc.abstractmethod
    def sample(self, low, high):
        raise NotImplementedError
