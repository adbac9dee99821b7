from sklearn.utils import check_random_state

from ffnn.sampler.sampler_base import SamplerBase


class RandomIndexSampler(SamplerBase):
    """ Draws indices from a discrete uniform distribution """

    def __init__(self, random_state=None):
        """ Initialize a RandomIndexSampler object

        Parameters
        ----------
        random_state: None, int, or numpy.random.RandomState, default None
            Supply for reproducible results

        """
        self.random_state = check_random_state(random_state)

    def sample(self, low, high):
        return self.random_state.randint(low, high)
