import unittest

import numpy

from ffnn.core.exception import InvalidArgument
from ffnn.sampler import RandomIndexSampler, SamplerBase


class TestSamplerBase(unittest.TestCase):

    def test_empty_range(self):

        class Low(SamplerBase):

            def sample(self, low, high):
                return low

        with self.assertRaises(InvalidArgument):
            Low().uniform_index(0, 0)

        with self.assertRaises(InvalidArgument):
            Low().uniform_index(3, 1)

    def test_out_of_range(self):

        class High(SamplerBase):

            def sample(self, low, high):
                return high

        with self.assertRaises(ValueError):
            High().uniform_index(0, 4)

    def test_bad_return_type(self):

        class Middle(SamplerBase):

            def sample(self, low, high):
                return (low + high) / 2

        with self.assertRaises(TypeError):
            Middle().uniform_index(0, 4)


class TestRandomIndexSampler(unittest.TestCase):

    def test_range_and_coverage(self):
        sampler = RandomIndexSampler(random_state=123)

        indices = [sampler.uniform_index(0, 5) for _ in range(500)]

        self.assertTrue(all(0 <= i < 5 for i in indices))
        self.assertEqual(set(indices), set(range(5)))

    def test_single_index(self):
        sampler = RandomIndexSampler()

        self.assertEqual(sampler.uniform_index(0, 1), 0)

    def test_reproducible(self):
        sampler1 = RandomIndexSampler(
            random_state=numpy.random.RandomState(1234))
        sampler2 = RandomIndexSampler(random_state=1234)

        indices1 = [sampler1.uniform_index(0, 10) for _ in range(50)]
        indices2 = [sampler2.uniform_index(0, 10) for _ in range(50)]

        self.assertEqual(indices1, indices2)


if __name__ == '__main__':
    unittest.main()
