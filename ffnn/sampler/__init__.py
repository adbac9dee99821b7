# flake8: noqa

from .sampler_base import SamplerBase

from .provided.random_index import RandomIndexSampler
