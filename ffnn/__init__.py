# flake8: noqa

from .activation import ActivationBase, Sigmoid, Tanh
from .core.exception import DimensionMismatch, InvalidArgument
from .core.logger import TrainingLogger
from .core.network import ForwardResult, Network, TrainItem
from .sampler import RandomIndexSampler, SamplerBase
