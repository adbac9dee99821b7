# flake8: noqa

from .activation_base import ActivationBase

from .provided.sigmoid import (
    Sigmoid,
    Tanh,
)
