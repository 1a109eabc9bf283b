from .config import OptimizerConfig, add_optimizer_args, config_from_args
from .optimizer import Optimizer, optimize
from .utils import setup_logging

__all__ = [
    'Optimizer',
    'OptimizerConfig',
    'add_optimizer_args',
    'config_from_args',
    'optimize',
    'setup_logging',
]
