import logging
import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from Core.errors import InvalidInputError
from Core.problem import Requirement
from Knapsack import knapsack
from Knapsack.capacity import CapacityEstimator, StaticMemoryProbe
from ReqOptimizer.core.config import OptimizerConfig
from ReqOptimizer.core.optimizer import Optimizer, optimize


@pytest.fixture
def adversarial():
    return [
        Requirement(cost=10, profit=60),
        Requirement(cost=20, profit=100),
        Requirement(cost=30, profit=120),
    ]


@pytest.fixture
def roomy_memory():
    return StaticMemoryProbe(total_bytes=10**9, used_bytes=0)


@pytest.fixture
def exhausted_memory():
    return StaticMemoryProbe(total_bytes=10**6, used_bytes=10**6 - 10)


def test_prefers_dynamic_when_memory_allows(adversarial, roomy_memory):
    opt = Optimizer(probe=roomy_memory)
    result = opt.optimize(adversarial, 50)
    assert result.algorithm == "dynamic"
    assert result.total_profit == 220
    assert opt.chosen_algorithm == "dynamic"


def test_force_greedy_argument(adversarial, roomy_memory):
    opt = Optimizer(probe=roomy_memory)
    result = opt.optimize(adversarial, 50, force_greedy=True)
    assert result.algorithm == "greedy"
    assert result.total_profit == 160
    assert opt.chosen_algorithm == "greedy"


def test_force_greedy_from_config(adversarial, roomy_memory):
    opt = Optimizer(OptimizerConfig(force_greedy=True), probe=roomy_memory)
    assert opt.optimize(adversarial, 50).algorithm == "greedy"
    # explicit argument wins over config
    assert opt.optimize(adversarial, 50, force_greedy=False).algorithm == "dynamic"


def test_low_memory_falls_back_to_greedy(adversarial, exhausted_memory):
    opt = Optimizer(probe=exhausted_memory)
    result = opt.optimize(adversarial, 50)
    assert result.algorithm == "greedy"
    assert result.total_cost <= 50


def test_allocation_failure_falls_back_to_greedy(adversarial, roomy_memory, monkeypatch):
    def fail(*args, **kwargs):
        raise MemoryError("simulated")

    monkeypatch.setattr(knapsack.np, "zeros", fail)
    result = Optimizer(probe=roomy_memory).optimize(adversarial, 50)
    assert result.algorithm == "greedy"


def test_memory_error_while_filling_falls_back_to_greedy(adversarial, roomy_memory, monkeypatch):
    def fail(*args, **kwargs):
        raise MemoryError("simulated during fill")

    monkeypatch.setattr(knapsack.np, "maximum", fail)
    result = Optimizer(probe=roomy_memory).optimize(adversarial, 50)
    assert result.algorithm == "greedy"
    assert result.total_cost <= 50


def test_profit_overflow_for_cell_dtype_falls_back_to_greedy(roomy_memory):
    reqs = [Requirement(cost=1, profit=2**31 - 1), Requirement(cost=1, profit=5)]
    result = Optimizer(OptimizerConfig(dtype="int32"), probe=roomy_memory).optimize(reqs, 2)
    assert result.algorithm == "greedy"
    assert result.total_profit == 2**31 + 4


def test_injected_estimator_must_match_dtype(roomy_memory):
    with pytest.raises(ValueError):
        Optimizer(OptimizerConfig(dtype="int32"), estimator=CapacityEstimator(roomy_memory, element_size=8))
    opt = Optimizer(OptimizerConfig(dtype="int32"), estimator=CapacityEstimator(roomy_memory, element_size=4))
    assert opt.dynamic_solver.dtype.itemsize == opt.estimator.element_size


def test_accepts_numpy_integer_budget(adversarial, roomy_memory):
    result = Optimizer(probe=roomy_memory).optimize(adversarial, np.int64(50))
    assert result.budget == 50
    assert type(result.budget) is int


def test_safety_ratio_controls_choice(adversarial):
    # 4 * 51 * 8 = 1632 bytes of a 2000 byte pool leaves 18.4% free
    memory = StaticMemoryProbe(total_bytes=2000)
    assert Optimizer(OptimizerConfig(safety_ratio=0.1), probe=memory).optimize(adversarial, 50).algorithm == "dynamic"
    assert Optimizer(OptimizerConfig(safety_ratio=0.5), probe=memory).optimize(adversarial, 50).algorithm == "greedy"


def test_int32_config_shrinks_estimate(adversarial):
    # 4 * 51 * 4 = 816 bytes fits a 1000 byte pool, 1632 does not
    memory = StaticMemoryProbe(total_bytes=1000)
    assert Optimizer(OptimizerConfig(dtype="int32"), probe=memory).optimize(adversarial, 50).algorithm == "dynamic"
    assert Optimizer(OptimizerConfig(dtype="int64"), probe=memory).optimize(adversarial, 50).algorithm == "greedy"


def test_logs_one_info_line(adversarial, roomy_memory, caplog):
    logger = logging.getLogger("test_optimizer_logger")
    with caplog.at_level(logging.INFO, logger="test_optimizer_logger"):
        Optimizer(probe=roomy_memory, logger=logger).optimize(adversarial, 50)
    info = [r for r in caplog.records if r.levelno == logging.INFO]
    assert len(info) == 1
    assert "fixed cost of 50" in info[0].getMessage()


def test_caller_sequence_untouched(adversarial, exhausted_memory):
    reversed_reqs = list(reversed(adversarial))
    snapshot = list(reversed_reqs)
    Optimizer(probe=exhausted_memory).optimize(reversed_reqs, 50)
    assert reversed_reqs == snapshot


@pytest.mark.parametrize(
    "reqs, budget",
    [
        ([Requirement(cost=1, profit=1)], -1),
        ([Requirement(cost=1, profit=1)], 1.5),
        ([(1, 1)], 5),
    ],
)
def test_invalid_input_raises(reqs, budget, roomy_memory):
    with pytest.raises(InvalidInputError):
        Optimizer(probe=roomy_memory).optimize(reqs, budget)


def test_empty_and_zero_budget(roomy_memory):
    opt = Optimizer(probe=roomy_memory)
    assert len(opt.optimize([], 100)) == 0
    result = opt.optimize([Requirement(cost=3, profit=3)], 0)
    assert len(result) == 0
    assert result.algorithm == "dynamic"


def test_module_level_optimize(adversarial):
    result = optimize(adversarial, 50)
    assert result.total_profit == 220
    assert optimize(adversarial, 50, force_greedy=True).algorithm == "greedy"


@pytest.mark.parametrize("kwargs", [{"safety_ratio": 1.0}, {"safety_ratio": -0.5}, {"dtype": "float32"}, {"dtype": "nope"}])
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        OptimizerConfig(**kwargs)
