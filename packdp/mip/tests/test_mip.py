import random
import pytest
import pyomo.environ as pyo

import pyomo.opt
from pyomo.common import unittest

from packdp.dp import solve_instance
from packdp.mip import MIPSolver, create_model
from packdp.problem import knapsack_instance

solvers = set(pyomo.opt.check_available_solvers("glpk", "gurobi", "highs"))

random.seed(2093847)


def test_create_model():
    instance = knapsack_instance(capacity=10, items=[(4, 3, 5), (2, 6.5, 8), (9, 0, 1)])
    M = create_model(instance)

    assert list(M.ITEMS) == [2, 4, 9]
    assert len(M.x) == 3
    assert all(M.x[i].is_binary() for i in M.ITEMS)
    assert M.cost.sense == pyo.maximize
    assert pyo.value(M.capacity.upper) == 10

    M.x[2].set_value(1)
    M.x[4].set_value(1)
    M.x[9].set_value(0)
    assert pyo.value(M.cost) == 13
    assert pyo.value(M.capacity.body) == 9.5


def test_duplicate_indices():
    instance = knapsack_instance(capacity=10, items=[(1, 3, 5), (1, 6, 8)])
    with pytest.raises(AssertionError):
        create_model(instance)


def test_degenerate():
    # No solver is needed for degenerate instances
    solver = MIPSolver()
    solver.set_options(solver="no_such_solver")
    assert solver.solve(knapsack_instance(capacity=0, items=[(1, 1, 1)])).render() == "-"


def test_unavailable_solver():
    solver = MIPSolver()
    with pytest.raises(ValueError):
        solver.solve(knapsack_instance(capacity=5, items=[(1, 1, 1)]), solver="no_such_solver")


@unittest.pytest.mark.parametrize("mip_solver", solvers)
class TestMIP:

    def test_simple(self, mip_solver):
        instance = knapsack_instance(capacity=8, items=[(1, 3, 4), (2, 5, 5), (3, 6, 8)])
        selection = MIPSolver().solve(instance, solver=mip_solver)
        assert selection.indices == (1, 2)
        assert selection.cost == pytest.approx(9)
        assert selection.suffix.solver == mip_solver

    def test_matches_dynamic_program(self, mip_solver):
        # With integral weights both formulations have the same optimal cost
        solver = MIPSolver()
        solver.set_options(solver=mip_solver)
        for trial in range(10):
            items = [
                (i, random.randint(1, 20), random.randint(0, 50))
                for i in range(1, random.randint(2, 10) + 1)
            ]
            instance = knapsack_instance(capacity=random.randint(1, 60), items=items)
            mip = solver.solve(instance)
            dp = solve_instance(instance)
            assert mip.cost == pytest.approx(dp.cost), trial
            assert mip.weight <= instance.capacity
