import datetime
import logging

import pyomo.environ as pyo
from pyomo.common.timing import tic, toc
import packdp.logs
from packdp.solnpool import Selection

logger = packdp.logs.logger


def create_model(instance):
    """
    Build the 0-1 knapsack formulation of an instance.

    x[i] == 1 if the item with index i is selected.  Weights are not rounded,
    so this matches the dynamic program exactly when all weights are integral.
    """
    items = {item.index: item for item in instance.items}
    assert len(items) == len(
        instance.items
    ), f"Duplicate item indices in instance on line {instance.line}"

    M = pyo.ConcreteModel()
    M.ITEMS = pyo.Set(initialize=sorted(items.keys()))
    M.x = pyo.Var(M.ITEMS, within=pyo.Binary)

    M.cost = pyo.Objective(
        expr=sum(items[i].cost * M.x[i] for i in M.ITEMS), sense=pyo.maximize
    )
    M.capacity = pyo.Constraint(
        expr=sum(items[i].weight * M.x[i] for i in M.ITEMS) <= instance.capacity
    )

    return M


class MIPSolver(object):

    def __init__(self):
        self.solver_name = "glpk"
        self.solver_options = {}

    def set_options(self, *, solver=None, solver_options=None, loglevel=None):
        if solver:
            self.solver_name = solver
        if solver_options:
            self.solver_options = solver_options

        if loglevel is not None:
            packdp.logs.set_loglevel(loglevel)

    def solve(self, instance, **options):
        if len(options) > 0:
            self.set_options(**options)

        if instance.is_degenerate:
            return Selection(line=instance.line)

        start_time = datetime.datetime.now()
        tic(None)
        M = create_model(instance)
        if logger.isEnabledFor(logging.DEBUG):
            M.pprint()
        toc("Created knapsack model", logger=logger, level=logging.VERBOSE)

        opt = pyo.SolverFactory(self.solver_name)
        if opt is None or not opt.available(exception_flag=False):
            raise ValueError(f"Solver {self.solver_name} is not available")
        for key, value in self.solver_options.items():
            opt.options[key] = value
        results = opt.solve(M)
        pyo.assert_optimal_termination(results)
        toc("Optimized knapsack model", logger=logger, level=logging.VERBOSE)

        items = {item.index: item for item in instance.items}
        indices = [i for i in M.ITEMS if pyo.value(M.x[i]) > 0.5]
        selection = Selection(
            indices=indices,
            cost=pyo.value(M.cost),
            weight=sum(items[i].weight for i in indices),
            line=instance.line,
        )
        selection.suffix.solver = self.solver_name
        selection.suffix.termination_condition = str(
            results.solver.termination_condition
        )
        selection.suffix.time_elapsed = str(datetime.datetime.now() - start_time)
        return selection
