from .board import CostBoard
from .engine import backtrace, lazy_cost, table_cost, solve_instance
from .solver import DynamicProgrammingSolver
