from .mip import MIPSolver, create_model
