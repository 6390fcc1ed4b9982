#
# Solve each package with the dynamic program and, if a MIP solver is
# installed, compare the optimal costs with the Pyomo formulation
#
import argparse

from packdp.dp import DynamicProgrammingSolver
from packdp.mip import MIPSolver
from packdp.problem import parse_lines

parser = argparse.ArgumentParser()
parser.add_argument("filename", nargs="?", default="packages.txt")
parser.add_argument("--fill", action="store", default="lazy")
parser.add_argument("--mip", action="store", default=None)
parser.add_argument("-l", "--loglevel", action="store", default="INFO")
args = parser.parse_args()  # parse sys.argv

with open(args.filename, "r", encoding="utf-8") as INPUT:
    instances = list(parse_lines(INPUT))

pool = DynamicProgrammingSolver().solve_all(
    instances, fill=args.fill, loglevel=args.loglevel
)

mip = None
if args.mip:
    mip = MIPSolver()
    mip.set_options(solver=args.mip)

for instance, selection in zip(instances, pool):
    print(f"{instance.line}: {selection.render():10} cost={selection.cost} weight={selection.weight:.2f}")
    if mip is not None:
        other = mip.solve(instance)
        print(f"   {args.mip}: {other.render():10} cost={other.cost}")
