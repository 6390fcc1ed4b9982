from .instance import Item, Instance, knapsack_instance, round_half_up
from .parser import parse_item, parse_line, parse_lines
