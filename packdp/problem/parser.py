import math
import re

import packdp.logs
from .instance import Item, Instance, knapsack_instance

logger = packdp.logs.logger

CAPACITY_SEPARATOR = ":"
ITEM_SEPARATOR = ","
CURRENCY = "€"

# Items are written as '(index,weight,cost)', with or without the parentheses.
# Parenthesised items need no whitespace between them, bare ones do.
_item_token = re.compile(r"\(([^()]*)\)|([^\s()]+)")


def _to_number(text):
    text = text.strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_item(text):
    """
    Parse the fields of one item, e.g. '1,53.38,€45'.  Returns None if the
    item is malformed.
    """
    fields = text.replace("(", "").replace(")", "").split(ITEM_SEPARATOR)
    if len(fields) != 3:
        return None

    index = _to_number(fields[0])
    weight = _to_number(fields[1])
    cost = _to_number(fields[2].replace(CURRENCY, ""))
    if index is None or weight is None or cost is None:
        return None

    if index != int(index) or index < 1:
        return None
    if weight < 0 or cost < 0:
        return None

    return Item(index=int(index), weight=weight, cost=cost)


def parse_line(line, *, lineno=None):
    """
    Parse one line of the form

        81 : (1,53.38,€45) (2,88.62,€98) (3,78.48,€3)

    Malformed items are dropped.  A blank line, a line with a missing or
    invalid capacity, or a line without items gives a degenerate instance.
    """
    text = line.strip()
    if not text:
        return Instance(line=lineno)

    capacity_text, sep, items_text = text.partition(CAPACITY_SEPARATOR)
    capacity = _to_number(capacity_text)
    if capacity is None or capacity < 1:
        logger.debug(f"Line {lineno}: invalid capacity '{capacity_text.strip()}'")
        return Instance(line=lineno)
    if not sep:
        logger.debug(f"Line {lineno}: no items")
        return knapsack_instance(capacity=capacity, line=lineno)

    items = []
    for match in _item_token.finditer(items_text):
        token = match.group(0)
        item = parse_item(token)
        if item is None:
            logger.debug(f"Line {lineno}: dropping malformed item '{token}'")
            continue
        items.append(item)

    return knapsack_instance(capacity=capacity, items=items, line=lineno)


def parse_lines(lines):
    """
    Generate one Instance per line of text.
    """
    for lineno, line in enumerate(lines, start=1):
        yield parse_line(line, lineno=lineno)
