import numpy as np

import packdp.logs
from packdp.problem import round_half_up
from packdp.solnpool import Selection
from .board import CostBoard

logger = packdp.logs.logger


def _is_better(candidate, incumbent):
    #
    # Higher cost wins, and a lower total weight breaks cost ties.  On a
    # complete tie the incumbent (excluding the item) is kept.
    #
    cost, weight = candidate
    best_cost, best_weight = incumbent
    return cost > best_cost or (cost == best_cost and weight < best_weight)


def lazy_cost(board, items, k, w):
    """
    Return (cost, weight) of the best selection from the first k items with
    budget w, computing only the cells of the board that are needed.

    Pending cells are kept on an explicit stack, so the item count is not
    limited by the interpreter's recursion limit.
    """
    pending = [(k, w)]
    while pending:
        i, j = pending[-1]
        if board.is_computed(i, j):
            pending.pop()
            continue

        item = items[i - 1]
        needed = [(i - 1, j)]
        if item.weight <= j:
            needed.append((i - 1, round_half_up(j - item.weight)))
        missing = [cell for cell in needed if not board.is_computed(*cell)]
        if missing:
            pending.extend(missing)
            continue

        best = board[i - 1, j]
        if item.weight <= j:
            cost, weight = board[needed[1]]
            include = (item.cost + cost, item.weight + weight)
            if _is_better(include, best):
                best = include
        board.set(i, j, *best)
        pending.pop()

    return board[k, w]


def table_cost(board, items):
    """
    Fill every cell of the board, one row (item) at a time.
    """
    budgets = np.arange(board.capacity + 1)
    for k, item in enumerate(items, start=1):
        cost = board.cost[k - 1].copy()
        weight = board.weight[k - 1].copy()

        # Column 0 is the w == 0 base case
        fits = np.nonzero((budgets >= item.weight) & (budgets > 0))[0]
        if len(fits) > 0:
            remaining = np.floor(budgets[fits] - item.weight + 0.5).astype(int)
            inc_cost = item.cost + board.cost[k - 1, remaining]
            inc_weight = item.weight + board.weight[k - 1, remaining]
            better = (inc_cost > cost[fits]) | (
                (inc_cost == cost[fits]) & (inc_weight < weight[fits])
            )
            cost[fits[better]] = inc_cost[better]
            weight[fits[better]] = inc_weight[better]

        board.cost[k, 1:] = cost[1:]
        board.weight[k, 1:] = weight[1:]

    return board[board.item_count, board.capacity]


def backtrace(board, items):
    """
    Walk the computed board from (item_count, capacity) back to row 0 and
    return the items that realise the optimal cost.
    """
    k = board.item_count
    w = board.capacity
    selected = []

    cost, _ = board[k, w]
    while k > 0 and cost > 0:
        assert board.is_computed(k - 1, w), f"Cell {(k - 1, w)} was never computed"
        # If the cell differs from the cell without item k, then item k
        # was included
        if board[k, w] != board[k - 1, w]:
            item = items[k - 1]
            selected.append(item)
            w = round_half_up(w - item.weight)
        k -= 1
        cost, _ = board[k, w]

    return selected


FILL_METHODS = {
    "lazy": lambda board, items: lazy_cost(board, items, board.item_count, board.capacity),
    "table": table_cost,
}


def solve_instance(instance, *, fill="lazy"):
    """
    Solve one instance and return its Selection.

    fill - 'lazy' computes only the cells it needs, top-down,
        'table' fills the whole board bottom-up.
    """
    if fill not in FILL_METHODS:
        raise ValueError(f"Unknown fill method: {fill}")

    if instance.is_degenerate:
        return Selection(line=instance.line)

    items = instance.sorted_items()
    board = CostBoard(len(items), instance.capacity)
    cost, weight = FILL_METHODS[fill](board, items)
    selected = backtrace(board, items)

    logger.debug(
        f"Line {instance.line}: {board.num_computed()} of {board.cost.size} cells computed"
    )
    return Selection(
        indices=[item.index for item in selected],
        cost=cost,
        weight=weight,
        line=instance.line,
    )
