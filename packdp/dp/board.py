import numpy as np


class CostBoard(object):
    """
    Memo table for one instance.

    Cell (k, w) holds the best cost achievable with the first k items under a
    weight budget of w, together with the total weight of the items that
    realise it.  Cells that have not been computed hold nan.  Row 0 and
    column 0 are initialized to zero.
    """

    def __init__(self, item_count, capacity):
        assert item_count >= 0, f"Unexpected item count: {item_count=}"
        assert capacity >= 0, f"Unexpected capacity: {capacity=}"
        self.item_count = item_count
        self.capacity = capacity

        shape = (item_count + 1, capacity + 1)
        self.cost = np.full(shape, np.nan)
        self.weight = np.full(shape, np.nan)
        self.cost[0, :] = 0
        self.cost[:, 0] = 0
        self.weight[0, :] = 0
        self.weight[:, 0] = 0

    @property
    def shape(self):
        return self.cost.shape

    def is_computed(self, k, w):
        return not np.isnan(self.cost[k, w])

    def set(self, k, w, cost, weight):
        assert not self.is_computed(k, w), f"Cell {(k, w)} was already computed"
        self.cost[k, w] = cost
        self.weight[k, w] = weight

    def __getitem__(self, cell):
        k, w = cell
        return float(self.cost[k, w]), float(self.weight[k, w])

    def num_computed(self):
        return int(np.count_nonzero(~np.isnan(self.cost)))
