import dataclasses
import math


def round_half_up(value):
    """
    Round to the nearest integer, with halves rounded towards +infinity.

    Python's round() uses banker's rounding, so round(2.5) == 2.  Capacities
    and weights share one integer unit and halves must always round up.
    """
    return int(math.floor(value + 0.5))


@dataclasses.dataclass(frozen=True)
class Item:
    _: dataclasses.KW_ONLY
    index: int
    weight: float
    cost: float

    def to_dict(self):
        return dataclasses.asdict(self)


@dataclasses.dataclass(frozen=True)
class Instance:
    _: dataclasses.KW_ONLY
    capacity: int = 0
    items: tuple = ()
    line: int = None

    @property
    def is_degenerate(self):
        return self.capacity < 1 or len(self.items) == 0

    def sorted_items(self):
        # sorted() is stable, so items of equal weight keep their input order
        return sorted(self.items, key=lambda item: item.weight)

    def to_dict(self):
        return dict(
            capacity=self.capacity,
            items=[item.to_dict() for item in self.items],
            line=self.line,
        )


def knapsack_instance(*, capacity, items=None, line=None):
    """
    capacity - The maximum total weight.  Fractional values are rounded
        half-up; negative values produce a degenerate instance.

    items - A list of Item objects, (index, weight, cost) tuples or dicts
        with 'index', 'weight' and 'cost' keys.

    line - The source line number of this instance, if any.
    """
    if items is None:
        items = []

    _items = []
    for item in items:
        if type(item) is Item:
            _items.append(item)
        elif isinstance(item, dict):
            _items.append(Item(**item))
        else:
            index, weight, cost = item
            _items.append(Item(index=index, weight=weight, cost=cost))

    for item in _items:
        assert item.weight >= 0, f"Item {item.index} has a negative weight: {item.weight}"
        assert item.cost >= 0, f"Item {item.index} has a negative cost: {item.cost}"

    capacity = round_half_up(capacity)
    if capacity < 0:
        capacity = 0

    return Instance(capacity=capacity, items=tuple(_items), line=line)
