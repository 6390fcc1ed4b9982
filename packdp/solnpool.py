import dataclasses
import json
import munch

EMPTY_SELECTION = "-"


@dataclasses.dataclass
class Selection:
    """
    The items chosen for one instance, identified by their item index.
    """

    _: dataclasses.KW_ONLY
    indices: tuple = ()
    cost: float = 0
    weight: float = 0
    line: int = None
    suffix: munch.Munch = dataclasses.field(default_factory=munch.Munch)

    def __post_init__(self):
        self.indices = tuple(sorted(self.indices))

    def __len__(self):
        return len(self.indices)

    def render(self):
        if len(self.indices) == 0:
            return EMPTY_SELECTION
        return ",".join(str(i) for i in self.indices)

    def to_dict(self):
        return dict(
            indices=list(self.indices),
            cost=self.cost,
            weight=self.weight,
            line=self.line,
            suffix=munch.unmunchify(self.suffix),
        )


class SelectionPool:
    """
    Selections for a sequence of instances, kept in the order they were added.
    """

    def __init__(self, name=None):
        self.metadata = munch.Munch(context_name=name)
        self._selections = []

    @property
    def last_selection(self):
        return self._selections[-1]

    def __iter__(self):
        for soln in self._selections:
            yield soln

    def __len__(self):
        return len(self._selections)

    def __getitem__(self, i):
        return self._selections[i]

    def add(self, *args, **kwargs):
        if len(args) == 1 and len(kwargs) == 0:
            assert type(args[0]) is Selection, "Expected a single selection"
            soln = args[0]
        else:
            soln = Selection(*args, **kwargs)
        self._selections.append(soln)
        return len(self._selections) - 1

    def render(self):
        return "\n".join(soln.render() for soln in self._selections)

    def to_dict(self):
        return dict(
            metadata=munch.unmunchify(self.metadata),
            selections=[soln.to_dict() for soln in self._selections],
        )

    def write(self, json_filename, indent=None, sort_keys=True):
        with open(json_filename, "w") as OUTPUT:
            json.dump(self.to_dict(), OUTPUT, indent=indent, sort_keys=sort_keys)
