from typing import Dict, Iterator

from gcl.errors import UndefinedVariableError
from gcl.types import wrap_int64


class Environment:
    """Maps variable names to 64-bit signed integer values.

    One environment lives for exactly one program run. Assign and Read are
    the only statements that bind names.
    """
    def __init__(self):
        self.values: Dict[str, int] = {}

    def get(self, name: str) -> int:
        if name in self.values:
            return self.values[name]
        raise UndefinedVariableError(name)

    def set(self, name: str, value: int):
        self.values[name] = wrap_int64(value)

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __str__(self) -> str:
        # insertion order, e.g. {x=3, y=4}
        return '{' + ', '.join(f"{name}={value}" for name, value in self.values.items()) + '}'

    def __repr__(self) -> str:
        return f"Environment({self.values!r})"
