"""Re-assemble command-line arguments the shell split apart.

``prog name = "some value"`` and ``prog "name=some value"`` arrive as
different argv lists. :func:`reparse_args` normalises both to
``[ArgPair(name="name", value='"some value"')]``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ArgPair:
    value: str = ""
    name: str | None = None

    def __str__(self) -> str:
        if self.name and self.name.strip():
            return f"{self.name}={self.value}"
        return self.value


def _split_named_values(args: Sequence[str]) -> list[str]:
    """``name=some value`` becomes ``name=`` and ``some value``."""
    worker: list[str] = []
    for arg in args:
        equals_index = arg.find("=")
        space_index = arg.find(" ")
        if equals_index != -1 and space_index > equals_index:
            worker.append(arg[: equals_index + 1])
            worker.append(arg[equals_index + 1 :])
        else:
            worker.append(arg)
    return worker


def reparse_args(args: Sequence[str]) -> list[ArgPair]:
    """Pair ``name=`` arguments with their values, re-quoting spaced values."""
    worker = _split_named_values(args)

    # Quote anything that still contains a space.
    worker = [f'"{item}"' if " " in item else item for item in worker]

    # A lone "=" belongs to the argument before it.
    for index in range(len(worker) - 1, 0, -1):
        if worker[index] == "=":
            worker[index - 1] += "="
            del worker[index]

    # "name==" and longer runs mean "name=".
    worker = [item[: len(item.rstrip("=")) + 1] if item.endswith("==") else item for item in worker]

    result: list[ArgPair] = []
    items = iter(worker)
    for item in items:
        if item.endswith("="):
            result.append(ArgPair(value=next(items, ""), name=item[:-1]))
        else:
            result.append(ArgPair(value=item))
    return result
