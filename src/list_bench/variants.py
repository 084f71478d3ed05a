"""List variants under benchmark."""
from collections import deque
from dataclasses import dataclass
from typing import Callable, MutableSequence, Tuple


def append(container: MutableSequence[int], value: int) -> None:
    container.append(value)


def get(container: MutableSequence[int], index: int) -> int:
    return container[index]


def remove_at(container: MutableSequence[int], index: int) -> None:
    del container[index]


@dataclass(frozen=True)
class ListVariant:
    """
    A named sequential container implementation.

    Attributes:
        name (str): Label printed in the Collection column.
        factory (Callable): Returns a fresh, empty container.
    """
    name: str
    factory: Callable[[], MutableSequence[int]]

    def create(self) -> MutableSequence[int]:
        return self.factory()


# Contiguous storage: amortized O(1) append, O(1) read, O(n) arbitrary removal
ARRAY_LIST = ListVariant("ArrayList", list)

# Doubly-linked blocks: O(1) append, O(n) read by index, O(1) removal at the ends
LINKED_LIST = ListVariant("LinkedList", deque)

VARIANTS: Tuple[ListVariant, ...] = (ARRAY_LIST, LINKED_LIST)


def get_variant(name: str) -> ListVariant:
    """Look up a variant by its printed name."""
    for variant in VARIANTS:
        if variant.name == name:
            return variant
    raise ValueError(
        f"Unknown list variant: {name!r} "
        f"(expected one of {', '.join(v.name for v in VARIANTS)})"
    )
