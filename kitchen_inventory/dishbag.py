from typing import Callable, Iterator, List, Optional

from .kitchendata import Dish


class DishBag:
    """Unordered container of dishes; equal dishes are never stored twice"""

    def __init__(self, capacity: Optional[int] = None) -> None:
        self.capacity = capacity
        self._items: List[Dish] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Dish]:
        return iter(list(self._items))

    def __contains__(self, item: Dish) -> bool:
        return self.contains(item)

    def getCurrentSize(self) -> int:
        return len(self._items)

    def isEmpty(self) -> bool:
        return not self._items

    def isFull(self) -> bool:
        return self.capacity is not None and len(self._items) >= self.capacity

    def getIndexOf(self, item: Dish) -> int:
        """Position of an equal item or -1"""

        for i, stored in enumerate(self._items):
            if stored == item:
                return i

        return -1

    def contains(self, item: Dish) -> bool:
        return self.getIndexOf(item) >= 0

    def getFrequencyOf(self, item: Dish) -> int:
        return sum(1 for stored in self._items if stored == item)

    def add(self, item: Dish) -> bool:
        if self.isFull() or self.contains(item):
            return False

        self._items.append(item)
        return True

    def remove(self, item: Dish) -> bool:
        """Swap the last item into the vacated slot, order is not kept"""

        i = self.getIndexOf(item)
        if i < 0:
            return False

        self._items[i] = self._items[-1]
        self._items.pop()
        return True

    def removeIf(self, predicate: Callable[[Dish], bool]) -> List[Dish]:
        """Drop every item accepted by predicate and return the dropped ones"""

        kept, removed = [], []
        for item in self._items:
            (removed if predicate(item) else kept).append(item)

        self._items = kept
        return removed

    def clear(self) -> None:
        self._items = []

    def items(self) -> List[Dish]:
        return list(self._items)
