import sys
import logging

from collections import Counter
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, List, Optional, TextIO

from .kitchendata import Dish, Config, cuisine_types
from .dishbag import DishBag


def set_logger(debug_level: int) -> None:
    """Configure logger for kitchen troubleshooting"""

    if debug_level == 1:
        level = logging.INFO
    elif debug_level == 2:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logging.basicConfig(
        format='%(asctime)s %(levelname)s %(filename)s/%(funcName)s: %(message)s',
        level=level
    )


def round_half_up(numerator: int, denominator: int, places: int = 0) -> Decimal:
    """Round numerator/denominator half-up without going through float"""

    exact = Decimal(numerator) / Decimal(denominator)

    return exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


class Kitchen:
    """Kitchen keeps dishes in a bag together with running aggregates over them"""

    def __init__(self, config: Optional[Config] = None) -> None:
        self.logger = logging.getLogger(__name__)
        self.config = config if config else Config()

        # Kitchen owns the bag; it is never shared between kitchens
        self.bag = DishBag(capacity=self.config.capacity)

        # aggregates are updated on every add/remove, never recomputed
        self.total_prep_time = 0
        self.count_elaborate = 0

    def getCurrentSize(self) -> int:
        return self.bag.getCurrentSize()

    def isEmpty(self) -> bool:
        return self.bag.isEmpty()

    def contains(self, dish: Dish) -> bool:
        return self.bag.contains(dish)

    def dishes(self) -> List[Dish]:
        return self.bag.items()

    def _account(self, dish: Dish, sign: int) -> None:
        self.total_prep_time += sign * dish.getPrepTime()
        if dish.isElaborate():
            self.count_elaborate += sign

    def newOrder(self, dish: Dish) -> bool:
        """Add dish unless an equal one is present or the bag is full"""

        if not self.bag.add(dish):
            reason = "kitchen is FULL" if self.bag.isFull() else "duplicate"
            capacity = self.bag.capacity if self.bag.capacity else "UNLIMITED"

            self.logger.warning(
                f"dish '{dish.getName()}' STATUS=rejected ({reason}; {self.getCurrentSize()}/{capacity})")
            return False

        self._account(dish, +1)

        self.logger.info(
            f"dish '{dish.getName()}' STATUS=new prep_time={dish.getPrepTime()} elaborate={dish.isElaborate()}")
        self.logger.debug(f"dish '{dish.getName()}' details: {dish}")

        return True

    def serveDish(self, dish: Dish) -> bool:
        """Remove a dish equal to the given one; aggregates use the argument's fields"""

        if not self.bag.remove(dish):
            self.logger.info(f"dish '{dish.getName()}' STATUS=not_found")
            return False

        self._account(dish, -1)

        self.logger.info(f"dish '{dish.getName()}' STATUS=served")

        return True

    def getPrepTimeSum(self) -> int:
        return self.total_prep_time

    def calculateAvgPrepTime(self) -> int:
        """Average prep time rounded to the nearest integer, 0 for empty kitchen"""

        size = self.getCurrentSize()
        if size == 0:
            return 0

        return max(0, int(round_half_up(self.total_prep_time, size)))

    def elaborateDishCount(self) -> int:
        return self.count_elaborate

    def calculateElaboratePercentage(self) -> float:
        """Share of elaborate dishes in percent, rounded half-up to 2 decimals"""

        size = self.getCurrentSize()
        if size == 0:
            return 0.0

        return float(round_half_up(self.count_elaborate * 100, size, places=2))

    def tallyCuisineTypes(self, cuisineType: str) -> int:
        # exact match only: "italian" does not count as "ITALIAN"
        return sum(1 for dish in self.bag if dish.getCuisineType() == cuisineType)

    def cuisine_counts(self) -> Counter:
        """Tally all known cuisine types in one pass"""

        counter = Counter(dish.getCuisineType() for dish in self.bag)

        return Counter({cuisine: counter[cuisine] for cuisine in cuisine_types})

    def release(self, predicate: Callable[[Dish], bool]) -> int:
        """Remove all dishes matching predicate, keeping aggregates in step"""

        removed = self.bag.removeIf(predicate)

        for dish in removed:
            self._account(dish, -1)
            self.logger.info(f"dish '{dish.getName()}' STATUS=released")

        return len(removed)

    def releaseDishesBelowPrepTime(self, threshold: int) -> int:
        count = self.release(lambda dish: dish.getPrepTime() < threshold)

        self.logger.debug(f"released {count} dish(es) with prep time below {threshold}")

        return count

    def releaseDishesOfCuisineType(self, cuisineType: str) -> int:
        count = self.release(lambda dish: dish.getCuisineType() == cuisineType)

        self.logger.debug(f"released {count} dish(es) of cuisine type {cuisineType}")

        return count

    def kitchenReport(self, out: Optional[TextIO] = None) -> None:
        """Prints count per cuisine, average prep time and elaborate percentage"""

        out = out if out else sys.stdout

        counter = self.cuisine_counts()

        for cuisine in cuisine_types:
            print(f"{cuisine}: {counter[cuisine]}", file=out)

        print("", file=out)
        print(f"AVERAGE PREP TIME: {self.calculateAvgPrepTime()}", file=out)
        print(f"ELABORATE DISHES: {self.calculateElaboratePercentage():.2f}%", file=out)

    def snapshot(self) -> None:
        """Dumps the current state of the kitchen to logger"""

        counter = self.cuisine_counts()

        for cuisine in cuisine_types:
            self.logger.debug(f"SNAPSHOT: cuisine {cuisine.ljust(8)} {counter[cuisine]}")

        self.logger.debug(
            f"SNAPSHOT: dishes={self.getCurrentSize()} prep_time_sum={self.total_prep_time} elaborate={self.count_elaborate}")

    def run(self, dishes: List[Dish], debug_level: int = 0) -> None:
        """Main function: place every dish and print the report"""

        set_logger(debug_level)

        self.logger.info(self.config)
        self.logger.warning(f"Start kitchen: dish count={len(dishes)}")

        accepted = 0
        for dish in dishes:
            if self.newOrder(dish):
                accepted += 1

        self.snapshot()

        self.logger.warning(
            f"Stop kitchen: accepted={accepted}, rejected={len(dishes) - accepted}")

        self.kitchenReport()
