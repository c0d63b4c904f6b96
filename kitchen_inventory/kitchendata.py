import json

from dataclasses import dataclass
from typing import List, Optional, Tuple
from pathlib import Path

cuisine_types = ["ITALIAN", "MEXICAN", "CHINESE", "INDIAN", "AMERICAN", "FRENCH", "OTHER"]

ELABORATE_MIN_INGREDIENTS = 5
ELABORATE_MIN_PREP_TIME = 60


@dataclass(frozen=True)
class Dish:
    name: str
    ingredients: Tuple[str, ...] = ()
    prepTime: int = 0
    price: float = 0.0
    cuisineType: str = "OTHER"

    def __post_init__(self):
        # keep our own copy so the caller's list can't change a stored dish
        if isinstance(self.ingredients, list):
            object.__setattr__(self, "ingredients", tuple(self.ingredients))

    def getName(self) -> str:
        return self.name

    def getIngredients(self) -> Tuple[str, ...]:
        return self.ingredients

    def getIngredientCount(self) -> int:
        return len(self.ingredients)

    def getPrepTime(self) -> int:
        return self.prepTime

    def getPrice(self) -> float:
        return self.price

    def getCuisineType(self) -> str:
        return self.cuisineType

    def isElaborate(self) -> bool:
        """Elaborate dish: long ingredient list and long preparation"""

        return (self.getIngredientCount() >= ELABORATE_MIN_INGREDIENTS
                and self.getPrepTime() >= ELABORATE_MIN_PREP_TIME)


@dataclass
class Config:
    capacity: Optional[int] = None


def is_strict_int(value) -> bool:
    """bool is a subclass of int but never a valid count or duration"""

    return isinstance(value, int) and not isinstance(value, bool)


def has_valid_types(dish: Dish) -> bool:
    return (is_strict_int(dish.prepTime)
            and isinstance(dish.ingredients, tuple)
            and isinstance(dish.cuisineType, str))


def load_json(filename: str, errors_sink):
    """Reusable function to read a file & parse json. Returns None in case of errors."""

    if not Path(filename).is_file():
        print(
            f"load_json: required file does not exist: '{filename}'", file=errors_sink)
        return None

    try:
        with open(filename, "r") as f:
            data = json.load(f)

    except json.JSONDecodeError as e:
        print(
            f"load_json: JSONDecodeError from file '{filename}'; {e}", file=errors_sink)
        return None

    if data is None:
        print(
            f"load_json: file '{filename}' contains null", file=errors_sink)

    return data


def load_dishes(filename: str, errors_sink) -> Optional[List[Dish]]:
    """Loading kitchen dishes from json into Dish class"""

    dishes = load_json(filename, errors_sink)
    if dishes is None:
        return None

    if not isinstance(dishes, list):
        print(
            f"load_dishes: Expected a list of dishes, got {dishes.__class__.__name__}", file=errors_sink)
        return None

    try:
        obj_list = [Dish(**dish) for dish in dishes]

        wrong_types = [dish.name for dish in obj_list if not has_valid_types(dish)]
        if wrong_types:
            print(
                f"load_dishes: wrong field type(s) for dish(es): {wrong_types}; " +
                "expected integer prepTime, list of ingredients, string cuisineType", file=errors_sink)
            return None

        allowed = set(cuisine_types)
        cuisines = set([dish.cuisineType for dish in obj_list])

        if not cuisines.issubset(allowed):
            print(
                f"load_dishes: unexpected cuisine type(s): {cuisines.difference(allowed)}", file=errors_sink)
            return None

        negative = [dish.name for dish in obj_list if dish.prepTime < 0]
        if negative:
            print(
                f"load_dishes: negative prep time for dish(es): {negative}", file=errors_sink)
            return None

    except Exception as e:
        print(
            f"load_dishes: Can't convert json data into {Dish}: {e}", file=errors_sink)
        return None

    return obj_list


def load_config(filename: str, errors_sink) -> Optional[Config]:
    """Loading configuration parameters from json into Config class"""

    config = load_json(filename, errors_sink)
    if config is None:
        return None

    try:
        cfg = Config(**config)

        capacity = cfg.capacity
        if capacity is not None and (not is_strict_int(capacity) or capacity <= 0):
            print(
                f"load_config: capacity must be a positive integer or null; got {capacity}", file=errors_sink)
            return None

    except Exception as e:
        print(
            f"load_config: Can't convert json data into {Config}: {e}", file=errors_sink)
        return None

    return cfg
