"""
Query parameter builder for Delivery API requests.

The client accepts query parameters as an ordered sequence of (name, value)
pairs. DeliveryParameterBuilder produces such a sequence from readable
filter, ordering, paging and projection calls.
"""

from typing import Iterable, Iterator, List, Tuple

ASC = "asc"
DESC = "desc"


class DeliveryParameterBuilder:
    """Fluent builder of ordered query parameter pairs.

    Example:
        params = (
            DeliveryParameterBuilder()
            .filter_equals("system.type", "article")
            .order_by_desc("elements.post_date")
            .page(skip=0, limit=10)
            .build()
        )
        client.get_items(params)
    """

    def __init__(self):
        self._params: List[Tuple[str, str]] = []

    def add(self, name: str, value) -> "DeliveryParameterBuilder":
        """Append a raw parameter pair."""
        self._params.append((name, str(value)))
        return self

    # Filtering

    def filter_equals(self, element: str, value: str) -> "DeliveryParameterBuilder":
        return self.add(element, value)

    def filter_all(self, element: str, values: Iterable[str]) -> "DeliveryParameterBuilder":
        return self._filter(element, "all", ",".join(values))

    def filter_any(self, element: str, values: Iterable[str]) -> "DeliveryParameterBuilder":
        return self._filter(element, "any", ",".join(values))

    def filter_contains(self, element: str, value: str) -> "DeliveryParameterBuilder":
        return self._filter(element, "contains", value)

    def filter_in(self, element: str, values: Iterable[str]) -> "DeliveryParameterBuilder":
        return self._filter(element, "in", ",".join(values))

    def filter_less_than(self, element: str, value) -> "DeliveryParameterBuilder":
        return self._filter(element, "lt", value)

    def filter_less_than_or_equal(self, element: str, value) -> "DeliveryParameterBuilder":
        return self._filter(element, "lte", value)

    def filter_greater_than(self, element: str, value) -> "DeliveryParameterBuilder":
        return self._filter(element, "gt", value)

    def filter_greater_than_or_equal(self, element: str, value) -> "DeliveryParameterBuilder":
        return self._filter(element, "gte", value)

    def filter_range(self, element: str, lower, upper) -> "DeliveryParameterBuilder":
        return self._filter(element, "range", f"{lower},{upper}")

    def _filter(self, element: str, operator: str, value) -> "DeliveryParameterBuilder":
        return self.add(f"{element}[{operator}]", value)

    # Ordering

    def order_by_asc(self, element: str) -> "DeliveryParameterBuilder":
        return self.add("order", f"{element}[{ASC}]")

    def order_by_desc(self, element: str) -> "DeliveryParameterBuilder":
        return self.add("order", f"{element}[{DESC}]")

    # Paging

    def skip(self, count: int) -> "DeliveryParameterBuilder":
        return self.add("skip", self._non_negative("skip", count))

    def limit(self, count: int) -> "DeliveryParameterBuilder":
        return self.add("limit", self._non_negative("limit", count))

    def page(self, skip: int, limit: int) -> "DeliveryParameterBuilder":
        return self.skip(skip).limit(limit)

    # Response shaping

    def depth(self, levels: int) -> "DeliveryParameterBuilder":
        """Set how many levels of modular content are returned."""
        return self.add("depth", self._non_negative("depth", levels))

    def project(self, *elements: str) -> "DeliveryParameterBuilder":
        """Return only the listed elements of each item."""
        return self.add("elements", ",".join(elements))

    def language(self, code: str) -> "DeliveryParameterBuilder":
        return self.add("language", code)

    def build(self) -> List[Tuple[str, str]]:
        return list(self._params)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self.build())

    def __len__(self) -> int:
        return len(self._params)

    @staticmethod
    def _non_negative(name: str, value: int) -> int:
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")
        return value
