from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field
import itertools
from typing import Any

from baseforms.services.use_cases.base_forms import BaseFormsHooks


CONTENT_BEFORE_INDEX = "content_before_index"
TITLE_BEFORE_INDEX = "title_before_index"
CUSTOM_FIELD_VALUE = "custom_field_value"
SEARCH_FILTERS = "search_filters"
HIGHLIGHT_REGEX = "highlight_regex"

DEFAULT_PRIORITY = 10

Filter = Callable[..., Any]


@dataclass(order=True, frozen=True)
class _RegisteredFilter:
    priority: int
    sequence: int
    callback: Filter = field(compare=False)


class HookRegistry:
    """Named extension points; each one threads a value through its filters.

    Lower priorities run first and equal priorities keep registration order.
    """

    def __init__(self) -> None:
        self._filters: dict[str, list[_RegisteredFilter]] = defaultdict(list)
        self._sequence = itertools.count()

    def add_filter(self, name: str, callback: Filter, priority: int = DEFAULT_PRIORITY) -> None:
        entries = self._filters[name]
        entries.append(_RegisteredFilter(priority, next(self._sequence), callback))
        entries.sort()

    def has_filters(self, name: str) -> bool:
        return bool(self._filters.get(name))

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        for entry in self._filters.get(name, ()):
            value = entry.callback(value, *args)
        return value


def register_hooks(
    registry: HookRegistry, hooks: BaseFormsHooks, *, include_custom_fields: bool = False
) -> bool:
    """Wire the base forms filters into ``registry``.

    Custom field values are left alone unless ``include_custom_fields`` is set.
    """
    if not hooks.enabled:
        return False

    registry.add_filter(CONTENT_BEFORE_INDEX, hooks.augment_content)
    registry.add_filter(TITLE_BEFORE_INDEX, hooks.augment_title)
    if include_custom_fields:
        registry.add_filter(CUSTOM_FIELD_VALUE, hooks.augment_custom_field)
    registry.add_filter(SEARCH_FILTERS, hooks.augment_query)
    registry.add_filter(HIGHLIGHT_REGEX, hooks.highlight_pattern)
    return True
