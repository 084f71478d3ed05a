"""
list_bench — Array-backed vs linked-node list micro-benchmark.

Quick-start imports::

    from list_bench import VARIANTS, measure_add_time, format_result
"""

from list_bench.measure import (
    OPERATIONS_COUNT,
    Sample,
    fill_list,
    format_result,
    measure_add_time,
    measure_delete_time,
    measure_get_time,
)
from list_bench.variants import (
    ARRAY_LIST,
    LINKED_LIST,
    VARIANTS,
    ListVariant,
    get_variant,
)

__all__ = [
    "ARRAY_LIST",
    "LINKED_LIST",
    "OPERATIONS_COUNT",
    "VARIANTS",
    "ListVariant",
    "Sample",
    "fill_list",
    "format_result",
    "get_variant",
    "measure_add_time",
    "measure_delete_time",
    "measure_get_time",
]
