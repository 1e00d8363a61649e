r"""
'   .__
'   |  |   ____   ______ ___.__.
'   |  |  /  _ \ / ____/<   |  |
'   |  |_(  <_> < <_|  | \___  |
'   |____/\____/ \__   | / ____|
'                   |__| \/
"""
import logging

# library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

# expose the main class
from .enumerable import Enumerable

# expose the factory functions
from .factories import from_iterable, from_range, empty, loqy, L

# expose supporting types and settings
from .types import Entry, DurationUnit, LoqyError, NthIndexError
from .config import Settings, get_settings, configure
from .common import normalize_index, clamp_index

# --- flat function api ---
from .extensions.search import (
    find, find_or_else, find_index_of, find_last_index_of, index_of, last_index_of,
    find_key, find_key_by, find_duplicates, find_duplicates_by, find_uniques, find_uniques_by,
    first, last, first_or, last_or, first_or_empty, last_or_empty, nth
)
from .extensions.chrono import earliest, latest, earliest_by, latest_by, duration_between
from .extensions.transform import (
    map, filter, reject, filter_map, reject_map, flat_map, reduce, reduce_right,
    foreach, foreach_while, filter_reject, times, compact, replace, replace_all
)
from .extensions.grouping import (
    group_by, partition_by, uniq, uniq_by, count, count_by, count_values, count_values_by,
    key_by, associate, slice_to_map
)
from .extensions.shape import (
    chunk, flatten, interleave, splice, slice, subset, drop, drop_right, drop_while,
    drop_right_while, drop_by_index, reverse, fill, repeat, repeat_by
)
from .extensions.sampling import (
    sample, samples, shuffle, random_string,
    LOWER_CASE_LETTERS, UPPER_CASE_LETTERS, LETTERS, NUMBERS, ALPHANUMERIC,
    SPECIAL_CHARACTERS, ALL_CHARACTERS
)
from .extensions.strings import (
    words, capitalize, camel_case, pascal_case, snake_case, kebab_case,
    ellipsis, substring, char_length, chunk_string
)
from .extensions.maps import (
    keys, values, uniq_keys, uniq_values, entries, to_pairs, from_entries, from_pairs,
    has_key, value_or, pick_by, pick_by_keys, pick_by_values, omit_by, omit_by_keys,
    omit_by_values, invert, assign, map_keys, map_values, map_entries, map_to_slice
)
from .extensions.numeric import (
    sum, sum_by, product, mean, mean_by, median, percentile, max, min, max_by, min_by,
    is_sorted, is_sorted_by_key, clamp, range, range_from, range_with_steps,
    nearest_power_of_two, interpolate, combination, permutation
)

# define what `import *` does. names that would shadow builtins are left out,
# reach them as loqy.map, loqy.sum, ...
_SHADOWING = {"map", "filter", "slice", "sum", "max", "min", "range"}
_MODULES = {"logging", "types", "config", "common", "enumerable", "factories", "extensions"}

__all__ = sorted(name for name in dir() if not name.startswith("_")
                 and name not in _SHADOWING and name not in _MODULES)
