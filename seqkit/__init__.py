"""
'    ___ ___  __ _ | | _(_) |_
'   / __/ _ \/ _` || |/ / | __|
'   \__ \  __/ (_| ||   <| | |_
'   |___/\___|\__, ||_|\_\_|\__|
'                |_|
"""
import logging

# expose the toolkit functions
from .extensions.set import to_set, to_set_pred
from .extensions.search import (
    contains,
    contains_pred,
    find_pred,
    index_of,
    last_index_of,
    index_of_slice
)
from .extensions.partition import chunk_slice, concat_slices
from .extensions.ordering import sort, sort_pred

# collaborating helpers
from .extensions.convert import to_object_list, to_str_list, to_str_derived_list, to_number_list
from .extensions.mapping import map_update, map_keys, map_values, map_get, map_set_default
from .extensions.stats import min_of, max_of, abs_int64
from .extensions.cond import if_, must

# expose the chainable wrapper
from .enumerable import Seq
from .factories import from_iterable, from_range, empty, seq, S

# expose errors
from .types import SeqkitError, InvalidArgumentError, InputRequiredError

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "to_set",
    "to_set_pred",
    "contains",
    "contains_pred",
    "find_pred",
    "index_of",
    "last_index_of",
    "index_of_slice",
    "chunk_slice",
    "concat_slices",
    "sort",
    "sort_pred",
    "to_object_list",
    "to_str_list",
    "to_str_derived_list",
    "to_number_list",
    "map_update",
    "map_keys",
    "map_values",
    "map_get",
    "map_set_default",
    "min_of",
    "max_of",
    "abs_int64",
    "if_",
    "must",
    "Seq",
    "from_iterable",
    "from_range",
    "empty",
    "seq",
    "S",
    "SeqkitError",
    "InvalidArgumentError",
    "InputRequiredError"
]
