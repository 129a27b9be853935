"""Core helpers, re-exported flat.

Every public helper of the ``core`` modules can be imported from here, e.g.
``from generic_functions.core import chunk, group_by``.
"""

from .arithmetic import (
    add,
    ceil,
    divide,
    floor,
    in_range,
    max_,
    max_by,
    mean,
    mean_by,
    min_,
    min_by,
    multiply,
    round_,
    std,
    subtract,
    sum_,
    sum_by,
    variance,
)
from .array import (
    check_length,
    chunk,
    compact,
    concat,
    difference,
    difference_by,
    difference_with,
    drop,
    drop_right,
    drop_right_while,
    drop_while,
    fill,
    find_index,
    find_last_index,
    flatten,
    flatten_deep,
    flatten_depth,
    get_last_element,
    get_unique,
    head,
    index_of,
    initial,
    intersection,
    intersection_by,
    intersection_with,
    join,
    last,
    last_index_of,
    nth,
    pull,
    pull_all,
    pull_all_by,
    pull_all_with,
    pull_at,
    random_string,
    remove,
    reverse,
    slice_,
    sort_objects,
    sorted_index,
    sorted_index_by,
    sorted_index_of,
    sorted_last_index,
    sorted_last_index_by,
    sorted_last_index_of,
    tail,
    take,
    take_right,
    take_right_while,
    take_while,
    union,
    union_by,
    union_with,
    uniq,
    uniq_by,
    uniq_with,
    unzip,
    unzip_with,
    without,
    xor,
    xor_by,
    xor_with,
    zip_,
    zip_object,
    zip_object_deep,
    zip_with,
)
from .collection import (
    count_by,
    each,
    each_right,
    every,
    filter_,
    find,
    find_key,
    find_last,
    flat_map,
    flat_map_deep,
    for_each,
    for_each_right,
    group_by,
    includes,
    invoke_map,
    key_by,
    map_,
    order_by,
    partition,
    reduce_,
    reduce_right,
    reject,
    sample,
    sample_size,
    shuffle,
    size,
    some,
    sort_by,
)
from .date import (
    add_time,
    format_date,
    get_format,
    is_between,
    is_date,
    is_date_different,
    min_and_max_years,
    now,
    seconds_to_tomorrow,
    to_datetime,
)
from .filtering import (
    DEFAULT_SEARCH_PATTERN,
    FilterParams,
    Selection,
    filter_data,
)
from .function import (
    Debounced,
    ary,
    bind_key,
    curry,
    curry_right,
    debounce,
    flip,
    memoize,
    negate,
    once,
    over_args,
    partial,
    partial_right,
    rearg,
    rest,
    spread,
    throttle,
    unary,
    wrap,
)
from .guards import (
    MAX_SAFE_INTEGER,
    is_array_like,
    is_array_like_object,
    is_boolean,
    is_buffer,
    is_equal_with,
    is_error,
    is_finite,
    is_function,
    is_integer,
    is_length,
    is_list,
    is_map,
    is_match,
    is_match_with,
    is_nan,
    is_native,
    is_nil,
    is_none,
    is_number,
    is_object,
    is_object_like,
    is_plain_object,
    is_reg_exp,
    is_safe_integer,
    is_set,
    is_string,
    is_typed_array,
    is_weak_map,
    is_weak_set,
)
from .numeric import (
    clamp,
    number,
    parse_float,
    random_,
    random_int,
)
from .object import (
    assign,
    at,
    clone,
    clone_deep,
    compare_types,
    conforms_to,
    defaults,
    defaults_deep,
    entries,
    find_last_key,
    flat,
    for_own,
    for_own_right,
    from_pairs,
    functions,
    get,
    get_object_keys_by_type,
    get_object_value_by_path,
    get_value_type,
    has,
    invert,
    invert_by,
    invoke,
    is_empty,
    is_equal,
    keys,
    map_keys,
    map_values,
    merge,
    merge_with,
    method,
    method_of,
    omit,
    omit_by,
    pick,
    pick_by,
    result,
    set_,
    set_with,
    to_pairs,
    transform,
    unset,
    update,
    update_with,
    values,
)
from .string import (
    camel_case,
    capitalize,
    clean,
    deburr,
    decode_html_entities,
    ends_with,
    escape,
    escape_reg_exp,
    get_initials,
    kebab_case,
    lower_case,
    lower_first,
    pad,
    pad_end,
    pad_start,
    parse_int,
    pascal_case,
    purify,
    remove_break_lines,
    repeat,
    replace,
    snake_case,
    split,
    start_case,
    starts_with,
    template,
    to_array,
    to_lower,
    to_upper,
    to_upper_case,
    trim,
    trim_end,
    trim_start,
    truncate,
    unescape,
    upper_case,
    upper_first,
    words,
)
from .utility import (
    constant,
    identity,
    iteratee,
    matches,
    matches_property,
    noop,
    property_,
    property_of,
    range_,
    range_right,
    stub_dict,
    stub_false,
    stub_list,
    stub_string,
    stub_true,
    times,
    unique_id,
)

__all__ = [
    "DEFAULT_SEARCH_PATTERN",
    "Debounced",
    "FilterParams",
    "MAX_SAFE_INTEGER",
    "Selection",
    "add",
    "add_time",
    "ary",
    "assign",
    "at",
    "bind_key",
    "camel_case",
    "capitalize",
    "ceil",
    "check_length",
    "chunk",
    "clamp",
    "clean",
    "clone",
    "clone_deep",
    "compact",
    "compare_types",
    "concat",
    "conforms_to",
    "constant",
    "count_by",
    "curry",
    "curry_right",
    "debounce",
    "deburr",
    "decode_html_entities",
    "defaults",
    "defaults_deep",
    "difference",
    "difference_by",
    "difference_with",
    "divide",
    "drop",
    "drop_right",
    "drop_right_while",
    "drop_while",
    "each",
    "each_right",
    "ends_with",
    "entries",
    "escape",
    "escape_reg_exp",
    "every",
    "fill",
    "filter_",
    "filter_data",
    "find",
    "find_index",
    "find_key",
    "find_last",
    "find_last_index",
    "find_last_key",
    "flat",
    "flat_map",
    "flat_map_deep",
    "flatten",
    "flatten_deep",
    "flatten_depth",
    "flip",
    "floor",
    "for_each",
    "for_each_right",
    "for_own",
    "for_own_right",
    "format_date",
    "from_pairs",
    "functions",
    "get",
    "get_format",
    "get_initials",
    "get_last_element",
    "get_object_keys_by_type",
    "get_object_value_by_path",
    "get_unique",
    "get_value_type",
    "group_by",
    "has",
    "head",
    "identity",
    "in_range",
    "includes",
    "index_of",
    "initial",
    "intersection",
    "intersection_by",
    "intersection_with",
    "invert",
    "invert_by",
    "invoke",
    "invoke_map",
    "is_array_like",
    "is_array_like_object",
    "is_between",
    "is_boolean",
    "is_buffer",
    "is_date",
    "is_date_different",
    "is_empty",
    "is_equal",
    "is_equal_with",
    "is_error",
    "is_finite",
    "is_function",
    "is_integer",
    "is_length",
    "is_list",
    "is_map",
    "is_match",
    "is_match_with",
    "is_nan",
    "is_native",
    "is_nil",
    "is_none",
    "is_number",
    "is_object",
    "is_object_like",
    "is_plain_object",
    "is_reg_exp",
    "is_safe_integer",
    "is_set",
    "is_string",
    "is_typed_array",
    "is_weak_map",
    "is_weak_set",
    "iteratee",
    "join",
    "kebab_case",
    "key_by",
    "keys",
    "last",
    "last_index_of",
    "lower_case",
    "lower_first",
    "map_",
    "map_keys",
    "map_values",
    "matches",
    "matches_property",
    "max_",
    "max_by",
    "mean",
    "mean_by",
    "memoize",
    "merge",
    "merge_with",
    "method",
    "method_of",
    "min_",
    "min_and_max_years",
    "min_by",
    "multiply",
    "negate",
    "noop",
    "now",
    "nth",
    "number",
    "omit",
    "omit_by",
    "once",
    "order_by",
    "over_args",
    "pad",
    "pad_end",
    "pad_start",
    "parse_float",
    "parse_int",
    "partial",
    "partial_right",
    "partition",
    "pascal_case",
    "pick",
    "pick_by",
    "property_",
    "property_of",
    "pull",
    "pull_all",
    "pull_all_by",
    "pull_all_with",
    "pull_at",
    "purify",
    "random_",
    "random_int",
    "random_string",
    "range_",
    "range_right",
    "rearg",
    "reduce_",
    "reduce_right",
    "reject",
    "remove",
    "remove_break_lines",
    "repeat",
    "replace",
    "rest",
    "result",
    "reverse",
    "round_",
    "sample",
    "sample_size",
    "seconds_to_tomorrow",
    "set_",
    "set_with",
    "shuffle",
    "size",
    "slice_",
    "snake_case",
    "some",
    "sort_by",
    "sort_objects",
    "sorted_index",
    "sorted_index_by",
    "sorted_index_of",
    "sorted_last_index",
    "sorted_last_index_by",
    "sorted_last_index_of",
    "split",
    "spread",
    "start_case",
    "starts_with",
    "std",
    "stub_dict",
    "stub_false",
    "stub_list",
    "stub_string",
    "stub_true",
    "subtract",
    "sum_",
    "sum_by",
    "tail",
    "take",
    "take_right",
    "take_right_while",
    "take_while",
    "template",
    "throttle",
    "times",
    "to_array",
    "to_datetime",
    "to_lower",
    "to_pairs",
    "to_upper",
    "to_upper_case",
    "transform",
    "trim",
    "trim_end",
    "trim_start",
    "truncate",
    "unary",
    "unescape",
    "union",
    "union_by",
    "union_with",
    "uniq",
    "uniq_by",
    "uniq_with",
    "unique_id",
    "unset",
    "unzip",
    "unzip_with",
    "update",
    "update_with",
    "upper_case",
    "upper_first",
    "values",
    "variance",
    "without",
    "words",
    "wrap",
    "xor",
    "xor_by",
    "xor_with",
    "zip_",
    "zip_object",
    "zip_object_deep",
    "zip_with",
]
