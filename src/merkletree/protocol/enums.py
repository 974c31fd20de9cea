from enum import Enum


class ErrorCode(str, Enum):
    INVALID_ENTRY = "invalid_entry"
    INVALID_INDEX = "invalid_index"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    INTERNAL_ERROR = "internal_error"
