"""
Binary STL layout constants.
"""

import struct

# Header: 80 bytes of free text followed by a little-endian uint32 count
COMMENT_SIZE = 80
HEADER_STRUCT = struct.Struct("<80sI")
HEADER_SIZE = HEADER_STRUCT.size  # 84

# Triangle record: normal, v0, v1, v2 as little-endian float32
RECORD_STRUCT = struct.Struct("<12f")
RECORD_SIZE = RECORD_STRUCT.size  # 48

# Per-triangle attribute field, read and discarded
ATTRIBUTE_SIZE = 2

# Prefix that ASCII files (and some misnamed binary files) start with
ASCII_PREFIX = b"solid"
