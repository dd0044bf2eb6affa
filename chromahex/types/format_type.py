from enum import Enum
import numpy as np
class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"
    PERCENTAGE = "percentage"

BYTE_MAX = 255
DEFAULT_ALPHA = 1.0
DEFAULT_TOLERANCE = 1e-6

format_maxima = {
    FormatType.INT: BYTE_MAX,
    FormatType.FLOAT: 1.0,
    FormatType.PERCENTAGE: 100.0
}

# signed and wide so out-of-range input never wraps
BYTE_DTYPE = np.int64
