from __future__ import annotations
import re
from typing import Final

# Raw input: 20230615T1430
RAW_TIMESTAMP_FORMAT: Final[str] = "%Y%m%dT%H%M"
RAW_TIMESTAMP_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\d{8}T\d{4}$")

MONTH_FORMAT: Final[str] = "%Y-%m"
DAY_FORMAT: Final[str] = "%Y-%m-%d"

# CLI range tokens: 202306
RANGE_TOKEN_FORMAT: Final[str] = "%Y%m"
RANGE_TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\d{6}$")

COLUMNS: Final[list[str]] = ["timestamp", "value"]
DEFAULT_RESOURCE: Final[str] = "data/dataexport.csv"
INPUT_ENV_VAR: Final[str] = "IRRADIANCE_INPUT"

AVERAGE_FLAG: Final[str] = "-a"
DAY_OF_WEEK_DISABLED: Final[int] = 0

UNIT: Final[str] = " W/m2"
LABEL_WIDTH: Final[int] = 27
VALUE_WIDTH: Final[int] = 20
DECIMAL_SEP: Final[str] = ","
GROUP_SEP: Final[str] = " "
DECIMALS: Final[int] = 1

INPUT_FILE_ERROR_MESSAGE: Final[str] = "Loading input file failed."
