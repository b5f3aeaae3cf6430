from __future__ import annotations

DEFAULT_VALUE_MARKER = ""
BLESSED_KEY = "BLESSED_AS"
OPAQUE_SUFFIX = " object"

OPTIONS_ENV_DEBUG = "DATASHAPE_DEBUG"

EXIT_SUCCESS = 0
EXIT_INPUT_ERROR = 2
