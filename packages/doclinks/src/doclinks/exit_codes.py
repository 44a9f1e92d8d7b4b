from __future__ import annotations

# CI callers only distinguish zero from non-zero, so every failure maps to 1.
OK = 0
ERR_VALIDATION = 1
ERR_USAGE = 1
ERR_CONFIG = 1
ERR_IO = 1
