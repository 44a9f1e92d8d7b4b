__version__ = "0.1.0"

__all__ = [
    "__version__",
    "cli",
    "config",
    "context",
    "discovery",
    "engine",
    "errors",
    "exit_codes",
    "extract",
    "logging",
    "model",
    "pages",
    "report",
    "run_id",
    "validate",
]
