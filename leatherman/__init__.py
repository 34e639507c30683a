"""A multitool of small command-line and library utilities."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "datefmt",
    "mozlz4",
    "netrc",
    "now",
    "proj",
    "shellquote",
    "sweetmarias",
    "timeutil",
    "twilio",
]