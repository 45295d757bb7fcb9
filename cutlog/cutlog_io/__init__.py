# cutlog/cutlog_io/__init__.py
# Package initialization & exports for cutlog file & console I/O

from .generics import (
    write_json_safe,
    read_json_safe,
    ensure_parent,
)
from .records import (
    load_settings,
    load_job,
    load_capture,
    update_job_fields,
)

__all__ = [
    "write_json_safe",
    "read_json_safe",
    "ensure_parent",
    "load_settings",
    "load_job",
    "load_capture",
    "update_job_fields",
]
