"""Export module for projection reports."""

from .projection_report import (
    ReportConfig,
    generate_projection_excel,
)

__all__ = [
    "ReportConfig",
    "generate_projection_excel",
]
