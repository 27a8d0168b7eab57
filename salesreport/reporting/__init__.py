from .summary import print_summary, summary_lines

__all__ = [
    "print_summary",
    "summary_lines",
]
