"""Output formatting for terminal and tables."""

from handparser.formatters.text import TextFormatter
from handparser.formatters.table import TableFormatter

__all__ = ["TextFormatter", "TableFormatter"]
