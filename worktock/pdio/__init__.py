from .writer import CsvWriter, LogWriter, format_date, format_name
from .report import ReportPrinter

__all__ = [
    "CsvWriter",
    "LogWriter",
    "ReportPrinter",
    "format_date",
    "format_name",
]
