"""Play report formatting."""

from .report import combo_percent, format_report, play_info, report_dict

__all__ = ["combo_percent", "format_report", "play_info", "report_dict"]
