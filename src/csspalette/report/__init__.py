from csspalette.report.renderer import render_report, write_report

__all__ = ["render_report", "write_report"]
