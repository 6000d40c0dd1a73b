from .render_report import render_report

__all__ = ["render_report"]
