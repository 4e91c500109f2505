"""Report generation for lotwise."""

from lotwise.reports.optimizer_report import OptimizerReportGenerator

__all__ = ["OptimizerReportGenerator"]
