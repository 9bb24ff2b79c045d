"""Aggregators for summarizing article results."""

from .summary_aggregator import REQUIRED_FIELDS, SUMMARY_COLUMNS, SummaryAggregator

__all__ = ["REQUIRED_FIELDS", "SUMMARY_COLUMNS", "SummaryAggregator"]
