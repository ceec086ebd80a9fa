"""Catalog audit: rule analyzers, duplicate detection, scoring and summaries."""

from .report import DIMENSIONS, AuditReport, AuditScores, AuditStats, DuplicateGroup, Issue, IssueSet
from .summary import AuditSummary, summarize, summary_text

__all__ = [
    "DIMENSIONS",
    "AuditReport",
    "AuditScores",
    "AuditStats",
    "AuditSummary",
    "DuplicateGroup",
    "Issue",
    "IssueSet",
    "summarize",
    "summary_text",
]
