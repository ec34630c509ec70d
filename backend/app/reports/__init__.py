"""Report rendering package.

Provides:
- ReportRenderer: Markdown documents from interview questions and answers
- CommunityReportFlow / ScamReportFlow: turn a completed interview into a PostDraft
"""

from app.reports.flows import CommunityReportFlow, ScamReportFlow, get_flow
from app.reports.renderer import ReportRenderer, derive_title

__all__ = ["CommunityReportFlow", "ReportRenderer", "ScamReportFlow", "derive_title", "get_flow"]
