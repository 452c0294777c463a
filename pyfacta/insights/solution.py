"""
Insight solution types.

GeneratedInsight is one chart-ready description. generate_insights()
returns either InsightSuccess (an ordered tuple of insights) or
InsightError (a user-facing rendering of a RegressionError).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Union


@dataclass(frozen=True)
class GeneratedInsight:
    """
    A single natural-language insight.

    Attributes:
        summary: One or two sentences for display
        type: Insight kind, e.g. 'TrendDescription'
        data: Structured values behind the summary
        annotations: Chart directives for a renderer, e.g.
            'drawTrendLine:2,0'
    """
    summary: str
    type: str
    data: dict[str, Any] | None = None
    annotations: tuple[str, ...] | None = None

    def as_dict(self) -> dict[str, Any]:
        """Plain dict; absent data/annotations are omitted."""
        out: dict[str, Any] = {'summary': self.summary, 'type': self.type}
        if self.data is not None:
            out['data'] = dict(self.data)
        if self.annotations is not None:
            out['annotations'] = list(self.annotations)
        return out


@dataclass(frozen=True)
class InsightSuccess:
    """Insights in their guaranteed order."""
    insights: tuple[GeneratedInsight, ...]
    ok: Literal[True] = field(default=True, init=False)

    def as_dict(self) -> dict[str, Any]:
        return {'ok': True, 'insights': [i.as_dict() for i in self.insights]}


@dataclass(frozen=True)
class InsightError:
    """
    User-facing error.

    Attributes:
        message: What went wrong, in plain language
        help_text: What the user can do about it
        original_error_type: error_type of the RegressionError, for diagnostics
    """
    message: str
    help_text: str
    original_error_type: str
    ok: Literal[False] = field(default=False, init=False)

    def as_dict(self) -> dict[str, Any]:
        return {
            'ok': False,
            'message': self.message,
            'help_text': self.help_text,
            'original_error_type': self.original_error_type,
        }


InsightResult = Union[InsightSuccess, InsightError]
