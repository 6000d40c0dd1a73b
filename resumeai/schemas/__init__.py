from .analysis import ANALYSIS_ROUTES, AnalysisKind, RawResponse, ResumeFile, TransportFailure
from .presentation import (
    Alert,
    AnnotatedList,
    Badge,
    BadgeList,
    FactorEntry,
    FactorList,
    KeyValueCell,
    KeyValueGrid,
    ListItem,
    LoadingPlaceholder,
    NumberedItem,
    NumberedList,
    PresentationTree,
    RawBlock,
    ScoreIndicator,
    Section,
    VerdictPanel,
)
from .reports import (
    ContributingFactor,
    ErrorReport,
    ImprovementReport,
    MlScoreReport,
    QualityScoreReport,
    Report,
    SemanticMatchReport,
)
from .session import LoginRequest, Session, SessionView

__all__ = [
    "ANALYSIS_ROUTES",
    "AnalysisKind",
    "RawResponse",
    "ResumeFile",
    "TransportFailure",
    "Alert",
    "AnnotatedList",
    "Badge",
    "BadgeList",
    "FactorEntry",
    "FactorList",
    "KeyValueCell",
    "KeyValueGrid",
    "ListItem",
    "LoadingPlaceholder",
    "NumberedItem",
    "NumberedList",
    "PresentationTree",
    "RawBlock",
    "ScoreIndicator",
    "Section",
    "VerdictPanel",
    "ContributingFactor",
    "ErrorReport",
    "ImprovementReport",
    "MlScoreReport",
    "QualityScoreReport",
    "Report",
    "SemanticMatchReport",
    "LoginRequest",
    "Session",
    "SessionView",
]
