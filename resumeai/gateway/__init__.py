from .client import UNREADABLE_RESPONSE, AnalysisGateway

__all__ = ["AnalysisGateway", "UNREADABLE_RESPONSE"]
