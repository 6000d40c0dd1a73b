from .normalize_report import FIELD_CANDIDATES, describe_transport_failure, normalize_report

__all__ = ["FIELD_CANDIDATES", "describe_transport_failure", "normalize_report"]
