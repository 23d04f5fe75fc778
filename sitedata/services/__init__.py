# Services package
from sitedata.services.build_service import BuildService
from sitedata.services.drift_service import DriftChecker
from sitedata.services.validation_service import ValidationService

__all__ = [
    "BuildService",
    "DriftChecker",
    "ValidationService",
]
