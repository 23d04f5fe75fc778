"""Package exceptions."""


class SiteDataError(Exception):
    """Base class for fatal pipeline failures."""


class DriftCheckError(SiteDataError):
    """Version control could not be queried for generated-output drift."""
