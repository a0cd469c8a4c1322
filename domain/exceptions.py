"""
Request-level exceptions shared by the services and the API layer.
"""


class ValidationError(Exception):
    """Raised when a required request field is missing or blank"""
    pass
