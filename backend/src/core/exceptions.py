"""
Custom Exception Hierarchy
Domain and application-level exceptions
"""


class DomainException(Exception):
    """Base exception for all domain errors"""
    pass


class AuthorizationException(DomainException):
    """Actor not authorized for this operation"""
    pass


class ValidationException(DomainException):
    """Data validation failed"""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class InvalidStateTransitionException(DomainException):
    """Requested job status change is not an edge of the lifecycle"""

    def __init__(self, current_state: str, target_state: str, deleted: bool = False):
        self.current_state = current_state
        self.target_state = target_state
        self.deleted = deleted
        suffix = " (job is deleted)" if deleted else ""
        super().__init__(
            f"Invalid job status transition: {current_state} -> {target_state}{suffix}"
        )


class RepositoryException(DomainException):
    """Database operation failed"""
    pass


class ResourceNotFoundException(DomainException):
    """Requested resource not found"""

    def __init__(self, resource_type: str, identifier: str):
        self.resource_type = resource_type
        self.identifier = identifier
        super().__init__(f"{resource_type} not found: {identifier}")
