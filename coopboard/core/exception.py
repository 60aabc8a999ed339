from fastapi import HTTPException
from typing import Any, Optional
from coopboard.schemas.result import ErrorCategory


class CustomException(HTTPException):
    """Base exception class for all custom application exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int,
        category: ErrorCategory,
        headers: Optional[dict] = None
    ):
        super().__init__(status_code=status_code, detail=message, headers=headers)
        self.category = category


class ResourceNotFoundException(CustomException):
    """Exception raised when a requested resource is not found"""

    def __init__(self, resource_name: str, resource_id: Optional[Any] = None):
        if resource_id is not None:
            message = f"{resource_name} with ID '{resource_id}' was not found."
        else:
            message = f"{resource_name} was not found."

        super().__init__(
            message=message,
            status_code=404,
            category=ErrorCategory.NOT_FOUND
        )


class AuthenticationException(CustomException):
    """Exception raised when authentication fails"""

    def __init__(self, message: str = "Invalid credentials. Access denied."):
        super().__init__(
            message=message,
            status_code=401,
            category=ErrorCategory.AUTHENTICATION,
            headers={"WWW-Authenticate": "Bearer"}
        )


class AuthorizationException(CustomException):
    """Exception raised when a family lacks the required capability"""

    def __init__(
        self,
        permission: Optional[str] = None,
        message: Optional[str] = None,
        status_code: int = 403
    ):
        if message:
            error_message = message
        elif permission:
            error_message = f"You do not have permission to perform this action. Required permission: {permission}"
        else:
            error_message = "You do not have permission to perform this action."

        super().__init__(
            message=error_message,
            status_code=status_code,
            category=ErrorCategory.AUTHORIZATION
        )


class AlreadyAssignedException(CustomException):
    """Exception raised when a family signs up twice for the same slot or task"""

    def __init__(self, resource_name: str, resource_id: Optional[Any] = None):
        target = f"{resource_name} '{resource_id}'" if resource_id is not None else resource_name
        super().__init__(
            message=f"You are already signed up for {target}.",
            status_code=409,
            category=ErrorCategory.RESOURCE_CONFLICT
        )


class CapacityReachedException(CustomException):
    """Exception raised when a slot or task has no seats left"""

    def __init__(self, resource_name: str, resource_id: Optional[Any] = None):
        target = f"{resource_name} '{resource_id}'" if resource_id is not None else resource_name
        super().__init__(
            message=f"{target} is already full.",
            status_code=409,
            category=ErrorCategory.CAPACITY
        )


class ValidationException(CustomException):
    """Exception raised for business logic validation failures"""

    def __init__(self, message: str, field: Optional[str] = None):
        if field:
            error_message = f"Validation failed for '{field}': {message}"
        else:
            error_message = f"Validation failed: {message}"

        super().__init__(
            message=error_message,
            status_code=422,
            category=ErrorCategory.VALIDATION
        )


class ConfigurationFailureException(CustomException):
    """Exception raised when the session context cannot be applied to the store"""

    def __init__(self, message: str = "Could not configure the store session."):
        super().__init__(
            message=message,
            status_code=500,
            category=ErrorCategory.CONFIGURATION
        )


class StoreException(CustomException):
    """Exception raised when the database cannot serve the request"""

    def __init__(self, message: str = "The data store is currently unavailable. Please retry."):
        super().__init__(
            message=message,
            status_code=503,
            category=ErrorCategory.STORE
        )
