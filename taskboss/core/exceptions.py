# taskboss/core/exceptions.py
from typing import Dict, Any, Optional
from fastapi import status


class BusinessException(Exception):
    """Base exception for business rule violations."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "business_error"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code or self.error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Body of the JSON error response."""
        return {
            "error": self.code,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }


# Resource-related exceptions
class ResourceNotFoundException(BusinessException):
    """Raised when a requested resource does not exist or is not owned by the caller."""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "resource_not_found"


class DuplicateResourceException(BusinessException):
    """Raised when attempting to create a duplicate resource."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "resource_already_exists"


# Authentication and Authorization exceptions
class AuthenticationException(BusinessException):
    """Missing token or bad credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "authentication_error"


class AuthorizationException(BusinessException):
    """Token present but invalid or expired."""

    status_code = status.HTTP_403_FORBIDDEN
    error_code = "authorization_error"


# External Service exceptions
class ExternalServiceException(BusinessException):
    """Raised when an external service call fails."""

    status_code = status.HTTP_502_BAD_GATEWAY
    error_code = "external_service_error"


class LLMServiceException(ExternalServiceException):
    """The LLM provider call failed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "llm_error"


class LLMResponseParseException(ExternalServiceException):
    """The LLM answered, but not with the JSON that was asked for."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "llm_parse_error"


class ServiceTimeoutException(BusinessException):
    """Raised when an external service times out."""

    status_code = status.HTTP_504_GATEWAY_TIMEOUT
    error_code = "service_timeout"


class FeatureNotAvailableException(BusinessException):
    """Raised when a feature is switched off on this server."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "feature_not_available"
