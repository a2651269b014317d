"""
Custom exceptions for the Milvus gRPC SDK.
"""
from typing import Optional


class MilvusException(Exception):
    """Base exception for all Milvus SDK errors."""
    pass


class MilvusConnectionError(MilvusException):
    """Raised when the client cannot reach, or is not connected to, the Milvus server."""
    pass


class MilvusClientConfigurationError(MilvusException):
    """Raised for client configuration errors."""
    pass


class SchemaEncodingError(MilvusException):
    """Raised when a collection schema cannot be converted to its wire form.

    Always raised before any request is sent.
    """
    pass


class MilvusCommunicationError(MilvusException):
    """Raised when the gRPC exchange of an in-flight call fails."""
    def __init__(self, message: str, grpc_error: Optional[Exception] = None):
        super().__init__(message)
        self.grpc_error = grpc_error
        self.status_code = None
        self.details = None

        if grpc_error is not None:
            if hasattr(grpc_error, 'code') and callable(grpc_error.code):
                try:
                    grpc_status_code = grpc_error.code()
                    self.status_code = getattr(grpc_status_code, 'name', str(grpc_status_code))
                except Exception:
                    self.status_code = None
            if hasattr(grpc_error, 'details') and callable(grpc_error.details):
                try:
                    self.details = grpc_error.details()
                except Exception:
                    self.details = None
            if not self.details:
                self.details = str(grpc_error) or None

    def __str__(self):
        base_str = super().__str__()
        if self.status_code:
            base_str += f" (gRPC Status: {self.status_code})"
        if self.details:
            base_str += f" Details: {self.details}"
        return base_str


class MilvusRemoteError(MilvusException):
    """Raised when the server answers with a status other than ``Success``.

    ``error_code`` is the ``models.ErrorCode`` member, ``code`` the raw integer
    and ``reason`` the server-supplied message, unmodified.
    """
    def __init__(self, message: str, error_code=None, code: Optional[int] = None, reason: str = ""):
        super().__init__(message)
        self.error_code = error_code
        self.code = code
        self.reason = reason

    def __str__(self):
        base_str = super().__str__()
        if self.error_code is not None:
            base_str += f" (Error Code: {self.error_code.value})"
        if self.reason:
            base_str += f" Reason: {self.reason}"
        return base_str


class MilvusUnknownError(MilvusException):
    """Raised when a response breaks the protocol (missing status, unrecognised code)."""
    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.code = code
