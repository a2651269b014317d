"""
Interpretation of the status embedded in every Milvus response.
"""
import logging
from typing import Callable, Optional, TypeVar

from . import conversions
from . import models
from .exceptions import MilvusRemoteError, MilvusUnknownError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def interpret_status(status, operation_name: str, on_success: Callable[[], T]) -> T:
    """
    Returns ``on_success()`` when ``status`` reports Success.

    Any other known code raises MilvusRemoteError with the server's code and
    reason. A missing status or a code outside the ErrorCode enum raises
    MilvusUnknownError.
    """
    if status is None:
        logger.warning("Response to %s carried no status", operation_name)
        raise MilvusUnknownError(f"Failed to {operation_name}: response carried no status")

    error_code: Optional[models.ErrorCode] = conversions.grpc_to_pydantic_error_code(status.error_code)
    if error_code is None:
        logger.warning("Response to %s carried unrecognised error code %d", operation_name, status.error_code)
        raise MilvusUnknownError(
            f"Failed to {operation_name}: unrecognised error code {status.error_code}",
            code=status.error_code,
        )

    if error_code is not models.ErrorCode.SUCCESS:
        logger.warning("Failed to %s: %s %s", operation_name, error_code.value, status.reason)
        raise MilvusRemoteError(
            f"Failed to {operation_name}",
            error_code=error_code,
            code=status.error_code,
            reason=status.reason,
        )

    return on_success()


def bool_response_status(response):
    """Extracts the status of a BoolResponse, ``None`` when the field is unset."""
    return response.status if response.HasField("status") else None
