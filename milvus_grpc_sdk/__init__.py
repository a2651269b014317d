"""
Milvus gRPC SDK: collection management for the Milvus vector database.
"""
__version__ = "0.1.0"

from .client import MilvusClient, AsyncMilvusClient, parse_destination
from .collection import Collection
from .exceptions import (
    MilvusException,
    MilvusConnectionError,
    MilvusCommunicationError,
    MilvusRemoteError,
    MilvusUnknownError,
    SchemaEncodingError,
    MilvusClientConfigurationError,
)
from .models import (
    ErrorCode,
    ConsistencyLevel,
    DataType,
    FieldSchema,
    CollectionSchema,
)

__all__ = [
    "MilvusClient",
    "AsyncMilvusClient",
    "parse_destination",
    "Collection",
    # Exceptions
    "MilvusException",
    "MilvusConnectionError",
    "MilvusCommunicationError",
    "MilvusRemoteError",
    "MilvusUnknownError",
    "SchemaEncodingError",
    "MilvusClientConfigurationError",
    # Models & Enums
    "ErrorCode",
    "ConsistencyLevel",
    "DataType",
    "FieldSchema",
    "CollectionSchema",
]
