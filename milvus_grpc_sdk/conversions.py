"""
Conversion utilities between Pydantic models and gRPC messages.
"""
from typing import Dict, Optional, Union

from google.protobuf.message import EncodeError

from milvus_grpc_sdk import models
from milvus_grpc_sdk.exceptions import MilvusClientConfigurationError, SchemaEncodingError
from milvus_grpc_sdk._grpc.milvus.proto import common_pb2
from milvus_grpc_sdk._grpc.milvus.proto import schema_pb2

# --- Enum Mappings ---

# ConsistencyLevel
_PYDANTIC_TO_GRPC_CONSISTENCY_LEVEL_MAP: Dict[models.ConsistencyLevel, int] = {
    models.ConsistencyLevel.STRONG: common_pb2.ConsistencyLevel.Strong,
    models.ConsistencyLevel.SESSION: common_pb2.ConsistencyLevel.Session,
    models.ConsistencyLevel.BOUNDED: common_pb2.ConsistencyLevel.Bounded,
    models.ConsistencyLevel.EVENTUALLY: common_pb2.ConsistencyLevel.Eventually,
    models.ConsistencyLevel.CUSTOMIZED: common_pb2.ConsistencyLevel.Customized,
}

# ErrorCode (model values are the proto enum value names)
_GRPC_TO_PYDANTIC_ERROR_CODE_MAP: Dict[int, models.ErrorCode] = {
    common_pb2.ErrorCode.Value(code.value): code for code in models.ErrorCode
}

# DataType
_PYDANTIC_TO_GRPC_DATA_TYPE_MAP: Dict[models.DataType, int] = {
    data_type: schema_pb2.DataType.Value(data_type.value) for data_type in models.DataType
}

# --- Conversion Functions ---

def pydantic_to_grpc_consistency_level(level: Union[models.ConsistencyLevel, str, int]) -> int:
    """
    Accepts a ConsistencyLevel, its string value, or the proto enum integer
    (e.g. ``common_pb2.ConsistencyLevel.Strong``).
    """
    if isinstance(level, int) and not isinstance(level, bool):
        if level in common_pb2.ConsistencyLevel.values():
            return level
        raise MilvusClientConfigurationError(f"Unknown consistency level code: {level}")
    try:
        return _PYDANTIC_TO_GRPC_CONSISTENCY_LEVEL_MAP[models.ConsistencyLevel(level)]
    except ValueError as e:
        raise MilvusClientConfigurationError(f"Unknown consistency level: {level!r}") from e

def grpc_to_pydantic_error_code(error_code_pb: int) -> Optional[models.ErrorCode]:
    """Returns ``None`` for integers outside the ErrorCode enum."""
    return _GRPC_TO_PYDANTIC_ERROR_CODE_MAP.get(error_code_pb)

def pydantic_to_grpc_data_type(data_type: models.DataType) -> int:
    return _PYDANTIC_TO_GRPC_DATA_TYPE_MAP[models.DataType(data_type)]

def _key_value_pairs(params: Dict[str, str]):
    return [common_pb2.KeyValuePair(key=k, value=str(v)) for k, v in params.items()]

def pydantic_to_grpc_field_schema(field: models.FieldSchema) -> schema_pb2.FieldSchema:
    if field.data_type == models.DataType.NONE:
        raise ValueError(f"field '{field.name}' has no data type")

    type_params = dict(field.type_params)
    if field.is_vector:
        if field.dim is None and "dim" not in type_params:
            raise ValueError(f"vector field '{field.name}' requires a dimension")
    elif field.dim is not None or "dim" in type_params:
        raise ValueError(f"field '{field.name}' is not a vector field and cannot set a dimension")
    if field.dim is not None:
        type_params["dim"] = str(field.dim)
    if field.max_length is not None:
        if field.data_type != models.DataType.VARCHAR:
            raise ValueError(f"field '{field.name}' is not a VarChar field and cannot set max_length")
        type_params["max_length"] = str(field.max_length)

    return schema_pb2.FieldSchema(
        name=field.name,
        is_primary_key=field.is_primary,
        description=field.description,
        data_type=pydantic_to_grpc_data_type(field.data_type),
        type_params=_key_value_pairs(type_params),
        index_params=_key_value_pairs(field.index_params),
        autoID=field.auto_id,
    )

def pydantic_to_grpc_collection_schema(
    schema: models.CollectionSchema,
    collection_name: str,
    description: str,
) -> schema_pb2.CollectionSchema:
    """Builds the wire schema, tagged with the collection's name and description.

    An empty ``description`` falls back to the schema's own description.
    """
    return schema_pb2.CollectionSchema(
        name=collection_name,
        description=description or schema.description,
        autoID=schema.auto_id,
        fields=[pydantic_to_grpc_field_schema(f) for f in schema.fields],
    )

def encode_collection_schema(
    schema: models.CollectionSchema,
    collection_name: str,
    description: str,
) -> bytes:
    """
    Serializes ``schema`` into the bytes carried by CreateCollectionRequest.

    Any failure is a caller-side defect and is raised as SchemaEncodingError.
    """
    try:
        schema_pb = pydantic_to_grpc_collection_schema(schema, collection_name, description)
        return schema_pb.SerializeToString()
    except (ValueError, TypeError, KeyError, AttributeError, EncodeError) as e:
        raise SchemaEncodingError(
            f"Failed to encode schema for collection '{collection_name}': {e}"
        ) from e
