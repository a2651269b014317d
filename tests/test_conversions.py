"""
Unit tests for conversion functions in milvus_grpc_sdk.conversions.
"""
import pytest

from milvus_grpc_sdk import models
from milvus_grpc_sdk import conversions
from milvus_grpc_sdk.exceptions import MilvusClientConfigurationError, SchemaEncodingError
from milvus_grpc_sdk._grpc.milvus.proto import common_pb2
from milvus_grpc_sdk._grpc.milvus.proto import schema_pb2

# --- Test Data ---

def get_sample_pydantic_schema() -> models.CollectionSchema:
    return models.CollectionSchema(
        description="Schema description",
        auto_id=True,
        fields=[
            models.FieldSchema(name="id", data_type=models.DataType.INT64, is_primary=True, auto_id=True),
            models.FieldSchema(name="title", data_type=models.DataType.VARCHAR, max_length=256, description="Book title"),
            models.FieldSchema(
                name="embedding",
                data_type=models.DataType.FLOAT_VECTOR,
                dim=128,
                index_params={"metric_type": "L2"},
            ),
        ],
    )

# --- Enum Conversion Tests ---

@pytest.mark.parametrize("level, expected", [
    (models.ConsistencyLevel.STRONG, 0),
    (models.ConsistencyLevel.SESSION, 1),
    (models.ConsistencyLevel.BOUNDED, 2),
    (models.ConsistencyLevel.EVENTUALLY, 3),
    (models.ConsistencyLevel.CUSTOMIZED, 4),
    ("Bounded", 2),
])
def test_consistency_level_conversion(level, expected):
    assert conversions.pydantic_to_grpc_consistency_level(level) == expected

@pytest.mark.parametrize("level", [
    common_pb2.ConsistencyLevel.Strong,
    common_pb2.ConsistencyLevel.Eventually,
    common_pb2.ConsistencyLevel.Customized,
])
def test_consistency_level_conversion_accepts_proto_codes(level):
    assert conversions.pydantic_to_grpc_consistency_level(level) == level

@pytest.mark.parametrize("level", ["Linearizable", "strong", 5, -1, True, None])
def test_consistency_level_conversion_rejects_unknown(level):
    with pytest.raises(MilvusClientConfigurationError):
        conversions.pydantic_to_grpc_consistency_level(level)

def test_error_code_conversion_covers_every_proto_code():
    for value in common_pb2.ErrorCode.DESCRIPTOR.values:
        code = conversions.grpc_to_pydantic_error_code(value.number)
        assert code is not None
        assert code.value == value.name

def test_error_code_conversion_unknown_is_none():
    assert conversions.grpc_to_pydantic_error_code(31337) is None

def test_data_type_conversion():
    assert conversions.pydantic_to_grpc_data_type(models.DataType.FLOAT_VECTOR) == 101
    assert conversions.pydantic_to_grpc_data_type(models.DataType.VARCHAR) == 21
    assert conversions.pydantic_to_grpc_data_type(models.DataType.BOOL) == schema_pb2.DataType.Bool

# --- Schema Conversion Tests ---

def test_pydantic_to_grpc_field_schema_vector():
    field = models.FieldSchema(name="embedding", data_type=models.DataType.BINARY_VECTOR, dim=64)

    field_pb = conversions.pydantic_to_grpc_field_schema(field)

    assert field_pb.name == "embedding"
    assert field_pb.data_type == schema_pb2.DataType.BinaryVector
    assert {kv.key: kv.value for kv in field_pb.type_params} == {"dim": "64"}
    assert field_pb.is_primary_key is False

def test_pydantic_to_grpc_field_schema_dim_in_type_params():
    field = models.FieldSchema(name="v", data_type=models.DataType.FLOAT_VECTOR, type_params={"dim": "4"})

    field_pb = conversions.pydantic_to_grpc_field_schema(field)

    assert [(kv.key, kv.value) for kv in field_pb.type_params] == [("dim", "4")]

@pytest.mark.parametrize("field, message", [
    (models.FieldSchema(name="v", data_type=models.DataType.FLOAT_VECTOR), "requires a dimension"),
    (models.FieldSchema(name="n", data_type=models.DataType.INT32, dim=3), "not a vector field"),
    (models.FieldSchema(name="t", data_type=models.DataType.VARCHAR, type_params={"dim": "8"}), "not a vector field"),
    (models.FieldSchema(name="s", data_type=models.DataType.INT64, max_length=3), "not a VarChar field"),
    (models.FieldSchema(name="x", data_type=models.DataType.NONE), "no data type"),
])
def test_pydantic_to_grpc_field_schema_invalid(field, message):
    with pytest.raises(ValueError, match=message):
        conversions.pydantic_to_grpc_field_schema(field)

def test_pydantic_to_grpc_collection_schema_is_tagged_with_name_and_description():
    schema_pb = conversions.pydantic_to_grpc_collection_schema(get_sample_pydantic_schema(), "books", "Book search")

    assert schema_pb.name == "books"
    assert schema_pb.description == "Book search"
    assert schema_pb.autoID is True
    assert len(schema_pb.fields) == 3

    id_pb, title_pb, embedding_pb = schema_pb.fields
    assert id_pb.is_primary_key is True
    assert id_pb.autoID is True
    assert id_pb.data_type == schema_pb2.DataType.Int64
    assert title_pb.description == "Book title"
    assert {kv.key: kv.value for kv in title_pb.type_params} == {"max_length": "256"}
    assert {kv.key: kv.value for kv in embedding_pb.type_params} == {"dim": "128"}
    assert {kv.key: kv.value for kv in embedding_pb.index_params} == {"metric_type": "L2"}

def test_encode_collection_schema_produces_wire_bytes():
    encoded = conversions.encode_collection_schema(get_sample_pydantic_schema(), "books", "Book search")

    decoded = schema_pb2.CollectionSchema.FromString(encoded)
    assert decoded == conversions.pydantic_to_grpc_collection_schema(
        get_sample_pydantic_schema(), "books", "Book search"
    )

def test_encode_collection_schema_wraps_errors():
    schema = models.CollectionSchema(fields=[
        models.FieldSchema(name="embedding", data_type=models.DataType.FLOAT_VECTOR),
    ])

    with pytest.raises(SchemaEncodingError, match="collection 'books'") as exc_info:
        conversions.encode_collection_schema(schema, "books", "")
    assert isinstance(exc_info.value.__cause__, ValueError)

def test_encode_empty_schema():
    encoded = conversions.encode_collection_schema(models.CollectionSchema(), "empty", "")
    assert schema_pb2.CollectionSchema.FromString(encoded).name == "empty"

def test_collection_description_falls_back_to_schema_description():
    schema_pb = conversions.pydantic_to_grpc_collection_schema(get_sample_pydantic_schema(), "books", "")
    assert schema_pb.description == "Schema description"
