"""
Pydantic models for the Milvus gRPC SDK.

These models are the caller-facing, type-hinted counterparts of the
protobuf messages and enums used by the Milvus collection API.
"""
from typing import List, Dict, Optional
from enum import Enum
from pydantic import BaseModel, Field, model_validator # type: ignore

# --- Enums ---

class ErrorCode(str, Enum):
    """Status codes the Milvus service embeds in its responses."""
    SUCCESS = "Success"
    UNEXPECTED_ERROR = "UnexpectedError"
    CONNECT_FAILED = "ConnectFailed"
    PERMISSION_DENIED = "PermissionDenied"
    COLLECTION_NOT_EXISTS = "CollectionNotExists"
    ILLEGAL_ARGUMENT = "IllegalArgument"
    ILLEGAL_DIMENSION = "IllegalDimension"
    ILLEGAL_INDEX_TYPE = "IllegalIndexType"
    ILLEGAL_COLLECTION_NAME = "IllegalCollectionName"
    ILLEGAL_TOPK = "IllegalTOPK"
    ILLEGAL_ROW_RECORD = "IllegalRowRecord"
    ILLEGAL_VECTOR_ID = "IllegalVectorID"
    ILLEGAL_SEARCH_RESULT = "IllegalSearchResult"
    FILE_NOT_FOUND = "FileNotFound"
    META_FAILED = "MetaFailed"
    CACHE_FAILED = "CacheFailed"
    CANNOT_CREATE_FOLDER = "CannotCreateFolder"
    CANNOT_CREATE_FILE = "CannotCreateFile"
    CANNOT_DELETE_FOLDER = "CannotDeleteFolder"
    CANNOT_DELETE_FILE = "CannotDeleteFile"
    BUILD_INDEX_ERROR = "BuildIndexError"
    ILLEGAL_NLIST = "IllegalNLIST"
    ILLEGAL_METRIC_TYPE = "IllegalMetricType"
    OUT_OF_MEMORY = "OutOfMemory"
    INDEX_NOT_EXIST = "IndexNotExist"
    EMPTY_COLLECTION = "EmptyCollection"
    DD_REQUEST_RACE = "DDRequestRace"

class ConsistencyLevel(str, Enum):
    """Read freshness guarantee for later operations on a collection."""
    STRONG = "Strong"
    SESSION = "Session"
    BOUNDED = "Bounded"
    EVENTUALLY = "Eventually"
    CUSTOMIZED = "Customized"

class DataType(str, Enum):
    """Field data types."""
    NONE = "None"
    BOOL = "Bool"
    INT8 = "Int8"
    INT16 = "Int16"
    INT32 = "Int32"
    INT64 = "Int64"
    FLOAT = "Float"
    DOUBLE = "Double"
    STRING = "String"
    VARCHAR = "VarChar"
    BINARY_VECTOR = "BinaryVector"
    FLOAT_VECTOR = "FloatVector"

VECTOR_TYPES = (DataType.BINARY_VECTOR, DataType.FLOAT_VECTOR)

# --- Schema models ---

class FieldSchema(BaseModel):
    """Describes one field of a collection."""
    name: str
    data_type: DataType
    description: str = ""
    is_primary: bool = False
    auto_id: bool = False
    dim: Optional[int] = Field(None, gt=0) # Vector fields only
    max_length: Optional[int] = Field(None, gt=0) # VarChar fields only
    type_params: Dict[str, str] = Field(default_factory=dict)
    index_params: Dict[str, str] = Field(default_factory=dict)

    @property
    def is_vector(self) -> bool:
        return self.data_type in VECTOR_TYPES

class CollectionSchema(BaseModel):
    """Field layout of a collection, as supplied to ``create_collection``."""
    fields: List[FieldSchema] = Field(default_factory=list)
    description: str = ""
    auto_id: bool = False

    @model_validator(mode="after")
    def _unique_field_names(self) -> "CollectionSchema":
        names = [f.name for f in self.fields]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate field names: {', '.join(duplicates)}")
        return self

    @property
    def primary_field(self) -> Optional[FieldSchema]:
        return next((f for f in self.fields if f.is_primary), None)

__all__ = [
    "ErrorCode",
    "ConsistencyLevel",
    "DataType",
    "VECTOR_TYPES",
    "FieldSchema",
    "CollectionSchema",
]
