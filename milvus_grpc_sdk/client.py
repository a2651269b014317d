"""
Main clients for managing collections on a Milvus server.
"""
import asyncio
import logging
import os
from typing import Optional, Union, List, Any, Tuple, Callable, Awaitable
from urllib.parse import urlsplit
import grpc # type: ignore
import grpc.aio # For async client

# gRPC service definitions
from ._grpc.milvus.proto import common_pb2
from ._grpc.milvus.proto import milvus_pb2
from ._grpc.milvus.proto import milvus_pb2_grpc

from . import models
from . import conversions
from .collection import Collection
from .status import interpret_status, bool_response_status

from .exceptions import (
    MilvusConnectionError,
    MilvusCommunicationError,
    MilvusClientConfigurationError,
)

logger = logging.getLogger(__name__)

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 19530
DEFAULT_CONNECT_TIMEOUT = 10.0
DEFAULT_ENV_VAR = "MILVUS_URI"
DEFAULT_SHARDS_NUM = 2
# Multi-database addressing is not supported; requests always name the default database.
DEFAULT_DB_NAME = ""

Destination = Union[str, Tuple[str, int]]

_SCHEMES = {"tcp": None, "grpc": None, "http": False, "https": True}


def _join_target(host: str, port: Any) -> str:
    try:
        port = int(port)
    except (TypeError, ValueError):
        raise MilvusConnectionError(f"Invalid port {port!r}") from None
    if not host or not 0 < port < 65536:
        raise MilvusConnectionError(f"Invalid destination {host!r}:{port}")
    if ":" in host:
        host = f"[{host}]"
    return f"{host}:{port}"


def parse_destination(destination: Destination) -> Tuple[str, Optional[bool]]:
    """
    Turns a destination into a gRPC target.

    Accepts ``"host:port"``, ``"<scheme>://host:port"`` with scheme tcp, grpc,
    http or https, or a ``(host, port)`` tuple. Returns the target and whether
    the scheme demands TLS (``None`` when it says nothing).
    """
    if isinstance(destination, tuple):
        if len(destination) != 2:
            raise MilvusConnectionError(f"Invalid destination {destination!r}")
        return _join_target(*destination), None

    if not isinstance(destination, str) or not destination.strip():
        raise MilvusConnectionError(f"Invalid destination {destination!r}")

    raw = destination.strip()
    try:
        parts = urlsplit(raw if "://" in raw else f"tcp://{raw}")
    except ValueError as e:
        raise MilvusConnectionError(f"Invalid destination {destination!r}: {e}") from e
    scheme = parts.scheme.lower()
    if scheme not in _SCHEMES:
        raise MilvusConnectionError(f"Unsupported scheme '{scheme}' in destination {destination!r}")
    if parts.path not in ("", "/") or parts.query or parts.fragment:
        raise MilvusConnectionError(f"Invalid destination {destination!r}")
    try:
        port = parts.port
    except ValueError as e:
        raise MilvusConnectionError(f"Invalid destination {destination!r}: {e}") from e
    return _join_target(parts.hostname or "", port or DEFAULT_PORT), _SCHEMES[scheme]


def _new_msg_base(msg_type: int) -> common_pb2.MsgBase:
    return common_pb2.MsgBase(msg_type=msg_type, msgID=0, timestamp=0, sourceID=0)


def _create_collection_request(
    collection_name: str,
    description: str,
    schema: models.CollectionSchema,
    shards_num: int,
    consistency_level: Union[models.ConsistencyLevel, str, int],
) -> milvus_pb2.CreateCollectionRequest:
    # Raises SchemaEncodingError; nothing has been sent at that point.
    schema_bytes = conversions.encode_collection_schema(schema, collection_name, description)
    return milvus_pb2.CreateCollectionRequest(
        base=_new_msg_base(common_pb2.MsgType.CreateCollection),
        db_name=DEFAULT_DB_NAME,
        collection_name=collection_name,
        schema=schema_bytes,
        shards_num=shards_num,
        consistency_level=conversions.pydantic_to_grpc_consistency_level(consistency_level),
    )


def _drop_collection_request(collection_name: str) -> milvus_pb2.DropCollectionRequest:
    return milvus_pb2.DropCollectionRequest(
        base=_new_msg_base(common_pb2.MsgType.DropCollection),
        db_name=DEFAULT_DB_NAME,
        collection_name=collection_name,
    )


def _has_collection_request(collection_name: str) -> milvus_pb2.HasCollectionRequest:
    return milvus_pb2.HasCollectionRequest(
        base=_new_msg_base(common_pb2.MsgType.HasCollection),
        db_name=DEFAULT_DB_NAME,
        collection_name=collection_name,
        time_stamp=0,
    )


class _MilvusClientOptions:
    """Connection options shared by the blocking and asyncio clients."""
    def __init__(
        self,
        uri: Optional[Destination] = None,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        timeout: Optional[float] = None,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        secure: bool = False,
        root_certs: Optional[bytes] = None,
        private_key: Optional[bytes] = None,
        certificate_chain: Optional[bytes] = None,
        grpc_options: Optional[List[Tuple[str, Any]]] = None,
    ):
        if connect_timeout is None or connect_timeout <= 0:
            raise MilvusClientConfigurationError("connect_timeout must be a positive number of seconds.")
        if timeout is not None and timeout <= 0:
            raise MilvusClientConfigurationError("timeout must be positive when set.")
        if (private_key is None) != (certificate_chain is None):
            raise MilvusClientConfigurationError(
                "private_key and certificate_chain must be given together for mutual TLS."
            )

        target, scheme_secure = parse_destination(uri if uri is not None else (host, port))
        if scheme_secure is False and secure:
            raise MilvusClientConfigurationError(f"secure=True conflicts with destination {uri!r}.")

        self.target = target
        self.timeout = timeout
        self.connect_timeout = connect_timeout
        self.secure = bool(secure or scheme_secure)
        self.root_certs = root_certs
        self.private_key = private_key
        self.certificate_chain = certificate_chain
        self.grpc_options = grpc_options

        if not self.secure and (root_certs or private_key or certificate_chain):
            raise MilvusClientConfigurationError("TLS material was given but the connection is not secure.")

    def _credentials(self) -> grpc.ChannelCredentials:
        return grpc.ssl_channel_credentials(
            root_certificates=self.root_certs,
            private_key=self.private_key,
            certificate_chain=self.certificate_chain,
        )


class MilvusClient(_MilvusClientOptions):
    """
    The blocking client for Milvus collection management.

    The constructor connects; it raises MilvusConnectionError if the server is
    not reachable within ``connect_timeout`` seconds.
    """
    def __init__(self, uri: Optional[Destination] = None, **options):
        super().__init__(uri, **options)
        self._channel: Optional[grpc.Channel] = None
        self._stub: Optional[milvus_pb2_grpc.MilvusServiceStub] = None

        self._connect()

    @classmethod
    def from_env(cls, env_var: str = DEFAULT_ENV_VAR, default: str = f"{DEFAULT_HOST}:{DEFAULT_PORT}", **options) -> "MilvusClient":
        """Connect to the destination held in an environment variable, with fallback."""
        return cls(os.environ.get(env_var) or default, **options)

    def _connect(self) -> None:
        """Establishes the gRPC connection."""
        if self._channel:
            self.close()

        try:
            if self.secure:
                channel = grpc.secure_channel(self.target, self._credentials(), options=self.grpc_options)
            else:
                channel = grpc.insecure_channel(self.target, options=self.grpc_options)
        except Exception as e:
            raise MilvusConnectionError(f"Failed to create a channel to Milvus at {self.target}: {e}") from e

        try:
            grpc.channel_ready_future(channel).result(timeout=self.connect_timeout)
        except grpc.FutureTimeoutError as e:
            channel.close()
            raise MilvusConnectionError(
                f"Milvus at {self.target} was not reachable within {self.connect_timeout}s"
            ) from e
        except Exception as e:
            channel.close()
            raise MilvusConnectionError(f"Failed to connect to Milvus at {self.target}: {e}") from e

        self._channel = channel
        self._stub = milvus_pb2_grpc.MilvusServiceStub(channel)
        logger.info("Connected to Milvus at %s", self.target)

    def close(self) -> None:
        """Closes the gRPC connection."""
        if self._channel:
            self._channel.close()
            self._channel = None
            self._stub = None
            logger.info("Closed connection to Milvus at %s", self.target)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def _invoke(self, grpc_call: Callable, operation_name: str, request):
        """Sends one request; transport failures become MilvusCommunicationError."""
        logger.debug("Sending request to %s", operation_name)
        try:
            return grpc_call(request, timeout=self.timeout)
        except grpc.RpcError as e:
            raise MilvusCommunicationError(f"Failed to {operation_name}", grpc_error=e) from e

    def _require_stub(self) -> milvus_pb2_grpc.MilvusServiceStub:
        if not self._stub:
            raise MilvusConnectionError("Client not connected.")
        return self._stub

    # --- Collection Methods ---
    def create_collection(
        self,
        collection_name: str,
        schema: models.CollectionSchema,
        description: str = "",
        shards_num: int = DEFAULT_SHARDS_NUM,
        consistency_level: Union[models.ConsistencyLevel, str, int] = models.ConsistencyLevel.BOUNDED,
    ) -> Collection:
        stub = self._require_stub()
        request = _create_collection_request(collection_name, description, schema, shards_num, consistency_level)
        operation_name = f"create collection '{collection_name}'"

        status = self._invoke(stub.CreateCollection, operation_name, request)
        collection = interpret_status(status, operation_name, lambda: Collection(stub, collection_name))
        logger.info("Created collection %s", collection_name)
        return collection

    def drop_collection(self, collection_name: str) -> None:
        stub = self._require_stub()
        operation_name = f"drop collection '{collection_name}'"

        status = self._invoke(stub.DropCollection, operation_name, _drop_collection_request(collection_name))
        interpret_status(status, operation_name, lambda: None)
        logger.info("Dropped collection %s", collection_name)

    def has_collection(self, collection_name: str) -> bool:
        stub = self._require_stub()
        operation_name = f"check collection '{collection_name}'"

        response = self._invoke(stub.HasCollection, operation_name, _has_collection_request(collection_name))
        return interpret_status(bool_response_status(response), operation_name, lambda: response.value)

    def get_collection(self, collection_name: str) -> Optional[Collection]:
        """
        Returns a handle when the collection exists, ``None`` otherwise.

        The handle only names the collection; it may be dropped by someone
        else before the handle is used.
        """
        if self.has_collection(collection_name):
            return Collection(self._stub, collection_name)
        return None


class AsyncMilvusClient(_MilvusClientOptions):
    """
    The asyncio client for Milvus collection management.

    Use ``await AsyncMilvusClient.create(...)``, ``async with`` or an explicit
    ``await client.connect()`` before calling any operation.
    """
    def __init__(self, uri: Optional[Destination] = None, **options):
        super().__init__(uri, **options)
        self._channel: Optional[grpc.aio.Channel] = None
        self._stub: Optional[milvus_pb2_grpc.MilvusServiceStub] = None

    @classmethod
    async def create(cls, uri: Optional[Destination] = None, **options) -> "AsyncMilvusClient":
        """Builds a client and connects it."""
        client = cls(uri, **options)
        await client.connect()
        return client

    @classmethod
    async def from_env(cls, env_var: str = DEFAULT_ENV_VAR, default: str = f"{DEFAULT_HOST}:{DEFAULT_PORT}", **options) -> "AsyncMilvusClient":
        """Connect to the destination held in an environment variable, with fallback."""
        return await cls.create(os.environ.get(env_var) or default, **options)

    @property
    def connected(self) -> bool:
        return self._stub is not None

    async def connect(self) -> None:
        if self._channel:
            await self.close()

        try:
            if self.secure:
                channel = grpc.aio.secure_channel(self.target, self._credentials(), options=self.grpc_options)
            else:
                channel = grpc.aio.insecure_channel(self.target, options=self.grpc_options)
        except Exception as e:
            raise MilvusConnectionError(f"Failed to create a channel to Milvus at {self.target}: {e}") from e

        try:
            await asyncio.wait_for(channel.channel_ready(), timeout=self.connect_timeout)
        except asyncio.TimeoutError as e:
            await channel.close()
            raise MilvusConnectionError(
                f"Milvus at {self.target} was not reachable within {self.connect_timeout}s"
            ) from e
        except grpc.RpcError as e:
            await channel.close()
            raise MilvusConnectionError(f"Failed to connect to Milvus at {self.target}: {e}") from e
        except BaseException:
            await channel.close()
            raise

        self._channel = channel
        self._stub = milvus_pb2_grpc.MilvusServiceStub(channel)
        logger.info("Connected to Milvus at %s", self.target)

    async def close(self) -> None:
        if self._channel:
            await self._channel.close()
            self._channel = None
            self._stub = None
            logger.info("Closed connection to Milvus at %s", self.target)

    async def __aenter__(self):
        if not self.connected:
            await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def _invoke(self, async_grpc_call: Callable[..., Awaitable], operation_name: str, request):
        """Sends one request; transport failures become MilvusCommunicationError."""
        logger.debug("Sending request to %s", operation_name)
        try:
            return await async_grpc_call(request, timeout=self.timeout)
        except grpc.RpcError as e:
            raise MilvusCommunicationError(f"Failed to {operation_name}", grpc_error=e) from e

    def _require_stub(self) -> milvus_pb2_grpc.MilvusServiceStub:
        if not self._stub:
            raise MilvusConnectionError("Client not connected.")
        return self._stub

    # --- Async Collection Methods ---
    async def create_collection(
        self,
        collection_name: str,
        schema: models.CollectionSchema,
        description: str = "",
        shards_num: int = DEFAULT_SHARDS_NUM,
        consistency_level: Union[models.ConsistencyLevel, str, int] = models.ConsistencyLevel.BOUNDED,
    ) -> Collection:
        stub = self._require_stub()
        request = _create_collection_request(collection_name, description, schema, shards_num, consistency_level)
        operation_name = f"create collection '{collection_name}'"

        status = await self._invoke(stub.CreateCollection, operation_name, request)
        collection = interpret_status(status, operation_name, lambda: Collection(stub, collection_name))
        logger.info("Created collection %s", collection_name)
        return collection

    async def drop_collection(self, collection_name: str) -> None:
        stub = self._require_stub()
        operation_name = f"drop collection '{collection_name}'"

        status = await self._invoke(stub.DropCollection, operation_name, _drop_collection_request(collection_name))
        interpret_status(status, operation_name, lambda: None)
        logger.info("Dropped collection %s", collection_name)

    async def has_collection(self, collection_name: str) -> bool:
        stub = self._require_stub()
        operation_name = f"check collection '{collection_name}'"

        response = await self._invoke(stub.HasCollection, operation_name, _has_collection_request(collection_name))
        return interpret_status(bool_response_status(response), operation_name, lambda: response.value)

    async def get_collection(self, collection_name: str) -> Optional[Collection]:
        """
        Returns a handle when the collection exists, ``None`` otherwise.

        The existence check and any later use of the handle are separate
        round trips, so the collection may be gone by the time it is used.
        """
        if await self.has_collection(collection_name):
            return Collection(self._stub, collection_name)
        return None
