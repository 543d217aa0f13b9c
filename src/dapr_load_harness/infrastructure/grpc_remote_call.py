from typing import Callable, Any

import grpc

from dapr_load_harness.domain.call_context import CallContext
from dapr_load_harness.domain.remote_call_failure_exception import RemoteCallFailureException


def call_remote(operation: str, stub_method: Callable[..., Any], message: Any, call_context: CallContext) -> None:
    try:
        stub_method(message, timeout=call_context.timeout, metadata=call_context.metadata or None)
    except grpc.RpcError as e:
        if isinstance(e, grpc.Call):
            raise RemoteCallFailureException(operation, e.code().name, e.details()) from e

        raise RemoteCallFailureException(operation, None, str(e)) from e
