from concurrent.futures import ThreadPoolExecutor
from logging import Logger
from threading import Lock
from typing import Any, Dict, List, Optional

import grpc
from dapr.proto.common.v1 import common_pb2 as common_v1
from dapr.proto.runtime.v1 import dapr_pb2 as api_v1
from dapr.proto.runtime.v1.appcallback_pb2_grpc import AppCallbackServicer, add_AppCallbackServicer_to_server
from dapr.proto.runtime.v1.dapr_pb2_grpc import DaprServicer, add_DaprServicer_to_server
from google.protobuf.empty_pb2 import Empty


class FakeDaprSidecar:
    """In-process gRPC server answering the Dapr runtime and app callback calls a load test makes.

    Every request received is recorded by operation name so that tests can assert on exactly what was sent.
    """

    __server: Optional[grpc.Server] = None
    __port: Optional[int] = None

    def __init__(self, logger: Logger):
        self.__logger = logger
        self.__lock = Lock()
        self.__received_requests: Dict[str, List[Any]] = {}
        self.__failure: Optional[grpc.StatusCode] = None

    @property
    def address(self) -> str:
        if self.__port is None:
            raise RuntimeError('Fake dapr sidecar has not been started')

        return f'localhost:{self.__port}'

    def start(self) -> None:
        self.__server = grpc.server(ThreadPoolExecutor(max_workers=4))
        add_DaprServicer_to_server(_RecordingDaprServicer(self), self.__server)
        add_AppCallbackServicer_to_server(_RecordingAppCallbackServicer(self), self.__server)
        self.__port = self.__server.add_insecure_port('localhost:0')
        self.__server.start()
        self.__logger.debug(f'Fake dapr sidecar listening on {self.address}')

    def stop(self) -> None:
        if self.__server is not None:
            self.__server.stop(grace=None)
            self.__server = None
            self.__port = None

    def fail_calls_with(self, status_code: Optional[grpc.StatusCode]) -> None:
        self.__failure = status_code

    def received_requests(self, operation: str) -> List[Any]:
        with self.__lock:
            return list(self.__received_requests.get(operation, []))

    def record(self, operation: str, request: Any, context: grpc.ServicerContext) -> None:
        with self.__lock:
            self.__received_requests.setdefault(operation, []).append(request)

        if self.__failure is not None:
            context.abort(self.__failure, f'{operation} failed by fake dapr sidecar')


class _RecordingDaprServicer(DaprServicer):
    def __init__(self, sidecar: FakeDaprSidecar):
        self.__sidecar = sidecar

    def InvokeService(self, request: api_v1.InvokeServiceRequest,
                      context: grpc.ServicerContext) -> common_v1.InvokeResponse:
        self.__sidecar.record('InvokeService', request, context)
        return common_v1.InvokeResponse(content_type='text/plain')

    def GetState(self, request: api_v1.GetStateRequest, context: grpc.ServicerContext) -> api_v1.GetStateResponse:
        self.__sidecar.record('GetState', request, context)
        return api_v1.GetStateResponse(data=b'the state')

    def PublishEvent(self, request: api_v1.PublishEventRequest, context: grpc.ServicerContext) -> Empty:
        self.__sidecar.record('PublishEvent', request, context)
        return Empty()


class _RecordingAppCallbackServicer(AppCallbackServicer):
    def __init__(self, sidecar: FakeDaprSidecar):
        self.__sidecar = sidecar

    def OnInvoke(self, request: common_v1.InvokeRequest, context: grpc.ServicerContext) -> common_v1.InvokeResponse:
        self.__sidecar.record('OnInvoke', request, context)
        return common_v1.InvokeResponse(content_type='text/plain')
