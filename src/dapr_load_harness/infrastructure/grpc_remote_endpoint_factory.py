from logging import Logger
from typing import Optional

import grpc
from dapr.proto.runtime.v1.appcallback_pb2_grpc import AppCallbackStub
from dapr.proto.runtime.v1.dapr_pb2_grpc import DaprStub

from dapr_load_harness.domain.app_callback import AppCallback
from dapr_load_harness.domain.dapr_runtime import DaprRuntime
from dapr_load_harness.domain.remote_endpoint_factory import RemoteEndpointFactory
from dapr_load_harness.infrastructure.grpc_app_callback import GrpcAppCallback
from dapr_load_harness.infrastructure.grpc_dapr_runtime import GrpcDaprRuntime


class GrpcRemoteEndpointFactory(RemoteEndpointFactory):
    __dapr_runtime: Optional[DaprRuntime] = None
    __app_callback: Optional[AppCallback] = None

    def __init__(self, channel: grpc.Channel, logger: Logger):
        self.__channel = channel
        self.__logger = logger

    def get_dapr_runtime(self) -> DaprRuntime:
        if self.__dapr_runtime is None:
            self.__logger.debug('Creating dapr runtime stub...')
            self.__dapr_runtime = GrpcDaprRuntime(DaprStub(self.__channel), self.__logger)

        return self.__dapr_runtime

    def get_app_callback(self) -> AppCallback:
        if self.__app_callback is None:
            self.__logger.debug('Creating app callback stub...')
            self.__app_callback = GrpcAppCallback(AppCallbackStub(self.__channel), self.__logger)

        return self.__app_callback
