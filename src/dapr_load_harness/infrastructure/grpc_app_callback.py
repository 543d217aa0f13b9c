from logging import Logger

from dapr.proto.runtime.v1.appcallback_pb2_grpc import AppCallbackStub

from dapr_load_harness.domain.app_callback import AppCallback
from dapr_load_harness.domain.call_context import CallContext
from dapr_load_harness.domain.prepared_request import InvokeCallbackRequest
from dapr_load_harness.infrastructure.dapr_messages import app_callback_invoke_request_for
from dapr_load_harness.infrastructure.grpc_remote_call import call_remote


class GrpcAppCallback(AppCallback):
    def __init__(self, app_callback_stub: AppCallbackStub, logger: Logger):
        self.__app_callback_stub = app_callback_stub
        self.__logger = logger

    def on_invoke(self, request: InvokeCallbackRequest, call_context: CallContext) -> None:
        self.__logger.debug(f'Invoking app callback method {request.method}')
        call_remote('OnInvoke', self.__app_callback_stub.OnInvoke, app_callback_invoke_request_for(request),
                    call_context)
