from logging import Logger

from dapr.proto.runtime.v1.dapr_pb2_grpc import DaprStub

from dapr_load_harness.domain.call_context import CallContext
from dapr_load_harness.domain.dapr_runtime import DaprRuntime
from dapr_load_harness.domain.prepared_request import InvokeRequest, GetStateRequest, PublishRequest
from dapr_load_harness.infrastructure.dapr_messages import invoke_service_request_for, get_state_request_for, \
    publish_event_request_for
from dapr_load_harness.infrastructure.grpc_remote_call import call_remote


class GrpcDaprRuntime(DaprRuntime):
    def __init__(self, dapr_stub: DaprStub, logger: Logger):
        self.__dapr_stub = dapr_stub
        self.__logger = logger

    def invoke_service(self, request: InvokeRequest, call_context: CallContext) -> None:
        self.__logger.debug(f'Invoking method {request.method} of app {request.app_id}')
        call_remote('InvokeService', self.__dapr_stub.InvokeService, invoke_service_request_for(request),
                    call_context)

    def get_state(self, request: GetStateRequest, call_context: CallContext) -> None:
        self.__logger.debug(f'Getting state {request.key} from store {request.store_name}')
        call_remote('GetState', self.__dapr_stub.GetState, get_state_request_for(request), call_context)

    def publish_event(self, request: PublishRequest, call_context: CallContext) -> None:
        self.__logger.debug(f'Publishing event to topic {request.topic} of pubsub {request.pubsub_name}')
        call_remote('PublishEvent', self.__dapr_stub.PublishEvent, publish_event_request_for(request), call_context)
