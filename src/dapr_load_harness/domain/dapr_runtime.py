from abc import ABCMeta, abstractmethod

from dapr_load_harness.domain.call_context import CallContext
from dapr_load_harness.domain.prepared_request import InvokeRequest, GetStateRequest, PublishRequest


class DaprRuntime(metaclass=ABCMeta):
    @abstractmethod
    def invoke_service(self, request: InvokeRequest, call_context: CallContext) -> None:
        pass

    @abstractmethod
    def get_state(self, request: GetStateRequest, call_context: CallContext) -> None:
        pass

    @abstractmethod
    def publish_event(self, request: PublishRequest, call_context: CallContext) -> None:
        pass
