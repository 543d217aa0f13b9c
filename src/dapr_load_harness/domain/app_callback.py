from abc import ABCMeta, abstractmethod

from dapr_load_harness.domain.call_context import CallContext
from dapr_load_harness.domain.prepared_request import InvokeCallbackRequest


class AppCallback(metaclass=ABCMeta):
    @abstractmethod
    def on_invoke(self, request: InvokeCallbackRequest, call_context: CallContext) -> None:
        pass
