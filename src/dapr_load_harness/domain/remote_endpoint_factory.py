from abc import ABCMeta, abstractmethod

from dapr_load_harness.domain.app_callback import AppCallback
from dapr_load_harness.domain.dapr_runtime import DaprRuntime


class RemoteEndpointFactory(metaclass=ABCMeta):
    @abstractmethod
    def get_dapr_runtime(self) -> DaprRuntime:
        pass

    @abstractmethod
    def get_app_callback(self) -> AppCallback:
        pass
