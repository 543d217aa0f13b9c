from logging import Logger
from typing import Callable, Dict, Optional, Type, Any

from dapr_load_harness.domain.call_context import CallContext
from dapr_load_harness.domain.capability import Capability
from dapr_load_harness.domain.compatibility_matrix import request_type_for
from dapr_load_harness.domain.missing_field_exception import MissingFieldException
from dapr_load_harness.domain.parameter_set import ParameterSet
from dapr_load_harness.domain.prepared_request import PreparedRequest, EmptyRequest, InvokeRequest, \
    InvokeCallbackRequest, GetStateRequest, PublishRequest
from dapr_load_harness.domain.remote_endpoint_factory import RemoteEndpointFactory
from dapr_load_harness.domain.target import Target
from dapr_load_harness.domain.unsupported_combination_exception import UnsupportedCombinationException
from dapr_load_harness.domain.unsupported_method_exception import UnsupportedMethodException

GET_STATE_METHOD = 'get'
PUBLISH_METHOD = 'publish'


class RequestResolver:
    def __init__(self, remote_endpoint_factory: RemoteEndpointFactory, logger: Logger):
        self.__remote_endpoint_factory = remote_endpoint_factory
        self.__logger = logger

        self.__request_builders: Dict[Type[PreparedRequest], Callable[[ParameterSet, bytes], PreparedRequest]] = {
            InvokeRequest: self.__build_invoke_request,
            InvokeCallbackRequest: self.__build_invoke_callback_request,
            GetStateRequest: self.__build_get_state_request,
            PublishRequest: self.__build_publish_request,
        }

        self.__remote_calls: Dict[Type[PreparedRequest], Callable[[Any, CallContext], None]] = {
            InvokeRequest: lambda request, context:
                self.__remote_endpoint_factory.get_dapr_runtime().invoke_service(request, context),
            InvokeCallbackRequest: lambda request, context:
                self.__remote_endpoint_factory.get_app_callback().on_invoke(request, context),
            GetStateRequest: lambda request, context:
                self.__remote_endpoint_factory.get_dapr_runtime().get_state(request, context),
            PublishRequest: lambda request, context:
                self.__remote_endpoint_factory.get_dapr_runtime().publish_event(request, context),
        }

    def prepare(self, parameters: ParameterSet, payload: Optional[bytes] = None) -> PreparedRequest:
        target = Target.from_config_value(parameters.target)

        if target is Target.NOOP:
            return EmptyRequest()

        capability = Capability.from_config_value(parameters.capability)
        request_type = request_type_for(capability, target)

        if request_type is None:
            raise UnsupportedCombinationException(parameters.capability, parameters.target)

        if target is Target.DAPR:
            self.__remote_endpoint_factory.get_dapr_runtime()
        else:
            self.__remote_endpoint_factory.get_app_callback()

        request = self.__request_builders[request_type](parameters, payload or b'')
        self.__logger.debug(
            f'Prepared dapr load test request {type(request).__name__} with {len(payload or b"")} byte payload'
        )

        return request

    def execute(self, prepared_request: PreparedRequest, call_context: Optional[CallContext] = None) -> None:
        capability = getattr(prepared_request, 'capability', None)
        target = getattr(prepared_request, 'target', None)

        if (not isinstance(prepared_request, PreparedRequest) or
                request_type_for(capability, target) is not type(prepared_request)):
            raise UnsupportedCombinationException(self.__describe(capability), self.__describe(target))

        if isinstance(prepared_request, EmptyRequest):
            return

        self.__remote_calls[type(prepared_request)](prepared_request, call_context or CallContext())

    @staticmethod
    def __build_invoke_request(parameters: ParameterSet, payload: bytes) -> PreparedRequest:
        method = RequestResolver.__require('method', parameters.method, Capability.INVOKE)

        return InvokeRequest(app_id=parameters.app_id, method=method, data=payload)

    @staticmethod
    def __build_invoke_callback_request(parameters: ParameterSet, payload: bytes) -> PreparedRequest:
        method = RequestResolver.__require('method', parameters.method, Capability.INVOKE)

        return InvokeCallbackRequest(method=method, data=payload)

    @staticmethod
    def __build_get_state_request(parameters: ParameterSet, _: bytes) -> PreparedRequest:
        method = RequestResolver.__require('method', parameters.method, Capability.STATE)
        store = RequestResolver.__require('store', parameters.store, Capability.STATE)
        key = RequestResolver.__require('key', parameters.extension('key'), Capability.STATE)

        if method != GET_STATE_METHOD:
            raise UnsupportedMethodException(method, Capability.STATE.value)

        return GetStateRequest(store_name=store, key=key)

    @staticmethod
    def __build_publish_request(parameters: ParameterSet, payload: bytes) -> PreparedRequest:
        method = RequestResolver.__require('method', parameters.method, Capability.PUBSUB)
        pubsub_name = RequestResolver.__require('store', parameters.store, Capability.PUBSUB)
        topic = RequestResolver.__require('topic', parameters.extension('topic'), Capability.PUBSUB)

        if method != PUBLISH_METHOD:
            raise UnsupportedMethodException(method, Capability.PUBSUB.value)

        return PublishRequest(
            pubsub_name=pubsub_name,
            topic=topic,
            data=payload,
            data_content_type=parameters.extension('contenttype')
        )

    @staticmethod
    def __require(field_name: str, value: str, capability: Capability) -> str:
        if not value:
            raise MissingFieldException(field_name, capability.value)

        return value

    @staticmethod
    def __describe(value: Any) -> str:
        if isinstance(value, (Capability, Target)):
            return value.value

        return str(value)
