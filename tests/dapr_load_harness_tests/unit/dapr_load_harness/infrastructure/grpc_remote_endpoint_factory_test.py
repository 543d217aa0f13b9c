from logging import Logger
from unittest.mock import Mock

from dapr_load_harness.infrastructure.grpc_app_callback import GrpcAppCallback
from dapr_load_harness.infrastructure.grpc_dapr_runtime import GrpcDaprRuntime
from dapr_load_harness.infrastructure.grpc_remote_endpoint_factory import GrpcRemoteEndpointFactory


def test_creates_dapr_runtime_once(logger: Logger) -> None:
    factory = GrpcRemoteEndpointFactory(Mock(), logger)

    dapr_runtime = factory.get_dapr_runtime()

    assert isinstance(dapr_runtime, GrpcDaprRuntime)
    assert factory.get_dapr_runtime() is dapr_runtime


def test_creates_app_callback_once(logger: Logger) -> None:
    factory = GrpcRemoteEndpointFactory(Mock(), logger)

    app_callback = factory.get_app_callback()

    assert isinstance(app_callback, GrpcAppCallback)
    assert factory.get_app_callback() is app_callback


def test_binds_stubs_to_the_channel_it_was_given(logger: Logger) -> None:
    channel = Mock()
    factory = GrpcRemoteEndpointFactory(channel, logger)

    factory.get_dapr_runtime()
    factory.get_app_callback()

    called_methods = {kall.args[0] for kall in channel.unary_unary.call_args_list}
    assert '/dapr.proto.runtime.v1.Dapr/InvokeService' in called_methods
    assert '/dapr.proto.runtime.v1.AppCallback/OnInvoke' in called_methods
