from logging import Logger

import grpc
import pytest
from google.protobuf.any_pb2 import Any

from dapr_load_harness.domain.call_context import CallContext
from dapr_load_harness.domain.prepared_request import InvokeRequest, InvokeCallbackRequest, GetStateRequest, \
    PublishRequest
from dapr_load_harness.domain.remote_call_failure_exception import RemoteCallFailureException
from dapr_load_harness.infrastructure.grpc_remote_endpoint_factory import GrpcRemoteEndpointFactory
from dapr_load_harness_test_support.fake_dapr_sidecar import FakeDaprSidecar


def test_invokes_service_through_dapr_runtime(channel: grpc.Channel, fake_dapr_sidecar: FakeDaprSidecar,
                                             logger: Logger) -> None:
    dapr_runtime = GrpcRemoteEndpointFactory(channel, logger).get_dapr_runtime()

    dapr_runtime.invoke_service(InvokeRequest(app_id='testapp', method='load', data=b'payload'), CallContext())

    [received_request] = fake_dapr_sidecar.received_requests('InvokeService')
    assert received_request.id == 'testapp'
    assert received_request.message.method == 'load'
    assert received_request.message.content_type == 'text/plain'
    assert received_request.message.data == Any(value=b'payload')


def test_gets_state_through_dapr_runtime(channel: grpc.Channel, fake_dapr_sidecar: FakeDaprSidecar,
                                         logger: Logger) -> None:
    dapr_runtime = GrpcRemoteEndpointFactory(channel, logger).get_dapr_runtime()

    dapr_runtime.get_state(GetStateRequest(store_name='statestore', key='mykey'), CallContext())

    [received_request] = fake_dapr_sidecar.received_requests('GetState')
    assert received_request.store_name == 'statestore'
    assert received_request.key == 'mykey'


def test_publishes_event_through_dapr_runtime(channel: grpc.Channel, fake_dapr_sidecar: FakeDaprSidecar,
                                              logger: Logger) -> None:
    dapr_runtime = GrpcRemoteEndpointFactory(channel, logger).get_dapr_runtime()

    dapr_runtime.publish_event(
        PublishRequest(pubsub_name='orders', topic='created', data=b'{"id":1}', data_content_type='application/json'),
        CallContext()
    )

    [received_request] = fake_dapr_sidecar.received_requests('PublishEvent')
    assert received_request.pubsub_name == 'orders'
    assert received_request.topic == 'created'
    assert received_request.data == b'{"id":1}'
    assert received_request.data_content_type == 'application/json'


def test_invokes_app_callback(channel: grpc.Channel, fake_dapr_sidecar: FakeDaprSidecar, logger: Logger) -> None:
    app_callback = GrpcRemoteEndpointFactory(channel, logger).get_app_callback()

    app_callback.on_invoke(InvokeCallbackRequest(method='ping'), CallContext())

    [received_request] = fake_dapr_sidecar.received_requests('OnInvoke')
    assert received_request.method == 'ping'
    assert received_request.data.value == b''


def test_raises_remote_call_failure_with_status_returned_by_remote_end(channel: grpc.Channel,
                                                                       fake_dapr_sidecar: FakeDaprSidecar,
                                                                       logger: Logger) -> None:
    fake_dapr_sidecar.fail_calls_with(grpc.StatusCode.NOT_FOUND)
    dapr_runtime = GrpcRemoteEndpointFactory(channel, logger).get_dapr_runtime()

    with pytest.raises(RemoteCallFailureException, match='GetState call failed with status NOT_FOUND') \
            as exception_info:
        dapr_runtime.get_state(GetStateRequest(store_name='statestore', key='mykey'), CallContext())

    assert isinstance(exception_info.value.__cause__, grpc.RpcError)
    assert len(fake_dapr_sidecar.received_requests('GetState')) == 1
