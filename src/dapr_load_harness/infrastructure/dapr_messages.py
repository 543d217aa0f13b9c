from functools import lru_cache

from dapr.proto.common.v1 import common_pb2 as common_v1
from dapr.proto.runtime.v1 import dapr_pb2 as api_v1
from google.protobuf.any_pb2 import Any

from dapr_load_harness.domain.prepared_request import InvokeRequest, InvokeCallbackRequest, GetStateRequest, \
    PublishRequest

# Prepared requests are immutable, so each one is translated to its protobuf message only once however many
# times it is sent.
MESSAGE_CACHE_SIZE = 64


@lru_cache(maxsize=MESSAGE_CACHE_SIZE)
def invoke_service_request_for(request: InvokeRequest) -> api_v1.InvokeServiceRequest:
    return api_v1.InvokeServiceRequest(
        id=request.app_id,
        message=common_v1.InvokeRequest(
            method=request.method,
            data=Any(value=request.data),
            content_type=request.content_type
        )
    )


@lru_cache(maxsize=MESSAGE_CACHE_SIZE)
def app_callback_invoke_request_for(request: InvokeCallbackRequest) -> common_v1.InvokeRequest:
    return common_v1.InvokeRequest(
        method=request.method,
        data=Any(value=request.data),
        content_type=request.content_type
    )


@lru_cache(maxsize=MESSAGE_CACHE_SIZE)
def get_state_request_for(request: GetStateRequest) -> api_v1.GetStateRequest:
    return api_v1.GetStateRequest(store_name=request.store_name, key=request.key)


@lru_cache(maxsize=MESSAGE_CACHE_SIZE)
def publish_event_request_for(request: PublishRequest) -> api_v1.PublishEventRequest:
    return api_v1.PublishEventRequest(
        pubsub_name=request.pubsub_name,
        topic=request.topic,
        data=request.data,
        data_content_type=request.data_content_type
    )
