from dataclasses import dataclass
from typing import ClassVar, Optional

from dapr_load_harness.domain.capability import Capability
from dapr_load_harness.domain.target import Target

PLAIN_TEXT_CONTENT_TYPE = 'text/plain'


@dataclass(frozen=True)
class PreparedRequest:
    capability: ClassVar[Optional[Capability]] = None
    target: ClassVar[Target]


@dataclass(frozen=True)
class EmptyRequest(PreparedRequest):
    target: ClassVar[Target] = Target.NOOP


@dataclass(frozen=True)
class InvokeRequest(PreparedRequest):
    capability: ClassVar[Optional[Capability]] = Capability.INVOKE
    target: ClassVar[Target] = Target.DAPR

    app_id: str
    method: str
    data: bytes = b''
    content_type: str = PLAIN_TEXT_CONTENT_TYPE


@dataclass(frozen=True)
class InvokeCallbackRequest(PreparedRequest):
    capability: ClassVar[Optional[Capability]] = Capability.INVOKE
    target: ClassVar[Target] = Target.APP_CALLBACK

    method: str
    data: bytes = b''
    content_type: str = PLAIN_TEXT_CONTENT_TYPE


@dataclass(frozen=True)
class GetStateRequest(PreparedRequest):
    capability: ClassVar[Optional[Capability]] = Capability.STATE
    target: ClassVar[Target] = Target.DAPR

    store_name: str
    key: str


@dataclass(frozen=True)
class PublishRequest(PreparedRequest):
    capability: ClassVar[Optional[Capability]] = Capability.PUBSUB
    target: ClassVar[Target] = Target.DAPR

    pubsub_name: str
    topic: str
    data: bytes = b''
    data_content_type: str = ''
