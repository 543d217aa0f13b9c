from typing import Dict, Tuple, Type, Optional

from dapr_load_harness.domain.capability import Capability
from dapr_load_harness.domain.prepared_request import PreparedRequest, InvokeRequest, InvokeCallbackRequest, \
    GetStateRequest, PublishRequest, EmptyRequest
from dapr_load_harness.domain.target import Target

# Every (capability, target) pair a load test can address, and the request it is prepared as
SUPPORTED_COMBINATIONS: Dict[Tuple[Capability, Target], Type[PreparedRequest]] = {
    (Capability.INVOKE, Target.NOOP): EmptyRequest,
    (Capability.INVOKE, Target.DAPR): InvokeRequest,
    (Capability.INVOKE, Target.APP_CALLBACK): InvokeCallbackRequest,
    (Capability.STATE, Target.NOOP): EmptyRequest,
    (Capability.STATE, Target.DAPR): GetStateRequest,
    (Capability.PUBSUB, Target.NOOP): EmptyRequest,
    (Capability.PUBSUB, Target.DAPR): PublishRequest,
}


def request_type_for(capability: Optional[Capability], target: Optional[Target]) -> Optional[Type[PreparedRequest]]:
    if target is Target.NOOP:
        return EmptyRequest

    if capability is None or target is None:
        return None

    return SUPPORTED_COMBINATIONS.get((capability, target))
