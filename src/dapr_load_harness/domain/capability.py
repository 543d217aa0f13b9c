from enum import Enum
from typing import Optional


class Capability(Enum):
    INVOKE = 'invoke'
    STATE = 'state'
    PUBSUB = 'pubsub'

    @classmethod
    def from_config_value(cls, value: str) -> Optional['Capability']:
        try:
            return cls(value)
        except ValueError:
            return None
