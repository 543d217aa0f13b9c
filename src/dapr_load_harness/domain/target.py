from enum import Enum
from typing import Optional, Dict


class Target(Enum):
    NOOP = 'noop'
    DAPR = 'dapr'
    APP_CALLBACK = 'appcallback'

    @classmethod
    def from_config_value(cls, value: str) -> Optional['Target']:
        try:
            return cls(_ALIASES.get(value, value))
        except ValueError:
            return None


_ALIASES: Dict[str, str] = {
    'dapr-runtime': Target.DAPR.value,
    'app-callback': Target.APP_CALLBACK.value,
}
