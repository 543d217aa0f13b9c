from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class CallContext:
    timeout: Optional[float] = None
    metadata: Tuple[Tuple[str, str], ...] = ()
