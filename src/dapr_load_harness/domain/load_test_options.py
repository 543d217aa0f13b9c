from dataclasses import dataclass


@dataclass(frozen=True)
class LoadTestOptions:
    dapr_parameters: str
    payload: bytes = b''
