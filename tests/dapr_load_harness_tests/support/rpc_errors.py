from typing import Any, Callable, Optional

import grpc


class FailedCall(grpc.RpcError, grpc.Call):
    def __init__(self, status_code: grpc.StatusCode, details: str):
        super().__init__(details)
        self.__status_code = status_code
        self.__details = details

    def code(self) -> grpc.StatusCode:
        return self.__status_code

    def details(self) -> str:
        return self.__details

    def initial_metadata(self) -> Any:
        return ()

    def trailing_metadata(self) -> Any:
        return ()

    def is_active(self) -> bool:
        return False

    def time_remaining(self) -> Optional[float]:
        return None

    def cancel(self) -> bool:
        return False

    def add_callback(self, callback: Callable[[], None]) -> bool:
        return False


def an_rpc_error_with(status_code: grpc.StatusCode, details: str = 'any details') -> FailedCall:
    return FailedCall(status_code, details)
