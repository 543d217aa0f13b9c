from typing import Optional

from dapr_load_harness.domain.dapr_load_test_exception import DaprLoadTestException


class RemoteCallFailureException(DaprLoadTestException):
    def __init__(self, operation: str, status_code: Optional[str], details: Optional[str] = None):
        super().__init__(
            f'{operation} call failed with status {status_code}' + (f': {details}' if details else '')
        )
        self.operation = operation
        self.status_code = status_code
        self.details = details
