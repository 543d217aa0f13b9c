from dapr_load_harness.domain.dapr_load_test_exception import DaprLoadTestException


class RequestNotPreparedException(DaprLoadTestException):
    def __init__(self) -> None:
        super().__init__('Dapr load test request has not been prepared')
