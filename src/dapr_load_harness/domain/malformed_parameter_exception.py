from dapr_load_harness.domain.dapr_load_test_exception import DaprLoadTestException


class MalformedParameterException(DaprLoadTestException):
    def __init__(self, entry: str):
        super().__init__(f'Malformed dapr load test parameter "{entry}": expected key=value')
        self.entry = entry
