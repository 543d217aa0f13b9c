from dapr_load_harness.domain.dapr_load_test_exception import DaprLoadTestException


class UnsupportedMethodException(DaprLoadTestException):
    def __init__(self, method: str, capability: str):
        super().__init__(f'Unsupported method of {capability} load test: method={method}')
        self.method = method
        self.capability = capability
