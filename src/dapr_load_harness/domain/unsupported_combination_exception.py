from dapr_load_harness.domain.dapr_load_test_exception import DaprLoadTestException


class UnsupportedCombinationException(DaprLoadTestException):
    def __init__(self, capability: str, target: str):
        super().__init__(f'Unsupported dapr load test: capability={capability}, target={target}')
        self.capability = capability
        self.target = target
