from dapr_load_harness.domain.dapr_load_test_exception import DaprLoadTestException


class MissingFieldException(DaprLoadTestException):
    def __init__(self, field_name: str, capability: str):
        super().__init__(f'{field_name} is required for {capability} load test')
        self.field_name = field_name
        self.capability = capability
