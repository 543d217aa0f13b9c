import json
import os
from typing import Dict, Any

from dapr_load_harness.domain.invalid_load_test_options_exception import InvalidLoadTestOptionsException
from dapr_load_harness.domain.load_test_options import LoadTestOptions


class JsonFileLoadTestOptions:
    """Reads load test options from a JSON file.

    Recognised keys are ``daprParameters`` (required), and either ``payload`` (a string, sent UTF-8 encoded) or
    ``payloadFile`` (a path, relative to the options file, whose contents are sent verbatim).
    """

    def __init__(self, options_file_path: str):
        self.__options_file_path = options_file_path

    def load(self) -> LoadTestOptions:
        with open(self.__options_file_path, 'r') as f:
            options = json.load(f)

        if not isinstance(options, dict):
            raise InvalidLoadTestOptionsException(
                f'Load test options file "{self.__options_file_path}" must contain a JSON object'
            )

        dapr_parameters = options.get('daprParameters')

        if not dapr_parameters:
            raise InvalidLoadTestOptionsException(
                f'daprParameters must be set in load test options file "{self.__options_file_path}"'
            )

        for key in ('daprParameters', 'payload', 'payloadFile'):
            if key in options and not isinstance(options[key], str):
                raise InvalidLoadTestOptionsException(
                    f'{key} must be a string in load test options file "{self.__options_file_path}"'
                )

        if 'payload' in options and 'payloadFile' in options:
            raise InvalidLoadTestOptionsException(
                f'Only one of payload and payloadFile may be set in load test options file '
                f'"{self.__options_file_path}"'
            )

        return LoadTestOptions(dapr_parameters=dapr_parameters, payload=self.__read_payload(options))

    def __read_payload(self, options: Dict[str, Any]) -> bytes:
        if 'payloadFile' in options:
            payload_file_path = os.path.join(os.path.dirname(self.__options_file_path), options['payloadFile'])

            with open(payload_file_path, 'rb') as f:
                return f.read()

        payload: str = options.get('payload', '')

        return payload.encode('utf-8')
