from typing import Dict

from dapr_load_harness.domain.malformed_parameter_exception import MalformedParameterException
from dapr_load_harness.domain.parameter_set import ParameterSet

ENTRY_SEPARATOR = ','
KEY_VALUE_SEPARATOR = '='

NAMED_FIELDS: Dict[str, str] = {
    'capability': 'capability',
    'target': 'target',
    'method': 'method',
    'appid': 'app_id',
    'store': 'store',
}


class ParameterParser:
    @staticmethod
    def parse(raw: str) -> ParameterSet:
        """Parses a flat ``key=value,key=value`` dapr load test configuration.

        Keys are case-sensitive. ``capability``, ``target``, ``method``, ``appid`` and ``store`` populate the named
        fields of the result; every other key is kept as an extension. Required fields are not checked here because
        they depend on the capability being parsed.
        """
        named_values: Dict[str, str] = {}
        extensions: Dict[str, str] = {}

        for entry in raw.split(ENTRY_SEPARATOR):
            key, separator, value = entry.partition(KEY_VALUE_SEPARATOR)

            if not separator:
                raise MalformedParameterException(entry)

            key = key.strip()
            value = value.strip()

            if key in NAMED_FIELDS:
                named_values[NAMED_FIELDS[key]] = value
            else:
                extensions[key] = value

        return ParameterSet(**named_values, extensions=extensions)
