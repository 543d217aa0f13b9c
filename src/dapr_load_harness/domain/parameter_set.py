from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, List


@dataclass(frozen=True)
class ParameterSet:
    capability: str = ''
    target: str = ''
    method: str = ''
    app_id: str = ''
    store: str = ''
    extensions: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only copy of whatever mapping was given
        object.__setattr__(self, 'extensions', MappingProxyType(dict(self.extensions)))

    def extension(self, name: str) -> str:
        return self.extensions.get(name, '')

    def to_config_string(self) -> str:
        named_fields = [
            ('capability', self.capability),
            ('target', self.target),
            ('method', self.method),
            ('appid', self.app_id),
            ('store', self.store),
        ]

        entries: List[str] = [f'{key}={value}' for key, value in named_fields if value]
        entries.extend(f'{key}={value}' for key, value in self.extensions.items())

        # Parsing needs at least one entry, even when every field is empty
        if not entries:
            entries.append('capability=')

        return ','.join(entries)

    def __hash__(self) -> int:
        return hash((self.capability, self.target, self.method, self.app_id, self.store,
                     frozenset(self.extensions.items())))
