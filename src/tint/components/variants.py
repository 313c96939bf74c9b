from dataclasses import dataclass, field
from typing import Dict


@dataclass(slots=True)
class Variants:
    """Variant strings such as ``type``, ``age`` or ``lifeStage``."""
    values: Dict[str, str] = field(default_factory=dict)

    def get(self, name: str) -> str:
        value = self.values.get(name)
        return value if value else ""
