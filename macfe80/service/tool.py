"""Descriptor of the converter as a tool for hosting front ends."""

import dataclasses
import datetime
from typing import Any, Dict, List


@dataclasses.dataclass(frozen=True)
class Tool:
    """Metadata a front end needs to list and route to a tool.

    Attributes:
        name: Human readable name.
        path: The route the tool is mounted on.
        description: One line summary.
        keywords: Search keywords.
        created_at: When the tool was added.
    """

    name: str
    path: str
    description: str
    keywords: List[str]
    created_at: datetime.date

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "description": self.description,
            "keywords": list(self.keywords),
            "created_at": self.created_at.isoformat(),
        }


MAC_TO_EUI64 = Tool(
    name="MAC to EUI-64",
    path="/mac-to-eui64",
    description="Converts any MAC address into an EUI-64 MAC and a IPv6 link-local address",
    keywords=["ipv6", "address", "converter", "mac", "eui64", "eui-64", "link-local"],
    created_at=datetime.date(2025, 8, 24),
)
