from dataclasses import dataclass
from typing import Any, Dict


INDUSTRIES = [
    "Country Club",
    "Insurance",
    "Non-Profit",
    "Municipalities with Utilities",
    "Property Management",
    "Taxes",
    "Utilities",
]

STATES = [
    "Alabama",
    "Florida",
    "Georgia",
    "Indiana",
    "Kentucky",
    "Maryland",
    "New Jersey",
    "North Carolina",
    "Ohio",
    "Pennsylvania",
    "South Carolina",
    "Tennessee",
    "Texas",
    "Virginia",
    "West Virginia",
    "Washington DC",
]


@dataclass(frozen=True)
class SearchCriteria:
    industry: str = ""
    state: str = ""

    def is_complete(self) -> bool:
        return bool(self.industry.strip()) and bool(self.state.strip())


@dataclass(frozen=True)
class SearchResult:
    """
    One discovered entity. Field names are pythonic; to_dict/from_dict
    speak the camelCase keys the model is asked to emit.
    """

    id: int
    entity_name: str
    website_url: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "entityName": self.entity_name, "websiteUrl": self.website_url}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchResult":
        return cls(id=int(data["id"]), entity_name=data["entityName"], website_url=data["websiteUrl"])
