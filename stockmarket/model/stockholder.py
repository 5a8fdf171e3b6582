from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Stockholder:
    """A party placing stock orders.

    Identity is the ``id`` alone: two records with the same id but a
    different display name are the same stockholder.
    """

    id: str
    name: str = field(default="", compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Stockholder":
        try:
            return cls(id=str(data["id"]), name=str(data.get("name") or ""))
        except KeyError as exc:
            raise ValueError("stockholder.id is missing") from exc
        except (AttributeError, TypeError) as exc:
            raise ValueError(f"stockholder record is malformed: {data!r}") from exc
