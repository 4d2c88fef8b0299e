"""Search history models."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class City:
    id: str
    name: str

    def to_payload(self) -> dict:
        return asdict(self)
