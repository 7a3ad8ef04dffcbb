from __future__ import annotations


class Reader:
    """A registered library reader."""

    def __init__(self, id: int, name: str) -> None:
        self.id = id
        self.name = name

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.name} (ID: {self.id})"

    def __repr__(self) -> str:
        return f"Reader(id={self.id!r}, name={self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reader):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}

    @staticmethod
    def from_dict(data: dict) -> "Reader":
        reader_id, name = data["id"], data["name"]
        if not isinstance(reader_id, int) or isinstance(reader_id, bool):
            raise TypeError(f"Reader id must be an integer, got {reader_id!r}.")
        if not isinstance(name, str):
            raise TypeError(f"Reader {reader_id}: name must be a string.")
        return Reader(id=reader_id, name=name)
