"""Domain models for flashcard application."""

import uuid


class Word:
    """An English/Chinese vocabulary pair. Immutable once created."""

    __slots__ = ('_id', '_english', '_chinese')

    def __init__(self, english: str, chinese: str, id: str = None):
        object.__setattr__(self, '_id', id or uuid.uuid4().hex)
        object.__setattr__(self, '_english', english)
        object.__setattr__(self, '_chinese', chinese)

    def __setattr__(self, name, value):
        raise AttributeError(f"Word is immutable, cannot set '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"Word is immutable, cannot delete '{name}'")

    @property
    def id(self) -> str:
        return self._id

    @property
    def english(self) -> str:
        return self._english

    @property
    def chinese(self) -> str:
        return self._chinese

    def __eq__(self, other) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return (self.id, self.english, self.chinese) == (other.id, other.english, other.chinese)

    def __hash__(self) -> int:
        return hash((self.id, self.english, self.chinese))

    def __repr__(self) -> str:
        return f"Word(english={self.english!r}, chinese={self.chinese!r}, id={self.id!r})"

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'english': self.english,
            'chinese': self.chinese
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Word':
        """Build a Word from its serialized form.

        Raises ValueError if the data is not a dict or a field is missing
        or not a string.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected a dict, got {type(data).__name__}")
        for field in ('id', 'english', 'chinese'):
            if not isinstance(data.get(field), str):
                raise ValueError(f"Word field '{field}' missing or not a string")
        if not data['id']:
            raise ValueError("Word field 'id' is empty")
        return cls(data['english'], data['chinese'], id=data['id'])
