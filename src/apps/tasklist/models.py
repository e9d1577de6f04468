"""
Task record
"""

from typing import Any, Dict, NamedTuple, Optional


class Task(NamedTuple):
    """A task title with an optional image reference, compared by value"""
    title: str
    image_uri: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'title': self.title, 'image_uri': self.image_uri}
