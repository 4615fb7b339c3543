from __future__ import annotations


class Sentinel:
    """A unique marker value compared by identity only.

    Each Runtime creates its own set (nil, t, and the two reader markers), so
    values from one interpreter never compare equal to another's.
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return f"<{self.name}>"
