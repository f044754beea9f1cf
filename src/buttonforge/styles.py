"""Button styles and their wire codes."""

from enum import Enum


class ButtonStyle(Enum):
    """Appearance of a button; ``LINK`` buttons open a URL instead of
    sending an interaction.

    ``UNKNOWN`` stands in for codes the server sends that this client does
    not recognise yet. It is never accepted when building a button.
    """

    UNKNOWN = -1
    PRIMARY = 1
    SECONDARY = 2
    SUCCESS = 3
    DANGER = 4
    LINK = 5

    @property
    def key(self) -> int:
        return self.value

    @classmethod
    def from_key(cls, key: int) -> "ButtonStyle":
        """Unrecognised codes map to ``UNKNOWN`` rather than raising."""
        try:
            return cls(key)
        except ValueError:
            return cls.UNKNOWN
