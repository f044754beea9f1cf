"""Action rows: the container Discord requires around message buttons."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from buttonforge import checks
from buttonforge.button import Button

MAX_BUTTONS = 5
MAX_ROWS = 5


@dataclass(frozen=True, slots=True)
class ActionRow:
    buttons: tuple[Button, ...]

    def __post_init__(self) -> None:
        checks.none_none(self.buttons, "Buttons")
        checks.check(
            all(isinstance(b, Button) for b in self.buttons),
            "Buttons",
            "Action rows can only hold buttons",
        )
        checks.check(bool(self.buttons), "Buttons", "Action rows need at least one button")
        checks.check(
            len(self.buttons) <= MAX_BUTTONS,
            "Buttons",
            f"Action rows hold at most {MAX_BUTTONS} buttons (got {len(self.buttons)})",
        )

    @classmethod
    def of(cls, *buttons: Button) -> ActionRow:
        return cls(tuple(buttons))

    def __iter__(self) -> Iterator[Button]:
        return iter(self.buttons)

    def __len__(self) -> int:
        return len(self.buttons)

    def __getitem__(self, index: int) -> Button:
        return self.buttons[index]

    def with_button_replaced(self, index: int, button: Button) -> ActionRow:
        if not -len(self.buttons) <= index < len(self.buttons):
            raise IndexError(f"row has no button at index {index}")
        buttons = list(self.buttons)
        buttons[index] = button
        return ActionRow(tuple(buttons))

    def as_disabled(self) -> ActionRow:
        return ActionRow(tuple(b.as_disabled() for b in self.buttons))

    def as_enabled(self) -> ActionRow:
        return ActionRow(tuple(b.as_enabled() for b in self.buttons))
