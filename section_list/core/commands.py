from __future__ import annotations
from typing import Protocol

from .models import SectionCategory


class Toggleable(Protocol):
    def toggle_expansion(self, ref: SectionCategory) -> object: ...


class Command:
    def __call__(self) -> None:
        raise NotImplementedError


class ToggleSectionCommand(Command):
    def __init__(self, target: Toggleable, category: SectionCategory) -> None:
        self._target = target
        self.category = category

    def __call__(self) -> None:
        self._target.toggle_expansion(self.category)
