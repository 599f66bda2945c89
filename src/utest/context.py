from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Iterator

from .unit import TestUnit

__all__ = [
  'Hook',
  'Context',
  'NAME_PADDING',
]

Hook = Callable[[], bool]
"""A Setup or Teardown Hook; returns False on failure"""

NAME_PADDING: int = 3
"""Room left after the longest Unit Name for the progress dots"""

@dataclass(eq=False)
class Context:
  """A Named, Ordered Group of Test Units; conventionally one per Module."""

  name: str
  """The Name of the Context; unique within a Registry"""
  units: list[TestUnit] = field(default_factory=list)
  """The Units in Registration Order"""
  on_setup: Hook | None = None
  """Runs once before the Units"""
  on_teardown: Hook | None = None
  """Runs once after the Units, regardless of their outcome"""
  display_width: int = 0
  """The longest Unit Name seen so far (plus padding); only used for alignment when reporting"""

  def add(self, unit: TestUnit) -> None:
    self.units.append(unit)
    self.display_width = max(self.display_width, len(unit.name) + NAME_PADDING)

  def __len__(self) -> int: return len(self.units)
  def __iter__(self) -> Iterator[TestUnit]: return iter(self.units)
