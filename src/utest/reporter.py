"""

Reporters observe a Test Run; they never affect its control flow or status.

"""
from __future__ import annotations
import re
from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable
from loguru import logger

from .context import Context
from .errors import Error
from .outcome import TestOutcome
from .unit import TestUnit

__all__ = [
  'Reporter',
  'LogReporter',
  'RecordingReporter',
  'humanize',
  'render_duration',
]

@runtime_checkable
class Reporter(Protocol):
  """Receives the Lifecycle Events of a Test Run"""

  @abstractmethod
  def context_started(self, context: Context) -> None: ...
  @abstractmethod
  def unit_finished(self, context: Context, unit: TestUnit, outcome: TestOutcome, duration_ns: int) -> None: ...
  @abstractmethod
  def context_finished(self, context: Context, status: bool, duration_ns: int) -> None: ...
  @abstractmethod
  def context_not_found(self, name: str) -> None: ...

_duration_units: tuple[tuple[str, int], ...] = ( ("h", 3600 * 10**9), ("m", 60 * 10**9), ("s", 10**9), ("ms", 10**6), ("us", 10**3), ("ns", 1) )
def render_duration(ns: int) -> str:
  """Render a Duration in Nanoseconds, largest Unit first (ex. `1ms 500us`)"""
  if ns == 0: return "0ns"
  remaining, parts = abs(ns), []
  for unit, size in _duration_units:
    quot, remaining = divmod(remaining, size)
    if quot: parts.append(f"{quot}{unit}")
  return ("- " if ns < 0 else "") + " ".join(parts)

_camel_boundary = re.compile(r'(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])')
def humanize(name: str) -> str:
  """Split a `snake_case` or `CamelCase` Name into space separated words"""
  words = []
  for part in name.split('_'):
    if part == '': continue
    words.extend(w for w in _camel_boundary.split(part) if w)
  return ' '.join(words) if words else name

### Concrete Implementations ###

@dataclass
class LogReporter(Reporter):
  """Reports the Test Run through the Logger"""

  _assertions: int = field(default=0, init=False)
  _failures: int = field(default=0, init=False)

  def context_started(self, context: Context) -> None:
    self._assertions, self._failures = 0, 0
    logger.info(f"{context.name}... ({len(context)} Tests)")

  def unit_finished(self, context: Context, unit: TestUnit, outcome: TestOutcome, duration_ns: int) -> None:
    self._assertions += outcome.assertion_count
    label = humanize(unit.name).ljust(context.display_width, '.')
    if outcome.is_success():
      logger.success(f"  {label} succeeded ({render_duration(duration_ns)})")
      return
    self._failures += 1
    halted = " (must pass; skipping the remaining Tests)" if unit.must_pass else ""
    logger.warning(f"  {label} failed{halted}")
    for error in outcome.errors: logger.warning(f"    {Error.render(error)}")

  def context_finished(self, context: Context, status: bool, duration_ns: int) -> None:
    summary = f"{self._assertions} Assertions, {self._failures} Failed Tests in {render_duration(duration_ns)}"
    if status: logger.success(f"{context.name} succeeded: {summary}")
    else: logger.warning(f"{context.name} failed: {summary}")

  def context_not_found(self, name: str) -> None:
    logger.error(f"Test Context '{name}' not found")

@dataclass
class RecordingReporter(Reporter):
  """Records the Test Run's Events in order"""

  events: list[tuple] = field(default_factory=list)
  """The Events as `(kind, *details)` tuples"""
  outcomes: dict[str, list[TestOutcome]] = field(default_factory=dict)
  """The Outcomes of each Unit, keyed by `context::unit`"""

  def context_started(self, context: Context) -> None:
    self.events.append(('started', context.name))

  def unit_finished(self, context: Context, unit: TestUnit, outcome: TestOutcome, duration_ns: int) -> None:
    self.events.append(('unit', context.name, unit.name, outcome.is_success()))
    self.outcomes.setdefault(f"{context.name}::{unit.name}", []).append(outcome)

  def context_finished(self, context: Context, status: bool, duration_ns: int) -> None:
    self.events.append(('finished', context.name, status))

  def context_not_found(self, name: str) -> None:
    self.events.append(('not_found', name))

  @property
  def units_run(self) -> list[tuple[str, str]]:
    """The `(context, unit)` pairs that were run, in order"""
    return [ (e[1], e[2]) for e in self.events if e[0] == 'unit' ]
