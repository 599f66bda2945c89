"""

The Test Registry: Contexts of Test Units kept in the order they were first seen.

Lookups go through a single entry cache of the last touched Context; consecutive registrations
nearly always target the same Context so most lookups never scan.

"""
from __future__ import annotations
import sys, weakref
from dataclasses import dataclass, field
from typing import Callable, Iterator, TypeVar
from loguru import logger

from .context import Context, Hook
from .outcome import TestOutcome
from .unit import TestUnit

__all__ = [
  'Registry',
]

F = TypeVar('F', bound=Callable[[TestOutcome], None])

@dataclass
class Registry:
  _contexts: list[Context] = field(default_factory=list, init=False, repr=False)
  _last_touched: weakref.ref[Context] | None = field(default=None, init=False, repr=False)

  @property
  def last_touched(self) -> Context | None:
    """The most recently looked up or inserted Context"""
    return self._last_touched() if self._last_touched is not None else None

  def _touch(self, context: Context | None) -> Context | None:
    self._last_touched = weakref.ref(context) if context is not None else None
    return context

  @property
  def contexts(self) -> tuple[Context, ...]:
    """The Registered Contexts, in first seen order"""
    return tuple(self._contexts)

  @property
  def names(self) -> tuple[str, ...]:
    """The Registered Context Names."""
    return tuple(c.name for c in self._contexts)

  def __len__(self) -> int: return len(self._contexts)
  def __iter__(self) -> Iterator[Context]: return iter(self._contexts)
  def __contains__(self, name: str) -> bool: return any(c.name == name for c in self._contexts)

  def find(self, name: str) -> Context | None:
    """Find a Context by its exact Name."""
    cached = self.last_touched
    if cached is not None and cached.name == name: return cached
    logger.trace(f"Context cache miss for '{name}'; scanning {len(self._contexts)} Contexts")
    for context in self._contexts:
      if context.name == name: return self._touch(context)
    return self._touch(None)

  def find_or_create(self, name: str) -> Context:
    """Find a Context by its exact Name, appending a new empty Context if there is none."""
    context = self.find(name)
    if context is not None: return context
    logger.debug(f"Creating Test Context '{name}'")
    context = Context(name)
    self._contexts.append(context)
    return self._touch(context)

  def register_unit(self, context_name: str, unit: TestUnit) -> None:
    """Register a Test Unit in a Context; duplicate Unit Names are kept & both run."""
    self.find_or_create(context_name).add(unit)
    logger.trace(f"Registered Test Unit '{context_name}::{unit.name}' (must_pass={unit.must_pass})")

  def set_setup(self, context_name: str, fn: Hook | None) -> None:
    """Set the Hook run once before a Context's Units."""
    self.find_or_create(context_name).on_setup = fn

  def set_teardown(self, context_name: str, fn: Hook | None) -> None:
    """Set the Hook run once after a Context's Units."""
    self.find_or_create(context_name).on_teardown = fn

  def test(self, context: str | None = None, *, name: str | None = None, must_pass: bool = False) -> Callable[[F], F]:
    """Register the decorated Test Body.

    The Unit Name defaults to the function name & the Context defaults to the defining module.

    #### Example

    ```python
    registry = Registry()

    @registry.test(must_pass=True)
    def parser_accepts_empty_input(t: TestOutcome):
      t.check(parse(""), '==', [])
    ```
    """
    def _decorator(fn: F) -> F:
      context_name = context if context is not None else _module_of(fn)
      self.register_unit(context_name, TestUnit(name if name is not None else fn.__name__, fn, must_pass=must_pass))
      return fn
    return _decorator

def _module_of(fn: Callable) -> str:
  module = getattr(fn, '__module__', None)
  if module is None or module not in sys.modules: return '__main__'
  return module
