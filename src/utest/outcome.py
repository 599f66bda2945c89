"""

Per-Run Assertion State for a single Test Unit.

A fresh `TestOutcome` is handed to the test body on every run; the body uses it to count & evaluate assertions.
The first failed assertion halts the body, sibling units are unaffected.

"""
from __future__ import annotations
import inspect, operator
from dataclasses import dataclass, field
from typing import Any, Callable
from loguru import logger

from .errors import Error

__all__ = [
  'AssertionHalted',
  'TestOutcome',
  'OPERATORS',
]

OPERATORS: dict[str, Callable[[Any, Any], bool]] = {
  '==': operator.eq,
  '!=': operator.ne,
  '<': operator.lt,
  '<=': operator.le,
  '>': operator.gt,
  '>=': operator.ge,
  'is': operator.is_,
  'is not': operator.is_not,
  'in': lambda l, r: l in r,
  'not in': lambda l, r: l not in r,
}
"""The Comparison Operators understood by `TestOutcome.check`"""

class AssertionHalted(BaseException):
  """Halts the Test Body after a failed assertion; caught by `TestUnit.run`, never escapes a Unit.

  Not an `Exception`, so an `except Exception` inside the body can't resume it.
  """

def _caller_line(depth: int = 2) -> int | None:
  frame = inspect.currentframe()
  try:
    for _ in range(depth):
      if frame is None: return None
      frame = frame.f_back
    return frame.f_lineno if frame is not None else None
  finally: del frame

@dataclass
class TestOutcome:
  """The outcome of one execution of one Test Unit's body."""

  assertion_count: int = 0
  """The number of Assertions evaluated so far"""
  succeeded: bool = True
  """Whether the run is (still) a success; never reverts to True once False"""
  errors: list[Error] = field(default_factory=list)
  """The Diagnostics recorded during the run, in order"""

  @property
  def failed(self) -> bool: return not self.succeeded

  def is_success(self) -> bool: return self.succeeded

  def increment_assertion_count(self) -> int:
    self.assertion_count += 1
    return self.assertion_count

  def fail(self, error: Error | None = None) -> None:
    """Mark the run as failed, optionally recording a diagnostic."""
    self.succeeded = False
    if error is not None: self.errors.append(error)

  def check(self, lhs: Any, op: str, rhs: Any) -> None:
    """Assert that `lhs <op> rhs` holds; halts the test body if it doesn't.

    #### Example

    ```python
    def list_append(t: TestOutcome):
      items = []
      items.append(1)
      t.check(len(items), '==', 1)
      t.check(1, 'in', items)
    ```
    """
    if op not in OPERATORS: raise ValueError(f"Unknown comparison operator '{op}'; expected one of {', '.join(OPERATORS)}")
    index = self.increment_assertion_count()
    if OPERATORS[op](lhs, rhs): return
    self._halt(index, f"<<{lhs!r} {op} {rhs!r}>> is false", _caller_line())

  def require(self, predicate: bool, message: str | None = None) -> None:
    """Assert that an already evaluated predicate is True; halts the test body if it isn't."""
    index = self.increment_assertion_count()
    if predicate: return
    self._halt(index, message if message is not None else f"<<{predicate!r}>> is false", _caller_line())

  def _halt(self, index: int, detail: str, line: int | None) -> None:
    msg = f"#{index} @{line}: {detail}" if line is not None else f"#{index}: {detail}"
    logger.trace(f"Assertion failed: {msg}")
    self.fail({ 'kind': 'AssertionFailed', 'message': msg })
    raise AssertionHalted(msg)
