from __future__ import annotations
from dataclasses import dataclass, KW_ONLY
from typing import Callable
from loguru import logger

from .errors import Error
from .outcome import TestOutcome, AssertionHalted

__all__ = [
  'TestBody',
  'TestUnit',
]

TestBody = Callable[[TestOutcome], None]
"""A Test Body; evaluates its assertions against the Outcome it is handed."""

@dataclass(frozen=True)
class TestUnit:
  """A single Test: a name, a runnable body & the must pass policy."""

  name: str
  """The Name of the Test"""
  body: TestBody
  """The Test Body"""
  _: KW_ONLY
  must_pass: bool = False
  """If the Unit fails, skip the remaining Units in its Context"""

  @classmethod
  def from_runnable(cls, run_fn: Callable[[], bool], name: str, must_pass: bool = False) -> TestUnit:
    """Wrap a plain `() -> bool` runnable as a Test Unit."""
    def _body(outcome: TestOutcome) -> None:
      if not run_fn(): outcome.fail({ 'kind': 'UnitFailed', 'message': f"{name} returned False" })
    return cls(name, _body, must_pass=must_pass)

  def run(self) -> TestOutcome:
    """Execute the Test Body against a fresh Outcome."""
    outcome = TestOutcome()
    try: self.body(outcome)
    except AssertionHalted: pass
    except AssertionError as e:
      # A bare `assert` in the body
      outcome.increment_assertion_count()
      outcome.fail({ 'kind': 'AssertionFailed', 'message': f"#{outcome.assertion_count}: {e}" if str(e) else f"#{outcome.assertion_count}: assertion is false" })
    except Exception as e:
      logger.opt(exception=e).error(f"Test Unit '{self.name}' raised an unexpected {type(e).__name__}")
      outcome.fail(Error.from_exception(e))
    return outcome

  def __call__(self) -> bool: return self.run().is_success()
