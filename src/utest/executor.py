"""

Runs the Contexts of a Registry & folds their results into an exit status.

A Context runs as `setup -> units -> teardown`. Setup failing only degrades the status; a failing
`must_pass` unit skips the rest of its Context's units; teardown always runs. Contexts never stop each other.

"""
from __future__ import annotations
import enum, time
from collections.abc import Callable, Iterable
from typing import TypeVar
from dataclasses import dataclass, field
from loguru import logger

from .context import Context, Hook
from .registry import Registry
from .reporter import Reporter, LogReporter

__all__ = [
  'ExitCode',
  'Executor',
]

T = TypeVar("T")

def timeit(func: Callable[[], T]) -> tuple[int, T]:
  """Call `func`, returning the time it took (in ns) & its result."""
  start = time.monotonic_ns()
  result = func()
  return (time.monotonic_ns() - start, result)

class ExitCode(enum.IntEnum):
  SUCCESS = 0
  FAILURE = 1

  @classmethod
  def of(cls, status: bool) -> ExitCode: return cls.SUCCESS if status else cls.FAILURE

@dataclass
class Executor:
  registry: Registry
  """The Registry to pull Contexts from"""
  reporter: Reporter = field(default_factory=LogReporter)
  """Observes the Run"""

  def run_all(self) -> ExitCode:
    """Run every Context in Registration Order."""
    logger.debug(f"Running all {len(self.registry)} Test Contexts")
    status = True
    for context in self.registry.contexts:
      if not self.run_context(context): status = False
    return ExitCode.of(status)

  def run_named(self, names: Iterable[str]) -> ExitCode:
    """Run the named Contexts in the given order; repeated names run again, unknown names fail."""
    status = True
    for name in names:
      context = self.registry.find(name)
      if context is None:
        self.reporter.context_not_found(name)
        status = False
        continue
      if not self.run_context(context): status = False
    return ExitCode.of(status)

  def run_context(self, context: Context) -> bool:
    """Run a Context's setup, units & teardown; returns whether all of it succeeded."""
    self.reporter.context_started(context)
    def _run() -> bool:
      status = self._run_hook(context, 'setup', context.on_setup)
      if not self.run_units(context): status = False
      if not self._run_hook(context, 'teardown', context.on_teardown): status = False
      return status
    duration_ns, status = timeit(_run)
    self.reporter.context_finished(context, status, duration_ns)
    return status

  def run_units(self, context: Context) -> bool:
    """Run a Context's Units in order, stopping early if a `must_pass` Unit fails."""
    status = True
    for idx, unit in enumerate(context.units):
      duration_ns, outcome = timeit(unit.run)
      self.reporter.unit_finished(context, unit, outcome, duration_ns)
      if outcome.is_success(): continue
      status = False
      if unit.must_pass:
        logger.debug(f"'{context.name}::{unit.name}' must pass; skipping the remaining {len(context.units) - idx - 1} Units")
        break
    return status

  def _run_hook(self, context: Context, kind: str, hook: Hook | None) -> bool:
    if hook is None: return True
    try: ok = bool(hook())
    except Exception as e:
      logger.opt(exception=e).error(f"The {kind} of Test Context '{context.name}' raised an unexpected {type(e).__name__}")
      return False
    if not ok: logger.warning(f"The {kind} of Test Context '{context.name}' failed")
    return ok
