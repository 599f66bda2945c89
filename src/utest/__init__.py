"""

utest: a small Unit Test Registration & Execution Engine to embed in application code.

Test Units are registered into named Contexts during an explicit registration phase (usually as a side effect of
importing the modules that declare them) and later executed, all at once or by Context name.

#### Example

```python
import utest

@utest.test("math")
def addition(t: utest.TestOutcome):
  t.check(1 + 1, '==', 2)

raise SystemExit(utest.run_all())
```

"""
from __future__ import annotations
from collections.abc import Callable, Iterable

from .errors import Error
from .outcome import TestOutcome, AssertionHalted
from .unit import TestUnit, TestBody
from .context import Context, Hook
from .registry import Registry
from .reporter import Reporter, LogReporter, RecordingReporter, humanize
from .executor import Executor, ExitCode

__all__ = [
  'Error',
  'TestOutcome', 'AssertionHalted',
  'TestUnit', 'TestBody',
  'Context', 'Hook',
  'Registry',
  'Reporter', 'LogReporter', 'RecordingReporter', 'humanize',
  'Executor', 'ExitCode',
  'get_registry', 'reset_registry',
  'register', 'test', 'set_setup', 'set_teardown',
  'run_all', 'run_named',
]

_registry: Registry | None = None

def get_registry() -> Registry:
  """The Shared Test Registry; created on first use."""
  global _registry
  if _registry is None: _registry = Registry()
  return _registry

def reset_registry(registry: Registry | None = None) -> Registry:
  """Replace the Shared Test Registry; with an empty one unless one is given."""
  global _registry
  _registry = registry if registry is not None else Registry()
  return _registry

def register(run_fn: Callable[[], bool], unit_name: str, context_name: str, must_pass: bool = False) -> bool:
  """Register a plain `() -> bool` runnable in the Shared Registry; always returns True."""
  get_registry().register_unit(context_name, TestUnit.from_runnable(run_fn, unit_name, must_pass=must_pass))
  return True

def test(context: str | None = None, *, name: str | None = None, must_pass: bool = False):
  """Register the decorated Test Body in the Shared Registry; see `Registry.test`."""
  return get_registry().test(context, name=name, must_pass=must_pass)

def set_setup(context_name: str, fn: Hook | None) -> None: get_registry().set_setup(context_name, fn)
def set_teardown(context_name: str, fn: Hook | None) -> None: get_registry().set_teardown(context_name, fn)

def run_all(reporter: Reporter | None = None) -> int:
  """Run every Context of the Shared Registry; 0 if everything succeeded, 1 otherwise."""
  return int(Executor(get_registry(), reporter if reporter is not None else LogReporter()).run_all())

def run_named(names: Iterable[str], reporter: Reporter | None = None) -> int:
  """Run the named Contexts of the Shared Registry in the given order; 0 if everything succeeded, 1 otherwise."""
  return int(Executor(get_registry(), reporter if reporter is not None else LogReporter()).run_named(names))
