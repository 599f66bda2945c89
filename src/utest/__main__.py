from __future__ import annotations
import os, sys, importlib
from typing import TypedDict
import orjson
from loguru import logger

from . import get_registry
from .executor import Executor
from .registry import Registry
from .reporter import LogReporter, humanize

class CLIError(RuntimeError): pass

class CLI_KWARGS(TypedDict):
  log: str
  """The Log Level"""
  modules: str
  """Comma separated Modules to import before running; importing them registers their Tests"""

def load_modules(modules: str) -> tuple[str, ...]:
  """Import the Modules that register Tests."""
  loaded = []
  for name in (m.strip() for m in modules.split(',')):
    if name == '': continue
    logger.debug(f"Importing Test Module '{name}'")
    try: importlib.import_module(name)
    except ModuleNotFoundError as e:
      if e.name != name: raise
      raise CLIError(f"Test Module '{name}' could not be found") from e
    loaded.append(name)
  return tuple(loaded)

def cmd_list(registry: Registry) -> int:
  if len(registry) < 1: raise CLIError("No Test Contexts Registered")
  for context in registry:
    test_names = [ humanize(u.name) for u in context ]
    logger.info(f"Test Context '{context.name}' has {len(test_names)} Tests Registered: {', '.join(test_names)}")
  logger.debug(f"Test Plan...\n{orjson.dumps({ c.name: [ { 'name': u.name, 'must_pass': u.must_pass } for u in c ] for c in registry }, option=orjson.OPT_INDENT_2).decode()}")
  return 0

def cmd_run_tests(
  registry: Registry,
  contexts: list[str] | None = None,
) -> int:
  logger.info("Running Test Suite")
  if len(registry) < 1: raise CLIError("No Test Contexts Registered")
  executor = Executor(registry, LogReporter())
  rc = executor.run_all() if not contexts else executor.run_named(contexts)
  if rc: logger.warning("!!! TEST SUITE COMPLETED WITH FAILURES !!!")
  else: logger.success("Tests Completed Successfully")
  return int(rc)

def main(args: tuple[str, ...], kwargs: CLI_KWARGS, registry: Registry | None = None) -> int:
  logger.trace(f"Starting main function with arguments: {args}\nKeywords: {kwargs}")
  if len(args) < 1: raise CLIError("No subcommand provided")
  load_modules(kwargs['modules'])
  if registry is None: registry = get_registry()
  subcmd = args[0]
  if subcmd == 'run': return cmd_run_tests(registry, contexts=list(args[1:]) if len(args) > 1 else None)
  elif subcmd == 'list': return cmd_list(registry)
  else: raise CLIError(f"Unknown subcommand '{subcmd}'")

def setup_logging(log_level: str = os.environ.get('LOG_LEVEL', 'INFO')):
  logger.remove()
  logger.add(sys.stderr, level=log_level, enqueue=True, colorize=True)
  logger.trace(f'Log level set to {log_level}')

def finalize_logging():
  logger.complete()

def parse_argv(argv: list[str], env: dict[str, str]) -> tuple[tuple[str, ...], CLI_KWARGS]:
  args = []
  kwargs = {
    "log": env.get('LOG_LEVEL', 'INFO'),
    "modules": env.get('UTEST_MODULES', ''),
  }
  for idx, arg in enumerate(argv):
    if arg == '--':
      logger.trace(f"Found end of arguments at index {idx}")
      args.extend(argv[idx+1:])
      break
    elif arg.startswith('--'):
      logger.trace(f"Found keyword argument: {arg}")
      key, sep, value = arg[2:].partition('=')
      if key not in kwargs: raise CLIError(f"Unknown option '--{key}'")
      if sep == '': raise CLIError(f"Option '--{key}' requires a value; use '--{key}=...'")
      kwargs[key] = value
    else:
      logger.trace(f"Found positional argument: {arg}")
      args.append(arg)
  return tuple(args), kwargs

def cli(argv: list[str], env: dict[str, str], registry: Registry | None = None) -> int:
  """Run the Command Line; returns the process exit code."""
  setup_logging(env.get('LOG_LEVEL', 'INFO'))
  _rc = 255
  try:
    args, kwargs = parse_argv(argv, env)
    logger.trace(f"Arguments: {args}\nKeywords: {kwargs}")
    setup_logging(kwargs['log']) # Reconfigure logging
    _rc = main(args, kwargs, registry)
  except CLIError as e:
    logger.error(str(e))
    _rc = 2
  except Exception:
    logger.opt(exception=True).critical('Unhandled exception')
    _rc = 3
  finally:
    finalize_logging()
    sys.stdout.flush()
    sys.stderr.flush()
  return _rc

if __name__ == '__main__':
  sys.exit(cli(sys.argv[1:], dict(os.environ)))
