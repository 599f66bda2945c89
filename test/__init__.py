from utest import get_registry, TestUnit

from .tests.outcome import (
  test_check_counts_assertions, test_check_halts_on_first_failure,
  test_failure_never_reverts, test_check_rejects_unknown_operator,
  test_require_records_message, test_halt_survives_except_exception,
)
from .tests.unit import (
  test_unit_fresh_outcome_per_run, test_unit_from_runnable,
  test_unit_bare_assert, test_unit_unexpected_exception,
)
from .tests.registry import (
  test_registry_groups_interleaved_contexts, test_registry_find_is_idempotent,
  test_registry_find_updates_cache, test_registry_display_width,
  test_registry_keeps_duplicates, test_registry_hooks,
  test_registry_decorator, test_registry_contexts_read_only,
)
from .tests.executor import (
  test_executor_must_pass_short_circuit, test_executor_run_all_order,
  test_executor_run_named_order, test_executor_run_named_unknown,
  test_executor_run_named_repeats, test_executor_hooks,
  test_executor_hook_exception, test_executor_empty_registry,
  test_executor_rerun,
)
from .tests.reporter import (
  test_log_reporter_must_pass_totals, test_log_reporter_not_found,
)
from .tests.api import (
  test_api_register_and_run, test_api_decorator_and_run_named,
  test_humanize, test_render_duration,
  test_cli_run, test_cli_errors, test_parse_argv,
)

test_registry = get_registry()
"""The Shared Test Registry."""

test_registry.register_unit("utest.outcome", TestUnit("check_counts_assertions", test_check_counts_assertions, must_pass=True))
test_registry.register_unit("utest.outcome", TestUnit("check_halts_on_first_failure", test_check_halts_on_first_failure, must_pass=True))
test_registry.register_unit("utest.outcome", TestUnit("failure_never_reverts", test_failure_never_reverts))
test_registry.register_unit("utest.outcome", TestUnit("check_rejects_unknown_operator", test_check_rejects_unknown_operator))
test_registry.register_unit("utest.outcome", TestUnit("require_records_message", test_require_records_message))
test_registry.register_unit("utest.outcome", TestUnit("halt_survives_except_exception", test_halt_survives_except_exception))
test_registry.register_unit("utest.unit", TestUnit("fresh_outcome_per_run", test_unit_fresh_outcome_per_run))
test_registry.register_unit("utest.unit", TestUnit("from_runnable", test_unit_from_runnable))
test_registry.register_unit("utest.unit", TestUnit("bare_assert", test_unit_bare_assert))
test_registry.register_unit("utest.unit", TestUnit("unexpected_exception", test_unit_unexpected_exception))
test_registry.register_unit("utest.registry", TestUnit("groups_interleaved_contexts", test_registry_groups_interleaved_contexts))
test_registry.register_unit("utest.registry", TestUnit("find_is_idempotent", test_registry_find_is_idempotent))
test_registry.register_unit("utest.registry", TestUnit("find_updates_cache", test_registry_find_updates_cache))
test_registry.register_unit("utest.registry", TestUnit("display_width", test_registry_display_width))
test_registry.register_unit("utest.registry", TestUnit("keeps_duplicates", test_registry_keeps_duplicates))
test_registry.register_unit("utest.registry", TestUnit("hooks", test_registry_hooks))
test_registry.register_unit("utest.registry", TestUnit("decorator", test_registry_decorator))
test_registry.register_unit("utest.registry", TestUnit("contexts_read_only", test_registry_contexts_read_only))
test_registry.register_unit("utest.executor", TestUnit("must_pass_short_circuit", test_executor_must_pass_short_circuit))
test_registry.register_unit("utest.executor", TestUnit("run_all_order", test_executor_run_all_order))
test_registry.register_unit("utest.executor", TestUnit("run_named_order", test_executor_run_named_order))
test_registry.register_unit("utest.executor", TestUnit("run_named_unknown", test_executor_run_named_unknown))
test_registry.register_unit("utest.executor", TestUnit("run_named_repeats", test_executor_run_named_repeats))
test_registry.register_unit("utest.executor", TestUnit("hooks", test_executor_hooks))
test_registry.register_unit("utest.executor", TestUnit("hook_exception", test_executor_hook_exception))
test_registry.register_unit("utest.executor", TestUnit("empty_registry", test_executor_empty_registry))
test_registry.register_unit("utest.executor", TestUnit("rerun", test_executor_rerun))
test_registry.register_unit("utest.reporter", TestUnit("log_reporter_must_pass_totals", test_log_reporter_must_pass_totals))
test_registry.register_unit("utest.reporter", TestUnit("log_reporter_not_found", test_log_reporter_not_found))
test_registry.register_unit("utest.api", TestUnit("register_and_run", test_api_register_and_run))
test_registry.register_unit("utest.api", TestUnit("decorator_and_run_named", test_api_decorator_and_run_named))
test_registry.register_unit("utest.api", TestUnit("humanize", test_humanize))
test_registry.register_unit("utest.api", TestUnit("render_duration", test_render_duration))
test_registry.register_unit("utest.api", TestUnit("cli_run", test_cli_run))
test_registry.register_unit("utest.api", TestUnit("cli_errors", test_cli_errors))
test_registry.register_unit("utest.api", TestUnit("parse_argv", test_parse_argv))
