"""Errors (not Exceptions)

Failures inside a test run are recorded as data; nothing here is raised.
"""
from __future__ import annotations
from typing import TypedDict

class Error(TypedDict):
  """An Error"""

  kind: str
  """The Kind of Error"""
  message: str
  """A Human Readable description about the Error that is helpful"""

  @staticmethod
  def render(error: Error) -> str: return f"{error['kind']}: {error['message']}"

  @staticmethod
  def from_exception(exc: BaseException) -> Error: return { 'kind': type(exc).__name__, 'message': str(exc) }
