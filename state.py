"""
Imp Program State - Pure Functional Style
The state maps declared variable names to integer values
Every operation returns a new state; the state passed in is never modified
"""

from typing import Dict, Optional
from error_handling import (
  VarNotDeclared,
  VarAlreadyExists,
  InvalidVarName,
  ReservedName
)


# Reserved words can never be declared as variables
RESERVED_VARIABLE_NAMES = frozenset({
    'if', 'then', 'else', 'while', 'declare', 'print', 'random', 'fork', '__result__'
})


# ============================================================================
# DATA STRUCTURES (Immutable Dictionaries)
# ============================================================================

def mk_state(variables: Optional[Dict[str, int]] = None) -> Dict:
  """
  Create a state with nothing declared

  Initial variables, if given, go through declare and set_var so the
  usual name checks apply.
  """
  st = {'variables': {}}
  for name, value in (variables or {}).items():
    st = set_var(name, value, declare(name, st))
  return st


# ============================================================================
# NAME VALIDATION
# ============================================================================

def reserved_variable_name(name: str) -> bool:
  """Check if name is one of the reserved words"""
  return name in RESERVED_VARIABLE_NAMES


def _is_ascii_letter(c: str) -> bool:
  return c.isascii() and c.isalpha()


def valid_variable_name(name: str) -> bool:
  """
  Check if name is a syntactically legal identifier

  Valid names are non-empty, start with an ASCII letter or underscore,
  and contain only ASCII letters, digits or underscores.
  """
  if not isinstance(name, str) or not name:
    return False
  if not (_is_ascii_letter(name[0]) or name[0] == '_'):
    return False
  return all(_is_ascii_letter(c) or (c.isascii() and c.isdigit()) or c == '_' for c in name)


# ============================================================================
# STATE OPERATIONS (Pure Functions)
# ============================================================================

def is_declared(name: str, st: Dict) -> bool:
  return name in st['variables']


def declare(name: str, st: Dict) -> Dict:
  """
  Return new state with name declared and bound to 0

  Checks run in order: already declared, invalid name, reserved name.
  """
  if name in st['variables']:
    raise VarAlreadyExists(name)
  if not valid_variable_name(name):
    raise InvalidVarName(name)
  if reserved_variable_name(name):
    raise ReservedName(name)

  return {
      **st,
      'variables': {**st['variables'], name: 0}
  }


def get_var(name: str, st: Dict) -> int:
  """Look up the current value of a declared variable"""
  if name not in st['variables']:
    raise VarNotDeclared(name)
  return st['variables'][name]


def set_var(name: str, value: int, st: Dict) -> Dict:
  """Return new state with a declared variable bound to value"""
  if name not in st['variables']:
    raise VarNotDeclared(name)

  return {
      **st,
      'variables': {**st['variables'], name: value}
  }


def state_variables(st: Dict) -> Dict[str, int]:
  """Snapshot of all declared variables"""
  return dict(st['variables'])
