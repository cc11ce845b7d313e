"""
Error handling for the Imp interpreter
Runtime error taxonomy plus immutable error records for reporting
"""

from typing import Any, Dict, Optional


# ============================================================================
# EXCEPTION CLASSES
# ============================================================================

class ImpRuntimeError(Exception):
  """Base class for every error raised while evaluating an Imp program"""

  kind = "RuntimeError"

  def __init__(self, message: str, name: Optional[str] = None):
    self.message = message
    self.name = name
    super().__init__(message)

  def __eq__(self, other: Any) -> bool:
    if not isinstance(other, ImpRuntimeError):
      return NotImplemented
    return (self.kind, self.name) == (other.kind, other.name)

  def __hash__(self) -> int:
    return hash((self.kind, self.name))

  def __repr__(self) -> str:
    if self.name is None:
      return f"{self.kind}()"
    return f"{self.kind}({self.name!r})"


class DivisionByZero(ImpRuntimeError):
  """Division or modulo with a zero divisor"""

  kind = "DivisionByZero"

  def __init__(self):
    super().__init__("Division by zero")


class VarNotDeclared(ImpRuntimeError):
  """Read or write of a variable that was never declared"""

  kind = "VarNotDeclared"

  def __init__(self, name: str):
    super().__init__(f"Variable '{name}' is not declared", name)


class VarAlreadyExists(ImpRuntimeError):
  """Redeclaration of an existing variable"""

  kind = "VarAlreadyExists"

  def __init__(self, name: str):
    super().__init__(f"Variable '{name}' is already declared", name)


class InvalidVarName(ImpRuntimeError):
  """Declaration using a syntactically illegal identifier"""

  kind = "InvalidVarName"

  def __init__(self, name: str):
    super().__init__(f"'{name}' is not a valid variable name", name)


class ReservedName(ImpRuntimeError):
  """Declaration using a reserved word"""

  kind = "ReservedName"

  def __init__(self, name: str):
    super().__init__(f"'{name}' is a reserved name", name)


ERROR_CLASSES = {
    cls.kind: cls
    for cls in (DivisionByZero, VarNotDeclared, VarAlreadyExists, InvalidVarName, ReservedName)
}


# ============================================================================
# DATA STRUCTURES (Immutable Dictionaries)
# ============================================================================

HINTS = {
    "DivisionByZero": "check that the divisor of '/' or '%' cannot be zero",
    "VarNotDeclared": "declare the variable before reading or assigning it",
    "VarAlreadyExists": "a variable can only be declared once",
    "InvalidVarName": "names start with a letter or '_' and contain only letters, digits or '_'",
    "ReservedName": "reserved words cannot be used as variable names",
}


def make_eval_error(kind: str, name: Optional[str] = None, statement: Optional[str] = None) -> Dict:
  """Create an immutable evaluation error record"""
  if kind not in ERROR_CLASSES:
    raise ValueError(f"Unknown error kind: {kind}")
  if kind == "DivisionByZero":
    message = ERROR_CLASSES[kind]().message
  else:
    message = ERROR_CLASSES[kind](name).message
  return {
      'kind': kind,
      'message': message,
      'name': name,
      'statement': statement,
      'hint': HINTS[kind]
  }


def error_to_dict(exc: ImpRuntimeError, statement: Optional[Any] = None) -> Dict:
  """Convert a raised runtime error into an error record"""
  return make_eval_error(
      exc.kind,
      name=exc.name,
      statement=str(statement) if statement is not None else None
  )


def format_eval_error(error: Dict) -> str:
  """Format an error record as a multi-line message"""
  error_msg = f"Runtime error: {error['message']}\n"

  if error['name'] is not None:
    error_msg += f"  Variable: {error['name']}\n"

  if error['statement']:
    error_msg += f"  In: {error['statement']}\n"

  if error['hint']:
    error_msg += f"  Hint: {error['hint']}\n"

  return error_msg
