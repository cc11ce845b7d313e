"""
Imp Interpreter - Pure Functional Style
Evaluates arithmetic expressions, boolean expressions and statements
The state is threaded through evaluation and never modified in place
"""

from typing import Any, Dict, Optional, Tuple

from language import (
  Num, Var, Add, Mul, Div, Mod,
  TT, Eq, Lt, Conj, Not,
  Skip, Declare, Ass, Seq, ITE, While,
  AExpr, BExpr, Stmnt
)
from state import mk_state, declare, get_var, set_var, state_variables
from error_handling import ImpRuntimeError, error_to_dict, format_eval_error
from utilities import imp_add, imp_mul, imp_div, imp_mod, imp_eq, imp_lt


BINARY_ARITH_OPERATORS = {
    Add: imp_add,
    Mul: imp_mul,
    Div: imp_div,
    Mod: imp_mod,
}

COMPARISON_OPERATORS = {
    Eq: imp_eq,
    Lt: imp_lt,
}


def _trace(kind: str, node: Any) -> None:
  print(f"Evaluating {kind}: {node}")


# ============================================================================
# ARITHMETIC EVALUATION
# ============================================================================

def arith_eval(a: AExpr, st: Dict, debug: bool = False) -> int:
  """
  Evaluate an arithmetic expression in state st.
  Operands are evaluated left to right; the first error raised propagates.
  """
  if debug:
    _trace(type(a).__name__, a)

  if isinstance(a, Num):
    return a.value
  elif isinstance(a, Var):
    return get_var(a.name, st)
  elif isinstance(a, (Add, Mul, Div, Mod)):
    x = arith_eval(a.left, st, debug)
    y = arith_eval(a.right, st, debug)
    # Div and Mod check for a zero divisor only after both sides evaluated
    return BINARY_ARITH_OPERATORS[type(a)](x, y)
  else:
    raise TypeError(f"Not an arithmetic expression: {a!r}")


# ============================================================================
# BOOLEAN EVALUATION
# ============================================================================

def bool_eval(b: BExpr, st: Dict, debug: bool = False) -> bool:
  """
  Evaluate a boolean expression in state st.
  Conj is eager: the right side is evaluated even when the left is false.
  """
  if debug:
    _trace(type(b).__name__, b)

  if isinstance(b, TT):
    return True
  elif isinstance(b, (Eq, Lt)):
    x = arith_eval(b.left, st, debug)
    y = arith_eval(b.right, st, debug)
    return COMPARISON_OPERATORS[type(b)](x, y)
  elif isinstance(b, Conj):
    left = bool_eval(b.left, st, debug)
    right = bool_eval(b.right, st, debug)
    return left and right
  elif isinstance(b, Not):
    return not bool_eval(b.expr, st, debug)
  else:
    raise TypeError(f"Not a boolean expression: {b!r}")


# ============================================================================
# STATEMENT EVALUATION
# ============================================================================

def stmnt_eval(s: Stmnt, st: Dict, debug: bool = False) -> Dict:
  """
  Evaluate a statement in state st and return the resulting state.
  On error nothing is returned, so intermediate states are simply dropped.
  """
  if debug:
    _trace(type(s).__name__, s)

  if isinstance(s, Skip):
    return st
  elif isinstance(s, Declare):
    new_st = declare(s.name, st)
  elif isinstance(s, Ass):
    value = arith_eval(s.expr, st, debug)
    new_st = set_var(s.name, value, st)
  elif isinstance(s, Seq):
    return stmnt_eval(s.second, stmnt_eval(s.first, st, debug), debug)
  elif isinstance(s, ITE):
    if bool_eval(s.cond, st, debug):
      return stmnt_eval(s.then, st, debug)
    return stmnt_eval(s.orelse, st, debug)
  elif isinstance(s, While):
    return eval_while(s, st, debug)
  else:
    raise TypeError(f"Not a statement: {s!r}")

  if debug:
    print(f"  variables: {state_variables(new_st)}")
  return new_st


def eval_while(s: While, st: Dict, debug: bool = False) -> Dict:
  """
  Run a while loop until its condition is false.

  Equivalent to evaluating the body and then the same loop again in the
  updated state, but iterates instead of recursing so long running loops
  do not exhaust the Python stack. There is no iteration limit.
  """
  while bool_eval(s.cond, st, debug):
    st = stmnt_eval(s.body, st, debug)
  return st


# ============================================================================
# PROGRAM EVALUATION
# ============================================================================

def eval_program(s: Stmnt, st: Optional[Dict] = None, debug: bool = False) -> Tuple[Dict, Dict[str, int]]:
  """
  Evaluate a whole program, starting from the empty state by default.
  Returns (final_state, variables of the final state)
  """
  if st is None:
    st = mk_state()
  final_st = stmnt_eval(s, st, debug)
  return final_st, state_variables(final_st)


def describe_error(exc: ImpRuntimeError, s: Optional[Stmnt] = None) -> str:
  """Format a runtime error raised while evaluating s"""
  return format_eval_error(error_to_dict(exc, s))


# ============================================================================
# FACTORY FUNCTIONS
# ============================================================================

def create_interpreter(debug: bool = False):
  """Factory function returning an interpreter with debug bound"""
  def run(s, st=None):
    final_st, _ = eval_program(s, st, debug)
    return final_st

  return type('Interpreter', (), {
      'debug': debug,
      'arith': lambda self, a, st: arith_eval(a, st, debug),
      'boolean': lambda self, b, st: bool_eval(b, st, debug),
      'run': lambda self, s, st=None: run(s, st),
      'describe': lambda self, exc, s=None: describe_error(exc, s)
  })()


def create_debug_interpreter():
  """Factory function returning a debug interpreter"""
  return create_interpreter(debug=True)
