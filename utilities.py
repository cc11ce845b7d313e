"""
Utilities module for the Imp interpreter
Integer arithmetic helpers and binary operator factories shared by the evaluators
"""

from typing import Callable
import operator

from error_handling import DivisionByZero


# ==================== TRUNCATING INTEGER ARITHMETIC ====================

def trunc_div(x: int, y: int) -> int:
  """
  Integer division rounding toward zero

  Python's // rounds toward negative infinity, so the quotient is
  computed on magnitudes and the sign applied afterwards.

  Examples:
    trunc_div(7, 2) -> 3
    trunc_div(-7, 2) -> -3
    trunc_div(7, -2) -> -3
  """
  if y == 0:
    raise DivisionByZero()
  q = abs(x) // abs(y)
  return q if (x < 0) == (y < 0) else -q


def trunc_mod(x: int, y: int) -> int:
  """
  Remainder satisfying x == y * trunc_div(x, y) + trunc_mod(x, y)

  The result takes the sign of the dividend.

  Examples:
    trunc_mod(7, 2) -> 1
    trunc_mod(-7, 2) -> -1
    trunc_mod(7, -2) -> 1
  """
  return x - y * trunc_div(x, y)


# ==================== BINARY OPERATION FACTORIES ====================

def binary_arithmetic_op(op: Callable[[int, int], int], op_name: str) -> Callable[[int, int], int]:
  """
  Factory for binary integer operations

  Args:
    op: Function on two ints (e.g., operator.add)
    op_name: Name used when tracing

  Returns:
    Function applying op to two already evaluated operands
  """
  def arithmetic(x: int, y: int) -> int:
    return op(x, y)

  arithmetic.__name__ = op_name
  return arithmetic


def binary_comparison_op(op: Callable[[int, int], bool], op_name: str) -> Callable[[int, int], bool]:
  """Factory for binary integer comparisons"""
  def comparison(x: int, y: int) -> bool:
    return bool(op(x, y))

  comparison.__name__ = op_name
  return comparison


imp_add = binary_arithmetic_op(operator.add, "add")
imp_mul = binary_arithmetic_op(operator.mul, "mul")
imp_div = binary_arithmetic_op(trunc_div, "div")
imp_mod = binary_arithmetic_op(trunc_mod, "mod")

imp_eq = binary_comparison_op(operator.eq, "eq")
imp_lt = binary_comparison_op(operator.lt, "lt")
