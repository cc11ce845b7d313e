"""
Imp Language - Expression and Statement Trees
Immutable tree nodes for arithmetic expressions, boolean expressions and statements
Trees are produced by a front end and only ever read by the interpreter
"""

from typing import Union
from dataclasses import dataclass
from functools import reduce


# ============================================================================
# ARITHMETIC EXPRESSIONS
# ============================================================================

@dataclass(frozen=True)
class Num:
  """Integer literal"""
  value: int

  def __str__(self) -> str:
    return str(self.value)


@dataclass(frozen=True)
class Var:
  """Variable reference"""
  name: str

  def __str__(self) -> str:
    return self.name


@dataclass(frozen=True)
class Add:
  left: 'AExpr'
  right: 'AExpr'

  def __str__(self) -> str:
    return f"({self.left} + {self.right})"


@dataclass(frozen=True)
class Mul:
  left: 'AExpr'
  right: 'AExpr'

  def __str__(self) -> str:
    return f"({self.left} * {self.right})"


@dataclass(frozen=True)
class Div:
  """Integer division, truncating toward zero"""
  left: 'AExpr'
  right: 'AExpr'

  def __str__(self) -> str:
    return f"({self.left} / {self.right})"


@dataclass(frozen=True)
class Mod:
  """Remainder consistent with truncating division"""
  left: 'AExpr'
  right: 'AExpr'

  def __str__(self) -> str:
    return f"({self.left} % {self.right})"


AExpr = Union[Num, Var, Add, Mul, Div, Mod]


# ============================================================================
# BOOLEAN EXPRESSIONS
# ============================================================================

@dataclass(frozen=True)
class TT:
  """Boolean literal true"""

  def __str__(self) -> str:
    return "true"


@dataclass(frozen=True)
class Eq:
  left: AExpr
  right: AExpr

  def __str__(self) -> str:
    return f"({self.left} = {self.right})"


@dataclass(frozen=True)
class Lt:
  left: AExpr
  right: AExpr

  def __str__(self) -> str:
    return f"({self.left} < {self.right})"


@dataclass(frozen=True)
class Conj:
  """Conjunction; both sides are always evaluated"""
  left: 'BExpr'
  right: 'BExpr'

  def __str__(self) -> str:
    return f"({self.left} /\\ {self.right})"


@dataclass(frozen=True)
class Not:
  expr: 'BExpr'

  def __str__(self) -> str:
    return f"~{self.expr}"


BExpr = Union[TT, Eq, Lt, Conj, Not]


# ============================================================================
# STATEMENTS
# ============================================================================

@dataclass(frozen=True)
class Skip:

  def __str__(self) -> str:
    return "skip"


@dataclass(frozen=True)
class Declare:
  name: str

  def __str__(self) -> str:
    return f"declare {self.name}"


@dataclass(frozen=True)
class Ass:
  """Assignment to a previously declared variable"""
  name: str
  expr: AExpr

  def __str__(self) -> str:
    return f"{self.name} := {self.expr}"


@dataclass(frozen=True)
class Seq:
  first: 'Stmnt'
  second: 'Stmnt'

  def __str__(self) -> str:
    return f"{self.first}; {self.second}"


@dataclass(frozen=True)
class ITE:
  """If-then-else"""
  cond: BExpr
  then: 'Stmnt'
  orelse: 'Stmnt'

  def __str__(self) -> str:
    return f"if {self.cond} then {{ {self.then} }} else {{ {self.orelse} }}"


@dataclass(frozen=True)
class While:
  cond: BExpr
  body: 'Stmnt'

  def __str__(self) -> str:
    return f"while {self.cond} {{ {self.body} }}"


Stmnt = Union[Skip, Declare, Ass, Seq, ITE, While]


# ============================================================================
# DERIVED FORMS
# ============================================================================
# Sugar expressed with the core nodes only, so the interpreter needs no
# extra cases. Derived boolean operators stay eager like Conj.

def neg(a: AExpr) -> AExpr:
  """Arithmetic negation"""
  return Mul(Num(-1), a)


def sub(a: AExpr, b: AExpr) -> AExpr:
  """Subtraction"""
  return Add(a, neg(b))


def ff() -> BExpr:
  """Boolean literal false"""
  return Not(TT())


def disj(a: BExpr, b: BExpr) -> BExpr:
  """Disjunction (De Morgan over Conj)"""
  return Not(Conj(Not(a), Not(b)))


def implies(a: BExpr, b: BExpr) -> BExpr:
  return disj(Not(a), b)


def neq(a: AExpr, b: AExpr) -> BExpr:
  return Not(Eq(a, b))


def le(a: AExpr, b: AExpr) -> BExpr:
  return disj(Lt(a, b), Eq(a, b))


def ge(a: AExpr, b: AExpr) -> BExpr:
  return Not(Lt(a, b))


def gt(a: AExpr, b: AExpr) -> BExpr:
  return Not(le(a, b))


def seq_all(*stmnts: Stmnt) -> Stmnt:
  """Chain statements into a right-nested Seq; no statements gives Skip"""
  if not stmnts:
    return Skip()
  return reduce(lambda rest, s: Seq(s, rest), reversed(stmnts[:-1]), stmnts[-1])
