"""
State tests for the Imp interpreter
Tests name validation and the declare/get/set lifecycle
"""

import pytest
from state import (
  RESERVED_VARIABLE_NAMES,
  mk_state,
  reserved_variable_name,
  valid_variable_name,
  is_declared,
  declare,
  get_var,
  set_var,
  state_variables
)
from error_handling import VarNotDeclared, VarAlreadyExists, InvalidVarName, ReservedName


class TestNameValidation:
  """Test reserved and valid variable names"""

  @pytest.mark.parametrize("name", sorted(RESERVED_VARIABLE_NAMES))
  def test_reserved_names(self, name):
    assert reserved_variable_name(name)

  @pytest.mark.parametrize("name", ["x", "If", "result", "__result", "forks"])
  def test_not_reserved(self, name):
    assert not reserved_variable_name(name)

  @pytest.mark.parametrize("name", ["x", "_", "_tmp", "abc123", "Camel_Case_2", "if"])
  def test_valid_names(self, name):
    assert valid_variable_name(name)

  @pytest.mark.parametrize("name", ["", "2x", "x-y", "a b", "x!", "café", "été", "x١"])
  def test_invalid_names(self, name):
    assert not valid_variable_name(name)

  def test_non_string_is_invalid(self):
    assert not valid_variable_name(None)
    assert not valid_variable_name(42)


class TestDeclare:
  """Test variable declaration"""

  def test_declare_binds_zero(self, empty_state):
    st = declare("x", empty_state)
    assert get_var("x", st) == 0

  def test_declare_does_not_modify_input(self, empty_state):
    st = declare("x", empty_state)
    assert not is_declared("x", empty_state)
    assert is_declared("x", st)

  def test_declare_keeps_other_bindings(self, xy_state):
    st = declare("z", xy_state)
    assert state_variables(st) == {"x": 7, "y": 2, "z": 0}

  def test_declare_twice_fails(self, empty_state):
    st = declare("x", empty_state)
    with pytest.raises(VarAlreadyExists) as exc_info:
      declare("x", st)
    assert exc_info.value.name == "x"

  def test_redeclare_keeps_value(self, xy_state):
    with pytest.raises(VarAlreadyExists):
      declare("x", xy_state)
    assert get_var("x", xy_state) == 7

  def test_invalid_name(self, empty_state):
    with pytest.raises(InvalidVarName) as exc_info:
      declare("2x", empty_state)
    assert exc_info.value.name == "2x"

  def test_reserved_name(self, empty_state):
    with pytest.raises(ReservedName) as exc_info:
      declare("if", empty_state)
    assert exc_info.value.name == "if"

  def test_already_exists_checked_first(self):
    # A binding for an illegal name can only come from outside declare
    st = {'variables': {'while': 1, '9lives': 2}}
    with pytest.raises(VarAlreadyExists):
      declare("while", st)
    with pytest.raises(VarAlreadyExists):
      declare("9lives", st)


class TestGetSet:
  """Test reading and writing variables"""

  def test_get_undeclared(self, empty_state):
    with pytest.raises(VarNotDeclared) as exc_info:
      get_var("y", empty_state)
    assert exc_info.value.name == "y"

  def test_set_undeclared(self, empty_state):
    with pytest.raises(VarNotDeclared):
      set_var("y", 1, empty_state)

  def test_set_does_not_create_binding(self, empty_state):
    with pytest.raises(VarNotDeclared):
      set_var("y", 1, empty_state)
    assert state_variables(empty_state) == {}

  def test_set_returns_new_state(self, xy_state):
    st = set_var("x", 100, xy_state)
    assert get_var("x", st) == 100
    assert get_var("x", xy_state) == 7
    assert get_var("y", st) == 2

  def test_set_negative_and_large(self, xy_state):
    st = set_var("x", -(10 ** 30), xy_state)
    assert get_var("x", st) == -(10 ** 30)


class TestMkState:
  """Test state construction"""

  def test_empty(self):
    assert state_variables(mk_state()) == {}

  def test_initial_variables(self):
    st = mk_state({"a": 1, "b": -2})
    assert state_variables(st) == {"a": 1, "b": -2}

  def test_initial_variables_are_checked(self):
    with pytest.raises(ReservedName):
      mk_state({"print": 1})
    with pytest.raises(InvalidVarName):
      mk_state({"1a": 1})

  def test_snapshot_is_a_copy(self, xy_state):
    snapshot = state_variables(xy_state)
    snapshot["x"] = 0
    assert get_var("x", xy_state) == 7
