"""
Test configuration for Imp interpreter tests
"""

import pytest
import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from state import mk_state, declare, set_var


@pytest.fixture
def empty_state():
  """Provide a state with nothing declared"""
  return mk_state()


@pytest.fixture
def xy_state():
  """Provide a state with x = 7 and y = 2"""
  st = declare("y", declare("x", mk_state()))
  return set_var("y", 2, set_var("x", 7, st))
