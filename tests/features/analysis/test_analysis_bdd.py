"""BDD tests for access analysis features."""

import pytest
from pytest_bdd import scenarios

# Load all analysis feature scenarios
scenarios(".")

pytestmark = pytest.mark.core
