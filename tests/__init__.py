from tests.tools import find_file
from tests.tools import run_tests
