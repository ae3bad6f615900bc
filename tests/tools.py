"""
Test Harness

Lets the test modules be run directly, outside of pytest, reporting the pass or fail
status of each test in the module.

Usage:
    To use this module, define your test functions in the calling module with names starting with 'test_'.
    Then call `run_tests()` to execute them and display the results.

Example:
    # In your test module
    def test_example():
        assert True

    if __name__ == "__main__":
        run_tests()
"""

import os
from typing import Optional


def find_file(path: str) -> Optional[str]:
    """Find a file in the test data folder, wherever the tests are run from."""
    here = os.path.dirname(os.path.abspath(__file__))
    candidate = os.path.join(here, "data", path)
    if os.path.exists(candidate):
        return candidate
    return None


def run_tests():  # pragma: no cover
    """
    Discover and run test functions defined in the calling module. Test functions should be named starting with 'test_'.

    Tests which need pytest fixtures are skipped, run those with pytest.

    Returns:
        None
    """
    import contextlib
    import inspect
    import shutil
    import time
    import traceback
    from io import StringIO

    display_width = shutil.get_terminal_size((80, 20))[0]

    # Get the calling module
    caller_module = inspect.getmodule(inspect.currentframe().f_back)
    test_methods = []
    for name, obj in inspect.getmembers(caller_module):
        if inspect.isfunction(obj) and name.startswith("test_"):
            if inspect.signature(obj).parameters:
                continue
            test_methods.append(obj)

    print(f"\n\033[38;2;139;233;253m\033[3mRUNNING SET OF {len(test_methods)} TESTS\033[0m\n")
    start_suite = time.monotonic_ns()

    passed = 0
    failed = 0

    for index, method in enumerate(test_methods):
        start_time = time.monotonic_ns()
        test_name = f"\033[38;2;255;184;108m{(index + 1):04}\033[0m \033[38;2;189;147;249m{str(method.__name__)}\033[0m"
        print(test_name.ljust(display_width - 20), end="", flush=True)
        error = None
        try:
            with contextlib.redirect_stdout(StringIO()):
                method()
        except Exception as err:
            error = err
        if error is None:
            passed += 1
            status = "\033[38;2;26;185;67m pass"
        else:
            failed += 1
            status = "\033[38;2;255;121;198m fail"
        time_taken = int((time.monotonic_ns() - start_time) / 1e6)
        print(f"\033[0;32m{str(time_taken).rjust(8)}ms {status}\033[0m")
        if error:
            file_name, line_number, _, code_line = traceback.extract_tb(error.__traceback__)[-1]
            print(
                f"  \033[38;2;255;121;198m{error.__class__.__name__}\033[0m {error}\n"
                f"  \033[38;2;241;250;140m{os.path.basename(file_name)}\033[0m:{line_number}"
                f" \033[38;2;98;114;164m{code_line}\033[0m"
            )

    print(
        f"\n\033[38;2;139;233;253m\033[3mCOMPLETE\033[0m ({((time.monotonic_ns() - start_suite) / 1e9):.2f} seconds)\n"
        f"  \033[38;2;26;185;67m{passed} passed ({(passed * 100) // max(passed + failed, 1)}%)\033[0m\n"
        f"  \033[38;2;255;121;198m{failed} failed\033[0m"
    )
