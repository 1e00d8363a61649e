import sys
import time
from contextlib import contextmanager
from functools import wraps
from typing import List, Dict, Any, Callable, Iterator, Optional, Tuple, Type, Union

_registry: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_MARK = '(^ ω ^)'
FAIL_MARK = '(ﾉಥДಥ)ﾉ'


class _c:
    """ansi colour codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class TestAssertionError(AssertionError):
    """raised by assert_that, kept apart from errors the code under test raises."""
    pass


# --- public api ---

def test(description: str) -> Callable:
    """decorator registering a function as a test case under a readable description."""

    def decorator(func: Callable) -> Callable:
        _registry['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


@contextmanager
def raises(expected: Union[Type[BaseException], Tuple[Type[BaseException], ...]],
           match: Optional[str] = None) -> Iterator[Dict[str, Any]]:
    """
    fails the test unless the block raises `expected`. the yielded dict receives
    the caught exception under 'error'. `match` must appear in its message.
    """
    caught: Dict[str, Any] = {'error': None}
    try:
        yield caught
    except expected as e:
        caught['error'] = e
        if match is not None and match not in str(e):
            raise TestAssertionError(f"expected '{match}' in error message, got '{e}'")
        return
    raise TestAssertionError(f"expected {_name_of(expected)} to be raised")


def run(title: str = "test run") -> bool:
    """runs every registered test, prints a report and returns True when all passed."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _registry['results'] = []

    for item in _registry['tests']:
        error = None
        try:
            item['func']()
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        passed = error is None
        _registry['results'].append({'passed': passed, 'description': item['description'], 'error': error})

        if passed:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_MARK}  {item['description']}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_MARK}  {item['description']}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    all_passed = _print_summary(start_time)

    # clear tests after run to allow several suites in one process
    _registry['tests'] = []
    return all_passed


def main(title: str) -> None:
    """entry point for `python some_test.py`; exits non-zero on failure."""
    sys.exit(0 if run(title) else 1)


def _name_of(expected) -> str:
    if isinstance(expected, tuple):
        return ' or '.join(e.__name__ for e in expected)
    return expected.__name__


def _print_summary(start_time: float) -> bool:
    duration = (time.perf_counter() - start_time) * 1000
    results = _registry['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return failed_count == 0
