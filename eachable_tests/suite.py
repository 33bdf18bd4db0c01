import sys
import time
from functools import wraps
from typing import List, Dict, Any, Callable, Optional, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'


class _c:
    """color codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class TestAssertionError(AssertionError):
    """an assertion failure, as opposed to an unexpected exception."""
    pass

# --- public api ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    """raise a TestAssertionError when condition is falsy."""
    if not condition:
        raise TestAssertionError(message)


def assert_raises(exc_type: Type[BaseException], func: Callable, *args: Any,
                  match: Optional[str] = None, **kwargs: Any) -> BaseException:
    """call func and require it to raise exc_type, optionally with match in the message."""
    try:
        func(*args, **kwargs)
    except exc_type as e:
        if match is not None and match not in str(e):
            raise TestAssertionError(f"expected '{match}' in error message, got '{e}'")
        return e
    raise TestAssertionError(f"expected {exc_type.__name__} to be raised")


def run(title: str = "test run") -> bool:
    """executes all registered tests, prints a report and returns True when all passed."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []

    for test_item in _suite_state['tests']:
        description = test_item['description']
        error = None
        try:
            test_item['func']()
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        _suite_state['results'].append({'passed': error is None, 'description': description, 'error': error})

        if error is None:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {description}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {description}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    all_passed = _print_summary(start_time)

    # clear tests so several suites can run in one process
    _suite_state['tests'] = []
    return all_passed


def main(title: str) -> None:
    """run the registered tests and exit with a status code."""
    sys.exit(0 if run(title) else 1)


def _print_summary(start_time: float) -> bool:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_FACE}  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return failed_count == 0
