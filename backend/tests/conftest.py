# backend/tests/conftest.py
"""
Pytest configuration for webhook notifier backend tests.

- Ensures that the project root (backend/) is added to sys.path
  so that `import notifier.*` works correctly in tests.
- Ensures webhook environment variables start from safe values
  (webhook disabled, no URLs) so no test can reach a real endpoint.
- Resets shared singletons (executor, http client, services) between tests.
"""

import os
import sys
from concurrent.futures import Executor, Future
from pathlib import Path

import pytest


def _ensure_project_root_in_sys_path() -> None:
    # This file is located at: backend/tests/conftest.py
    # parents[1] -> backend/
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)

    if project_root_str not in sys.path:
        # Insert at the beginning so it has priority over site-packages, etc.
        sys.path.insert(0, project_root_str)


def _ensure_test_env_vars() -> None:
    """
    Set safe environment variables for tests.

    Real webhook URLs must never be used in tests.
    """
    os.environ["WEBHOOK_ENABLED"] = "false"
    os.environ["WEBHOOK_SLACK_URL"] = ""
    os.environ["WEBHOOK_DISCORD_URL"] = ""


_ensure_project_root_in_sys_path()
_ensure_test_env_vars()


class ImmediateExecutor(Executor):
    """
    submit() した関数をその場で実行する Executor。

    done callback も submit() 内で呼ばれるため、ログの検証が決定的になる。
    """

    def __init__(self) -> None:
        self.submitted = 0

    def submit(self, fn, /, *args, **kwargs):
        self.submitted += 1
        future: Future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except BaseException as exc:  # noqa: BLE001 - Future に結果として渡す
            future.set_exception(exc)
        return future


@pytest.fixture
def immediate_executor() -> ImmediateExecutor:
    return ImmediateExecutor()


@pytest.fixture(autouse=True)
def _reset_shared_state():
    from notifier.notifications import factory as notifications_factory
    from notifier.webhook import factory as webhook_factory

    yield

    notifications_factory.reset_state()
    webhook_factory.reset_state()
