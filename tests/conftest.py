from __future__ import annotations

from collections.abc import Iterator

import pytest

from fmtgate.adapters import runner as runner_mod


@pytest.fixture(autouse=True)
def _reset_default_runner() -> Iterator[None]:
    runner_mod._default_runner.reset()
    yield
    runner_mod._default_runner.reset()
