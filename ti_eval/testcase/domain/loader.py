"""TestCaseLoader Protocol — structural interface for supplying test cases."""

from typing import Protocol

from ti_eval.config.domain.test_cases import TestCaseSourceConfig
from ti_eval.testcase.domain.test_case import TestCase


class TestCaseLoader(Protocol):
    """Loads a finite list of TestCase objects from the source described by config."""

    __test__ = False

    def load(self, config: TestCaseSourceConfig) -> list[TestCase]: ...
