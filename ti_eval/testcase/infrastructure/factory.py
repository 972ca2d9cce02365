"""Test-case loader factory: picks the loader for a TestCaseSourceConfig."""

from ti_eval.config.domain.test_cases import TestCaseSource, TestCaseSourceConfig
from ti_eval.testcase.domain.loader import TestCaseLoader
from ti_eval.testcase.domain.observer import TestCaseObserver
from ti_eval.testcase.infrastructure.json_loader import JsonTestCaseLoader
from ti_eval.testcase.infrastructure.samples import SampleTestCaseLoader


def create_test_case_loader(
    config: TestCaseSourceConfig, observer: TestCaseObserver
) -> TestCaseLoader:
    if config.source is TestCaseSource.SAMPLES:
        return SampleTestCaseLoader(observer=observer)
    return JsonTestCaseLoader(observer=observer)
