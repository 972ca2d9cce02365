"""Built-in sample test cases used by the demo and as a smoke-test dataset."""

from ti_eval.config.domain.test_cases import TestCaseSource, TestCaseSourceConfig
from ti_eval.core.position import SourcePosition
from ti_eval.testcase.domain.observer import TestCaseObserver
from ti_eval.testcase.domain.test_case import (
    GroundTruthType,
    TestCase,
    TestCaseMetadata,
)

_BASIC_DECLARATIONS = """\
const count = 42;
const message = "hello world";
const isActive = true;
const items = [1, 2, 3];
const user = { name: "John", age: 30 };

function processData(data) {
  const result = data.length;
  return result * 2;
}"""

_CLASS_WITH_METHODS = """\
class Calculator {
  constructor(initialValue) {
    this.value = initialValue;
  }

  add(num) {
    this.value += num;
    return this;
  }

  getValue() {
    return this.value;
  }
}

const calc = new Calculator(10);
const result = calc.add(5).getValue();"""

_CLOSURES = """\
function makeCounter(start) {
  let total = start;
  const increment = (step) => {
    total += step;
    return total;
  };
  return increment;
}

const counter = makeCounter(0);
const names = ["a", "b"].map(function format(item) {
  return item.toUpperCase();
});"""


def _truth(identifier: str, actual_type: str, line: int, column: int, scope: str) -> GroundTruthType:
    return GroundTruthType(
        identifier=identifier,
        actual_type=actual_type,
        position=SourcePosition(line=line, column=column),
        scope=scope,
    )


def sample_test_cases() -> list[TestCase]:
    """Return the built-in test cases.

    Ground-truth positions use the traversal convention (1-based line,
    0-based column) so a prediction at the same identifier always matches.
    """
    return [
        TestCase(
            id="sample-001",
            name="Basic variable declarations",
            source_code=_BASIC_DECLARATIONS,
            ground_truth=[
                _truth("count", "number", 1, 6, "global"),
                _truth("message", "string", 2, 6, "global"),
                _truth("isActive", "boolean", 3, 6, "global"),
                _truth("items", "number[]", 4, 6, "global"),
                _truth("user", "object", 5, 6, "global"),
                _truth("data", "unknown", 7, 21, "function:processData"),
                _truth("result", "number", 8, 8, "function:processData"),
            ],
            metadata=TestCaseMetadata(
                category="basic-types",
                difficulty="easy",
                tags=["primitives", "objects", "arrays"],
            ),
        ),
        TestCase(
            id="sample-002",
            name="Class with methods",
            source_code=_CLASS_WITH_METHODS,
            ground_truth=[
                _truth(
                    "initialValue", "unknown", 2, 14, "class:Calculator.constructor"
                ),
                _truth("num", "unknown", 6, 6, "class:Calculator.add"),
                _truth("calc", "Calculator", 16, 6, "global"),
                _truth("result", "number", 17, 6, "global"),
            ],
            metadata=TestCaseMetadata(
                category="classes",
                difficulty="medium",
                tags=["classes", "methods", "this"],
            ),
        ),
        TestCase(
            id="sample-003",
            name="Closures and callbacks",
            source_code=_CLOSURES,
            ground_truth=[
                _truth("start", "number", 1, 21, "function:makeCounter"),
                _truth("total", "number", 2, 6, "function:makeCounter"),
                _truth("increment", "function", 3, 8, "function:makeCounter"),
                _truth("step", "number", 3, 21, "function:makeCounter.arrow"),
                _truth("counter", "function", 10, 6, "global"),
                _truth("names", "string[]", 11, 6, "global"),
                _truth("item", "string", 11, 45, "global.format"),
            ],
            metadata=TestCaseMetadata(
                category="closures",
                difficulty="medium",
                tags=["arrow-functions", "callbacks", "closures"],
                description="Arrow functions and named function expressions",
            ),
        ),
    ]


class SampleTestCaseLoader:
    """Satisfies the TestCaseLoader protocol by returning the built-in samples."""

    def __init__(self, observer: TestCaseObserver) -> None:
        self._observer = observer

    def load(self, config: TestCaseSourceConfig) -> list[TestCase]:
        self._observer.loading_started(source=TestCaseSource.SAMPLES, path=None)
        test_cases = sample_test_cases()
        for test_case in test_cases:
            self._observer.test_case_loaded(
                test_case_id=test_case.id,
                ground_truth_count=len(test_case.ground_truth),
            )
        self._observer.loading_completed(
            source=TestCaseSource.SAMPLES, total_test_cases=len(test_cases)
        )
        return test_cases
