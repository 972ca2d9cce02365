"""Tests for YAML config loading infrastructure."""

from pathlib import Path

import pytest

from ti_eval.config.domain.test_cases import TestCaseSource
from ti_eval.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from ti_eval.config.infrastructure.yaml_loader import YamlConfigLoader
from ti_eval.evaluation.domain.scoring import ScoringPolicy
from tests.config.fake_observer import FakeConfigObserver

# Fixtures directory, absolute so tests are location-independent
# __file__ is tests/config/infrastructure/test_yaml_loader.py
# parent.parent.parent is the tests/ directory
FIXTURES = Path(__file__).parent.parent.parent / "fixtures"


def _fixture(name: str) -> Path:
    return FIXTURES / name


class TestValidConfigLoading:
    """A valid YAML config loads correctly with all fields populated."""

    def test_loads_name_and_version(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("EVAL_NAME", raising=False)
        observer = FakeConfigObserver()
        cfg = YamlConfigLoader(observer=observer).load(path=_fixture("valid_config.yaml"))

        assert cfg.name == "type-inference-baseline"
        assert cfg.version == "1"

    def test_env_var_overrides_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EVAL_NAME", "nightly")
        cfg = YamlConfigLoader(observer=FakeConfigObserver()).load(
            path=_fixture("valid_config.yaml")
        )
        assert cfg.name == "nightly"

    def test_loads_test_case_source_and_policy(self) -> None:
        cfg = YamlConfigLoader(observer=FakeConfigObserver()).load(
            path=_fixture("valid_config.yaml")
        )
        assert cfg.test_cases.source is TestCaseSource.SAMPLES
        assert cfg.scoring.policy is ScoringPolicy.STRICT

    def test_loads_approaches_in_yaml_order(self) -> None:
        cfg = YamlConfigLoader(observer=FakeConfigObserver()).load(
            path=_fixture("valid_config.yaml")
        )
        assert list(cfg.approaches) == ["Random Type Inference", "Sparse Random"]
        random_cfg = cfg.approaches["Random Type Inference"]
        assert random_cfg.type == "random"
        assert random_cfg.options["seed"] == 42
        assert random_cfg.options["availableTypes"][0] == "boolean"

    def test_emits_config_loaded(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("EVAL_NAME", raising=False)
        observer = FakeConfigObserver()
        YamlConfigLoader(observer=observer).load(path=_fixture("valid_config.yaml"))

        assert observer.loaded == [{"name": "type-inference-baseline", "version": "1"}]
        assert observer.unseeded == []


class TestDefaults:
    def test_minimal_config_uses_samples_and_lenient_policy(self) -> None:
        cfg = YamlConfigLoader(observer=FakeConfigObserver()).load(
            path=_fixture("minimal_config.yaml")
        )
        assert cfg.test_cases.source is TestCaseSource.SAMPLES
        assert cfg.test_cases.path is None
        assert cfg.scoring.policy is ScoringPolicy.LENIENT
        assert cfg.approaches["baseline"].options == {}

    def test_unseeded_random_approach_warns(self) -> None:
        observer = FakeConfigObserver()
        YamlConfigLoader(observer=observer).load(path=_fixture("minimal_config.yaml"))
        assert observer.unseeded == ["baseline"]


class TestLoadErrors:
    def test_missing_file(self) -> None:
        with pytest.raises(ConfigLoadError) as exc_info:
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                path=_fixture("does_not_exist.yaml")
            )
        assert "file not found" in str(exc_info.value)

    def test_invalid_yaml(self) -> None:
        with pytest.raises(ConfigLoadError, match="invalid YAML"):
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                path=_fixture("invalid_yaml.yaml")
            )

    def test_top_level_must_be_mapping(self) -> None:
        with pytest.raises(ConfigValidationError, match="mapping"):
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                path=_fixture("not_mapping.yaml")
            )

    def test_all_missing_env_vars_are_reported(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("TI_EVAL_TEST_MISSING_NAME", raising=False)
        monkeypatch.delenv("TI_EVAL_TEST_MISSING_VERSION", raising=False)
        observer = FakeConfigObserver()
        with pytest.raises(MissingEnvVarsError) as exc_info:
            YamlConfigLoader(observer=observer).load(path=_fixture("missing_env.yaml"))

        assert exc_info.value.missing_vars == [
            "TI_EVAL_TEST_MISSING_NAME",
            "TI_EVAL_TEST_MISSING_VERSION",
        ]
        assert observer.loaded == []


class TestValidationErrors:
    @pytest.mark.parametrize(
        "fixture",
        [
            "invalid_missing_path.yaml",
            "invalid_no_approaches.yaml",
            "invalid_policy.yaml",
        ],
    )
    def test_schema_violations_raise_validation_error(self, fixture: str) -> None:
        observer = FakeConfigObserver()
        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(observer=observer).load(path=_fixture(fixture))
        assert observer.loaded == []
