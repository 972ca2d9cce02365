"""RandomTypeInferenceApproach — baseline that assigns random types to identifiers."""

import random
from collections.abc import Sequence

from ti_eval.approach.domain.approach import ApproachOptions
from ti_eval.approach.domain.observer import ApproachObserver
from ti_eval.approach.domain.prediction import PredictionContext, TypePrediction
from ti_eval.approach.infrastructure.errors import ApproachConfigurationError
from ti_eval.traversal.domain.occurrence import IdentifierOccurrence
from ti_eval.traversal.infrastructure.parser import TreeSitterSourceParser
from ti_eval.traversal.infrastructure.visitor import IdentifierVisitor

DEFAULT_NAME = "Random Type Inference"
DEFAULT_AVAILABLE_TYPES: list[str] = [
    "boolean",
    "string",
    "number",
    "object",
    "array",
    "function",
    "null",
    "undefined",
]
UNKNOWN_FILE = "unknown.js"

AVAILABLE_TYPES_OPTION = "availableTypes"
PROBABILITY_OPTION = "randomTypeProbability"
SEED_OPTION = "seed"


class RandomTypeInferenceApproach:
    """Randomly assigns a type to each value-bearing identifier.

    Serves as the baseline other approaches are compared against. For every
    identifier occurrence an independent Bernoulli draw with probability
    ``randomTypeProbability`` decides whether a prediction is made; the type is
    then drawn uniformly from ``availableTypes``.

    Recognised options: ``availableTypes`` (non-empty list of labels),
    ``randomTypeProbability`` (number in [0, 1]) and ``seed`` (int or None).
    Satisfies the Approach protocol structurally.
    """

    def __init__(
        self,
        observer: ApproachObserver,
        name: str = DEFAULT_NAME,
        parser: TreeSitterSourceParser | None = None,
    ) -> None:
        self._name = name
        self._observer = observer
        self._parser = parser or TreeSitterSourceParser()
        self._available_types: list[str] = list(DEFAULT_AVAILABLE_TYPES)
        self._random_type_probability = 1.0
        self._seed: int | None = None
        self._rng = random.Random()

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return "Randomly assigns types from a predefined set to identifiers"

    @property
    def available_types(self) -> list[str]:
        return list(self._available_types)

    @property
    def random_type_probability(self) -> float:
        return self._random_type_probability

    async def initialize(self, config: ApproachOptions) -> None:
        """Apply recognised options and reset the random generator.

        Unknown keys are ignored and absent keys keep their previous values.
        Re-seeding on every call makes seeded evaluations reproducible.

        Raises:
            ApproachConfigurationError: if a recognised option has an invalid value.
        """
        if config.get(AVAILABLE_TYPES_OPTION) is not None:
            self._available_types = self._parse_available_types(
                config[AVAILABLE_TYPES_OPTION]
            )
        if config.get(PROBABILITY_OPTION) is not None:
            self._random_type_probability = self._parse_probability(
                config[PROBABILITY_OPTION]
            )
        if SEED_OPTION in config:
            self._seed = self._parse_seed(config[SEED_OPTION])

        self._rng = random.Random(self._seed)
        self._parser.ensure_ready()
        self._observer.approach_initialized(
            approach=self._name,
            options={
                AVAILABLE_TYPES_OPTION: list(self._available_types),
                PROBABILITY_OPTION: self._random_type_probability,
                SEED_OPTION: self._seed,
            },
        )

    async def predict(
        self, source_code: str, file_path: str | None = None
    ) -> list[TypePrediction]:
        """Walk source_code once and return the randomly typed predictions.

        Traversal failures are reported to the observer and never raised; the
        predictions collected before the failure are returned.
        """
        path = file_path or UNKNOWN_FILE
        predictions: list[TypePrediction] = []
        candidates = 0

        try:
            parsed = self._parser.parse(source_code)
            error_count = parsed.error_count()
            if error_count:
                self._observer.syntax_errors_detected(
                    approach=self._name, file_path=path, error_count=error_count
                )
            for occurrence in IdentifierVisitor(parsed).visit():
                candidates += 1
                if self._should_make_prediction():
                    predictions.append(self._predict_occurrence(occurrence))
        except Exception as exc:  # noqa: BLE001
            self._observer.traversal_failed(
                approach=self._name,
                file_path=path,
                reason=str(exc),
                collected=len(predictions),
            )
            return predictions

        self._observer.predictions_completed(
            approach=self._name,
            file_path=path,
            candidates=candidates,
            emitted=len(predictions),
        )
        return predictions

    async def dispose(self) -> None:
        self._parser.close()

    def _should_make_prediction(self) -> bool:
        return self._rng.random() < self._random_type_probability

    def _predict_occurrence(self, occurrence: IdentifierOccurrence) -> TypePrediction:
        return TypePrediction(
            identifier=occurrence.name,
            predicted_type=self._rng.choice(self._available_types),
            position=occurrence.position,
            context=PredictionContext(
                scope=occurrence.scope,
                syntactic_context=occurrence.syntactic_context,
                semantic_hints=occurrence.semantic_hints,
                usage_patterns=occurrence.usage_patterns,
            ),
        )

    def _parse_available_types(self, value: object) -> list[str]:
        if isinstance(value, str) or not isinstance(value, Sequence):
            raise ApproachConfigurationError(
                approach=self._name,
                option=AVAILABLE_TYPES_OPTION,
                reason="must be a list of type labels",
            )
        if not value:
            raise ApproachConfigurationError(
                approach=self._name,
                option=AVAILABLE_TYPES_OPTION,
                reason="must not be empty",
            )
        return [str(label) for label in value]

    def _parse_probability(self, value: object) -> float:
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ApproachConfigurationError(
                approach=self._name,
                option=PROBABILITY_OPTION,
                reason="must be a number",
            )
        if not 0.0 <= value <= 1.0:
            raise ApproachConfigurationError(
                approach=self._name,
                option=PROBABILITY_OPTION,
                reason=f"must be between 0 and 1, got {value}",
            )
        return float(value)

    def _parse_seed(self, value: object) -> int | None:
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int):
            raise ApproachConfigurationError(
                approach=self._name,
                option=SEED_OPTION,
                reason="must be an integer or null",
            )
        return value
