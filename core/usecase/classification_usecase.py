from typing import Callable, Dict, List, Mapping, Optional

from core.entities.classification import ClassificationUpdate
from core.entities.classifier_config import ClassifierConfig
from core.entities.pose_entity import Frame
from core.entities.session_entity import SessionTotals
from core.exceptions import ClassifierRegistrationError
from core.interface import ExerciseClassifierInterface
from utilities.monitoring import MonitoringFactory

logger = MonitoringFactory.get_logger("usecase.classification")


class ClassificationEngine:
    """
    Routes frames to the classifier of the selected exercise and keeps the
    session totals.

    The engine owns one classifier instance per exercise identifier and is the
    only writer of the session totals. Readers get copies.
    """

    def __init__(
        self,
        classifiers: Optional[Mapping[str, ExerciseClassifierInterface]] = None,
        exercise: Optional[str] = None,
    ):
        """
        Initialize the classification engine.

        Args:
            classifiers: Exercise identifier to classifier bindings
            exercise: Identifier selected at start, if any
        """
        self._classifiers: Dict[str, ExerciseClassifierInterface] = {}
        self._totals = SessionTotals()
        self._exercise: Optional[str] = None

        for exercise_id, classifier in (classifiers or {}).items():
            self.register(exercise_id, classifier)

        if exercise is not None:
            self.select_exercise(exercise)

    @classmethod
    def from_catalog(
        cls,
        catalog: Mapping[str, ClassifierConfig],
        factory: Callable[[ClassifierConfig], ExerciseClassifierInterface],
        exercise: Optional[str] = None,
    ) -> "ClassificationEngine":
        """
        Build an engine with a fresh classifier for every catalog entry.

        Args:
            catalog: Exercise identifier to classifier configuration
            factory: Callable creating a classifier from its configuration
            exercise: Identifier selected at start, if any
        """
        classifiers = {exercise_id: factory(config) for exercise_id, config in catalog.items()}
        return cls(classifiers, exercise=exercise)

    @property
    def exercise(self) -> Optional[str]:
        return self._exercise

    @property
    def exercises(self) -> List[str]:
        return sorted(self._classifiers)

    @property
    def totals(self) -> SessionTotals:
        return self._totals.copy()

    def classifier(self, exercise_id: str) -> Optional[ExerciseClassifierInterface]:
        return self._classifiers.get(exercise_id)

    def register(self, exercise_id: str, classifier: ExerciseClassifierInterface) -> None:
        """
        Bind a classifier to an exercise identifier.

        Raises:
            ClassifierRegistrationError: If the identifier is already bound or the
                instance already serves another identifier
        """
        if exercise_id in self._classifiers:
            raise ClassifierRegistrationError(f"Exercise '{exercise_id}' is already registered")
        for bound_id, bound in self._classifiers.items():
            if bound is classifier:
                raise ClassifierRegistrationError(
                    f"Classifier for '{exercise_id}' is already bound to '{bound_id}'"
                )
        self._classifiers[exercise_id] = classifier
        logger.debug(f"Registered {type(classifier).__name__} for '{exercise_id}'")

    def select_exercise(self, exercise_id: str) -> None:
        """Switch the active exercise and reset the whole session."""
        if exercise_id not in self._classifiers:
            logger.warning(f"No classifier registered for '{exercise_id}', frames will be ignored")
        self._exercise = exercise_id
        self.reset()
        logger.info(f"Selected exercise '{exercise_id}'")

    def process(self, frame: Frame) -> SessionTotals:
        """
        Classify one frame with the active classifier and merge the result.

        Returns:
            Copy of the session totals after the merge. Unchanged when no
            classifier is bound to the active identifier.
        """
        classifier = self._classifiers.get(self._exercise) if self._exercise is not None else None
        if classifier is None:
            return self.totals

        self._merge(classifier.update(frame))
        return self.totals

    def reset(self) -> None:
        """Zero the totals and reset every registered classifier."""
        self._totals = SessionTotals()
        for classifier in self._classifiers.values():
            classifier.reset()
        logger.info("Session reset")

    def _merge(self, update: ClassificationUpdate) -> None:
        # Fields a classifier leaves empty keep their displayed value
        if update.rep_increment:
            self._totals.rep_count += update.rep_increment
        if update.hold_seconds is not None:
            self._totals.rep_count = float(update.hold_seconds)
        if update.phase is not None:
            self._totals.phase = update.phase.value
        if update.cue:
            self._totals.cue = update.cue
