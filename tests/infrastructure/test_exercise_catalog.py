import pytest

from core.entities.classifier_config import AngleHysteresisConfig, SequenceConfig
from core.exceptions import UnknownClassifierPatternError
from core.service.classifiers import (
    AngleHysteresisClassifier,
    BaselineDriftClassifier,
    KneeLiftClassifier,
    RatioHysteresisClassifier,
    SequenceClassifier,
    ShoulderTapClassifier,
    TimedHoldClassifier,
    TorsoTwistClassifier,
)
from core.usecase import ClassificationEngine
from infrastructure.catalog import ClassifierFactory, default_catalog

EXPECTED = {
    "pushup": AngleHysteresisClassifier,
    "plankupdown": AngleHysteresisClassifier,
    "pikepushup": AngleHysteresisClassifier,
    "squats": AngleHysteresisClassifier,
    "glutebridge": AngleHysteresisClassifier,
    "lunge": AngleHysteresisClassifier,
    "crunches": RatioHysteresisClassifier,
    "legraises": RatioHysteresisClassifier,
    "jumpingjacks": RatioHysteresisClassifier,
    "calfraise": BaselineDriftClassifier,
    "plank": TimedHoldClassifier,
    "highknees": KneeLiftClassifier,
    "mountainclimbers": KneeLiftClassifier,
    "shouldertap": ShoulderTapClassifier,
    "russiantwists": TorsoTwistClassifier,
    "burpees": SequenceClassifier,
}


@pytest.fixture
def catalog():
    return default_catalog()


def test_catalog_covers_every_exercise(catalog):
    assert set(catalog) == set(EXPECTED)


@pytest.mark.parametrize("exercise_id, classifier_class", sorted(EXPECTED.items()))
def test_factory_builds_expected_classifier(catalog, exercise_id, classifier_class):
    assert type(ClassifierFactory.create(catalog[exercise_id])) is classifier_class


def test_visibility_threshold_applies_to_every_entry():
    catalog = default_catalog(visibility_threshold=0.8)
    assert {config.visibility_threshold for config in catalog.values()} == {0.8}


def test_aliases_share_configuration_but_not_instances(catalog):
    assert catalog["pushup"] == catalog["pikepushup"]
    engine = ClassificationEngine.from_catalog(catalog, ClassifierFactory.create)
    assert engine.classifier("pushup") is not engine.classifier("pikepushup")
    assert len(engine.exercises) == len(EXPECTED)


def test_squat_and_pushup_thresholds(catalog):
    squats = catalog["squats"]
    assert isinstance(squats, AngleHysteresisConfig)
    assert (squats.high_angle, squats.low_angle, squats.combine) == (160.0, 90.0, "min")
    assert catalog["pushup"].combine == "max"
    assert catalog["lunge"].low_angle == 100.0


def test_factory_passes_clock_to_timed_hold(catalog):
    classifier = ClassifierFactory.create(catalog["plank"], clock=lambda: 7.0)
    assert classifier._clock() == 7.0


def test_factory_rejects_unknown_pattern():
    config = SequenceConfig().model_copy(update={"pattern": "cartwheel"})
    with pytest.raises(UnknownClassifierPatternError):
        ClassifierFactory.create(config)
