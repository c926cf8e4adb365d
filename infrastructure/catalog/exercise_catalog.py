from typing import Dict

from core.entities.classification import Phase
from core.entities.classifier_config import (
    AngleHysteresisConfig,
    BaselineDriftConfig,
    ClassifierConfig,
    KneeLiftConfig,
    RatioHysteresisConfig,
    SequenceConfig,
    ShoulderTapConfig,
    TimedHoldConfig,
    TorsoTwistConfig,
)
from core.entities.pose_entity import Landmark as L

ELBOWS = [
    (L.LEFT_SHOULDER, L.LEFT_ELBOW, L.LEFT_WRIST),
    (L.RIGHT_SHOULDER, L.RIGHT_ELBOW, L.RIGHT_WRIST),
]
KNEES = [
    (L.LEFT_HIP, L.LEFT_KNEE, L.LEFT_ANKLE),
    (L.RIGHT_HIP, L.RIGHT_KNEE, L.RIGHT_ANKLE),
]
HIPS = [
    (L.LEFT_SHOULDER, L.LEFT_HIP, L.LEFT_ANKLE),
    (L.RIGHT_SHOULDER, L.RIGHT_HIP, L.RIGHT_ANKLE),
]

PUSHUP = AngleHysteresisConfig(
    joints=ELBOWS,
    combine="max",
    high_angle=160.0,
    low_angle=90.0,
    high_cue="Go down",
    low_cue="Push up!",
    between_cue="Keep going",
    rep_cue="Good rep!",
    missing_cue="Align side to camera",
)

SQUAT = AngleHysteresisConfig(
    joints=KNEES,
    combine="min",
    high_angle=160.0,
    low_angle=90.0,
    high_cue="Squat down",
    low_cue="Drive up!",
    between_cue="Lower",
    rep_cue="Good!",
    missing_cue="Legs out of view",
)

LUNGE = AngleHysteresisConfig(
    joints=KNEES,
    combine="min",
    high_angle=160.0,
    low_angle=100.0,
    high_cue="Lunge",
    low_cue="Up",
    between_cue="Lunge",
    rep_cue="Good!",
    missing_cue="Show legs",
)

CRUNCH = RatioHysteresisConfig(
    distance=(L.LEFT_SHOULDER, L.LEFT_KNEE),
    reference=(L.LEFT_HIP, L.LEFT_KNEE),
    high_ratio=1.7,
    low_ratio=1.1,
    high_phase=Phase.OUT,
    low_phase=Phase.CRUNCH,
    count_on="high",
    high_cue="Crunch",
    low_cue="Down",
    between_cue="Crunch",
    rep_cue="Crunch!",
    missing_cue="Torso in view",
)

JUMPING_JACK = RatioHysteresisConfig(
    distance=(L.LEFT_ANKLE, L.RIGHT_ANKLE),
    high_ratio=0.4,
    low_ratio=0.3,
    arms_overhead=True,
    high_phase=Phase.OPEN,
    low_phase=Phase.CLOSED,
    count_on="low",
    high_cue="Back in",
    low_cue="Jump!",
    between_cue="Keep jumping",
    rep_cue="Nice!",
    missing_cue="Hands in view",
)

CALF_RAISE = BaselineDriftConfig(
    joints=[L.LEFT_ANKLE, L.RIGHT_ANKLE],
    rise_threshold=0.05,
    return_threshold=0.02,
    count_on="low",
    high_cue="Down",
    low_cue="Rise",
    between_cue="Rise",
    rep_cue="Up",
    missing_cue="Feet in view",
)

PLANK = TimedHoldConfig(
    joints=HIPS,
    hold_angle=165.0,
    hold_cue="Hold it!",
    form_cue="Lower hips",
    missing_cue="Body out of view",
)

HIGH_KNEES = KneeLiftConfig(
    lift_threshold=0.1,
    left_cue="Next!",
    right_cue="Next!",
    hold_cue="Knees high",
    idle_cue="Knees high",
    missing_cue="Legs out of view",
)

SHOULDER_TAP = ShoulderTapConfig(
    tap_distance=0.15,
    idle_phase=Phase.TAP,
    left_cue="Tap!",
    right_cue="Tap!",
    hold_cue="Tap shoulders",
    idle_cue="Tap shoulders",
    missing_cue="Arms in view",
)

RUSSIAN_TWIST = TorsoTwistConfig(
    twist_threshold=0.1,
    idle_phase=Phase.TWIST,
    left_cue="Right",
    right_cue="Left",
    hold_cue="Twist",
    idle_cue="Twist",
    missing_cue="Shoulders in view",
)

BURPEE = SequenceConfig(
    plank_tolerance=0.2,
    stand_tolerance=0.2,
    plank_cue="Up!",
    rep_cue="Down!",
    between_cue="Move!",
    missing_cue="Body out of view",
)

EXERCISES: Dict[str, ClassifierConfig] = {
    "pushup": PUSHUP,
    "plankupdown": PUSHUP,
    "pikepushup": PUSHUP,
    "shouldertap": SHOULDER_TAP,
    "lunge": LUNGE,
    "glutebridge": SQUAT,
    "calfraise": CALF_RAISE,
    "plank": PLANK,
    "highknees": HIGH_KNEES,
    "burpees": BURPEE,
    "mountainclimbers": HIGH_KNEES,
    "jumpingjacks": JUMPING_JACK,
    "legraises": CRUNCH,
    "russiantwists": RUSSIAN_TWIST,
    "crunches": CRUNCH,
    "squats": SQUAT,
}


def default_catalog(visibility_threshold: float = 0.5) -> Dict[str, ClassifierConfig]:
    """
    Return the default exercise identifier to classifier configuration bindings.

    Aliases share one configuration; the engine still builds a separate
    classifier for each identifier.

    Args:
        visibility_threshold: Minimum joint visibility applied to every entry
    """
    return {
        exercise_id: config.model_copy(update={"visibility_threshold": visibility_threshold})
        for exercise_id, config in EXERCISES.items()
    }
