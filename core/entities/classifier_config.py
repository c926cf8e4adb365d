from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Literal, Optional, Tuple, Union
from typing_extensions import Annotated

from .classification import Phase
from .pose_entity import Landmark

JointPair = Tuple[Landmark, Landmark]
JointTriplet = Tuple[Landmark, Landmark, Landmark]


class ClassifierSettings(BaseModel):
    """Settings shared by every classifier configuration."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    visibility_threshold: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Minimum joint visibility accepted as evidence"
    )
    missing_cue: str = Field(
        default="Move into view",
        description="Cue shown when required joints are absent or not visible"
    )


class HysteresisSettings(ClassifierSettings):
    """Two-threshold latch between a high phase and a low phase."""
    high_phase: Phase = Field(default=Phase.UP, description="Phase latched at or above the high threshold")
    low_phase: Phase = Field(default=Phase.DOWN, description="Phase latched at or below the low threshold")
    count_on: Literal["high", "low"] = Field(
        default="high",
        description="Phase whose entry from the opposite phase counts one repetition"
    )
    high_cue: str = Field(default="Go down")
    low_cue: str = Field(default="Come up")
    between_cue: str = Field(default="Keep going")
    rep_cue: str = Field(default="Good rep!")

    @model_validator(mode="after")
    def validate_phases(self):
        if self.high_phase == self.low_phase:
            raise ValueError("high_phase and low_phase must differ")
        return self


class AngleHysteresisConfig(HysteresisSettings):
    pattern: Literal["angle_hysteresis"] = "angle_hysteresis"
    joints: List[JointTriplet] = Field(
        ...,
        min_length=1,
        description="One (end, vertex, end) triplet per body side"
    )
    combine: Literal["max", "min"] = Field(
        default="max",
        description="max picks the more extended side, min the more flexed side"
    )
    high_angle: float = Field(default=160.0, ge=0.0, le=180.0)
    low_angle: float = Field(default=90.0, ge=0.0, le=180.0)

    @model_validator(mode="after")
    def validate_angles(self):
        if self.high_angle <= self.low_angle:
            raise ValueError("high_angle must be greater than low_angle")
        return self


class RatioHysteresisConfig(HysteresisSettings):
    pattern: Literal["ratio_hysteresis"] = "ratio_hysteresis"
    distance: JointPair = Field(..., description="Joints whose distance is measured")
    reference: Optional[JointPair] = Field(
        default=None,
        description="Body-scaled reference length, frame width when omitted"
    )
    high_ratio: float = Field(..., gt=0.0)
    low_ratio: float = Field(..., gt=0.0)
    arms_overhead: bool = Field(
        default=False,
        description="High phase also needs both wrists above the nose, low phase both below"
    )

    @model_validator(mode="after")
    def validate_ratios(self):
        if self.high_ratio <= self.low_ratio:
            raise ValueError("high_ratio must be greater than low_ratio")
        return self


class BaselineDriftConfig(HysteresisSettings):
    pattern: Literal["baseline_drift"] = "baseline_drift"
    joints: List[Landmark] = Field(
        default=[Landmark.LEFT_ANKLE, Landmark.RIGHT_ANKLE],
        min_length=1,
        description="Candidate joints, the first visible one is tracked"
    )
    rise_threshold: float = Field(default=0.05, gt=0.0)
    return_threshold: float = Field(default=0.02, ge=0.0)

    @model_validator(mode="after")
    def validate_thresholds(self):
        if self.rise_threshold <= self.return_threshold:
            raise ValueError("rise_threshold must be greater than return_threshold")
        return self


class TimedHoldConfig(ClassifierSettings):
    pattern: Literal["timed_hold"] = "timed_hold"
    joints: List[JointTriplet] = Field(..., min_length=1)
    hold_angle: float = Field(default=165.0, ge=0.0, le=180.0)
    hold_cue: str = Field(default="Hold it!")
    form_cue: str = Field(default="Fix your form")


class AlternatingLimbSettings(ClassifierSettings):
    idle_phase: Phase = Field(default=Phase.RUN, description="Phase reported while no limb is active")
    left_cue: str = Field(default="Next!")
    right_cue: str = Field(default="Next!")
    hold_cue: str = Field(default="Switch sides")
    idle_cue: str = Field(default="Keep moving")


class KneeLiftConfig(AlternatingLimbSettings):
    pattern: Literal["knee_lift"] = "knee_lift"
    lift_threshold: float = Field(
        default=0.1,
        gt=0.0,
        description="How far the knee must rise above the hip"
    )


class ShoulderTapConfig(AlternatingLimbSettings):
    pattern: Literal["shoulder_tap"] = "shoulder_tap"
    tap_distance: float = Field(
        default=0.15,
        gt=0.0,
        description="Wrist to opposite shoulder distance that counts as a tap"
    )


class TorsoTwistConfig(AlternatingLimbSettings):
    pattern: Literal["torso_twist"] = "torso_twist"
    twist_threshold: float = Field(
        default=0.1,
        gt=0.0,
        description="Horizontal shoulder offset that counts as a twist"
    )


class SequenceConfig(ClassifierSettings):
    pattern: Literal["sequence"] = "sequence"
    plank_tolerance: float = Field(
        default=0.2,
        gt=0.0,
        description="Max vertical shoulder to ankle gap for the plank position"
    )
    stand_tolerance: float = Field(
        default=0.2,
        gt=0.0,
        description="Max horizontal shoulder to ankle gap for the standing position"
    )
    plank_cue: str = Field(default="Up!")
    rep_cue: str = Field(default="Down!")
    between_cue: str = Field(default="Move!")


ClassifierConfig = Annotated[
    Union[
        AngleHysteresisConfig,
        RatioHysteresisConfig,
        BaselineDriftConfig,
        TimedHoldConfig,
        KneeLiftConfig,
        ShoulderTapConfig,
        TorsoTwistConfig,
        SequenceConfig,
    ],
    Field(discriminator="pattern"),
]
