import math
import unittest
from unittest.mock import Mock

from core.entities.classification import Phase
from core.entities.classifier_config import TimedHoldConfig
from core.entities.pose_entity import LANDMARK_COUNT, Frame, Joint, Landmark
from core.service.classifiers import TimedHoldClassifier

LEFT_BODY = (Landmark.LEFT_SHOULDER, Landmark.LEFT_HIP, Landmark.LEFT_ANKLE)


def body_frame(hip_angle, timestamp=None):
    rad = math.radians(hip_angle)
    slots = [None] * LANDMARK_COUNT
    slots[Landmark.LEFT_SHOULDER] = Joint(x=0.6, y=0.5)
    slots[Landmark.LEFT_HIP] = Joint(x=0.5, y=0.5)
    slots[Landmark.LEFT_ANKLE] = Joint(x=0.5 + 0.1 * math.cos(rad), y=0.5 + 0.1 * math.sin(rad))
    return Frame.from_landmarks(slots, timestamp=timestamp)


class TestTimedHoldClassifier(unittest.TestCase):
    def setUp(self):
        self.config = TimedHoldConfig(joints=[LEFT_BODY], hold_angle=165.0, form_cue="Lower hips")
        self.clock = Mock(return_value=100.0)
        self.classifier = TimedHoldClassifier(self.config, clock=self.clock)

    def test_hold_reports_elapsed_whole_seconds(self):
        seconds = []
        for now in (100.0, 101.2, 102.9, 103.0):
            self.clock.return_value = now
            update = self.classifier.update(body_frame(175))
            self.assertEqual(update.phase, Phase.HOLD)
            seconds.append(update.hold_seconds)
        self.assertEqual(seconds, [0, 1, 2, 3])

    def test_form_break_resets_to_zero_and_restarts(self):
        for now in (100.0, 103.0):
            self.clock.return_value = now
            self.classifier.update(body_frame(175))

        self.clock.return_value = 103.5
        broken = self.classifier.update(body_frame(140))
        self.assertEqual(broken.phase, Phase.FORM)
        self.assertEqual(broken.hold_seconds, 0)
        self.assertEqual(broken.cue, "Lower hips")

        self.clock.return_value = 104.0
        self.assertEqual(self.classifier.update(body_frame(175)).hold_seconds, 0)
        self.clock.return_value = 105.0
        self.assertEqual(self.classifier.update(body_frame(175)).hold_seconds, 1)

    def test_frame_timestamp_takes_precedence_over_clock(self):
        self.classifier.update(body_frame(175, timestamp=10.0))
        update = self.classifier.update(body_frame(175, timestamp=12.5))
        self.assertEqual(update.hold_seconds, 2)
        self.clock.assert_not_called()

    def test_switching_time_source_restarts_hold(self):
        self.classifier.update(body_frame(175, timestamp=1.0))
        self.clock.return_value = 5000.0
        switched = self.classifier.update(body_frame(175))
        self.assertEqual(switched.hold_seconds, 0)
        self.clock.return_value = 5002.0
        self.assertEqual(self.classifier.update(body_frame(175)).hold_seconds, 2)
        back = self.classifier.update(body_frame(175, timestamp=3.0))
        self.assertEqual(back.hold_seconds, 0)

    def test_timestamp_going_back_restarts_hold(self):
        self.classifier.update(body_frame(175, timestamp=50.0))
        self.assertEqual(self.classifier.update(body_frame(175, timestamp=10.0)).hold_seconds, 0)
        self.assertEqual(self.classifier.update(body_frame(175, timestamp=13.0)).hold_seconds, 3)

    def test_never_reports_repetition_increments(self):
        update = self.classifier.update(body_frame(175))
        self.assertIsNone(update.rep_increment)

    def test_missing_body_keeps_hold_running(self):
        self.classifier.update(body_frame(175))
        missing = self.classifier.update(Frame.from_landmarks([None] * LANDMARK_COUNT))
        self.assertIsNone(missing.phase)
        self.assertIsNone(missing.hold_seconds)
        self.assertEqual(self.classifier.hold_started_at, 100.0)

    def test_reset_clears_hold_start(self):
        self.classifier.update(body_frame(175))
        self.classifier.reset()
        self.assertIsNone(self.classifier.hold_started_at)
