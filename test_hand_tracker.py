"""
Tests for the hand tracker command line

Run with: python -m pytest test_hand_tracker.py -v
"""

import unittest
from unittest.mock import MagicMock, patch

import hand_tracker


class TestParser(unittest.TestCase):

    def test_defaults(self):
        args = hand_tracker.build_parser().parse_args([])
        self.assertEqual(args.camera, 0)
        self.assertIsNone(args.input)
        self.assertEqual(args.output, "video.avi")
        self.assertFalse(args.no_record)
        self.assertFalse(args.no_display)
        self.assertFalse(args.show_contour)
        self.assertEqual(args.log_level, "INFO")

    def test_options(self):
        args = hand_tracker.build_parser().parse_args(
            ["-c", "2", "-i", "in.avi", "-o", "out.avi", "--show-contour", "--width", "640"]
        )
        self.assertEqual(args.camera, 2)
        self.assertEqual(args.input, "in.avi")
        self.assertEqual(args.output, "out.avi")
        self.assertTrue(args.show_contour)
        self.assertEqual(args.width, 640)


class TestMain(unittest.TestCase):

    @patch("hand_tracker.run_hand_tracker", return_value=12)
    def test_passes_options(self, run):
        code = hand_tracker.main(["--camera", "1", "--no-record", "--no-display"])

        self.assertEqual(code, 0)
        run.assert_called_once_with(
            camera_index=1,
            input_path=None,
            output_path="video.avi",
            record=False,
            display=False,
            show_contour=False,
            width=None,
            height=None,
        )

    @patch("hand_tracker.run_hand_tracker", side_effect=RuntimeError("Failed to open capture source 0"))
    def test_fatal_error_exit_code(self, run):
        with self.assertLogs("hand_tracker", level="ERROR"):
            code = hand_tracker.main([])
        self.assertEqual(code, 1)


class TestRunHandTracker(unittest.TestCase):

    def setUp(self):
        self.cap = MagicMock()
        self.cap.isOpened.return_value = True
        self.cap.get.return_value = 0.0
        self.cap.read.return_value = (False, None)
        self.capture_patcher = patch("cv2.VideoCapture", return_value=self.cap)
        self.capture_patcher.start()

    def tearDown(self):
        self.capture_patcher.stop()

    def test_headless_file_without_recording(self):
        processed = hand_tracker.run_hand_tracker(
            input_path="hand.avi", record=False, display=False
        )
        self.assertEqual(processed, 0)
        self.cap.release.assert_called_once()

    def test_camera_without_frames_is_fatal(self):
        with self.assertRaises(RuntimeError):
            hand_tracker.run_hand_tracker(record=False, display=False)
        self.cap.release.assert_called_once()

    @patch("cv2.VideoWriter")
    def test_records_with_fallback_fps(self, video_writer):
        video_writer.return_value.isOpened.return_value = True

        hand_tracker.run_hand_tracker(input_path="hand.avi", output_path="out.avi", display=False)

        args = video_writer.call_args[0]
        self.assertEqual(args[0], "out.avi")
        self.assertEqual(args[2], 10)
        video_writer.return_value.release.assert_called_once()


if __name__ == "__main__":
    unittest.main()
