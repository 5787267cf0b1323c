"""
Contour-based Hand Tracker

Segments skin-colored regions, takes the largest contour as the hand and
derives its center, radius and fingertips from convexity defects.
Annotated frames are shown and recorded to an MJPG video file.
"""

import argparse
import logging
import sys
import threading
from contextlib import ExitStack

import cv2

from handtrack.hand_model.config import VIDEO_FILE
from handtrack.hand_tracks import (
    HandPipeline,
    OpenCVVision,
    TrackerDisplay,
    capture_properties,
    open_capture,
    open_recorder,
)

logger = logging.getLogger("hand_tracker")


INSTRUCTIONS = """
==================================================
Contour-based Hand Tracker
==================================================

Hold an open hand in front of the camera, arm entering
from the bottom of the frame. The overlay appears when
all five fingers are detected.

Controls:
  'q' or ESC - Quit
"""


def run_hand_tracker(
    camera_index: int = 0,
    input_path: str | None = None,
    output_path: str = VIDEO_FILE,
    record: bool = True,
    display: bool = True,
    show_contour: bool = False,
    width: int | None = None,
    height: int | None = None,
) -> int:
    """Run the hand tracker and return the number of processed frames."""
    if display:
        print(INSTRUCTIONS)

    source = input_path if input_path else camera_index
    pipeline = HandPipeline(OpenCVVision(), show_contour=show_contour)
    stop_event = threading.Event()

    with ExitStack() as stack:
        cap = stack.enter_context(open_capture(source, width, height))

        recorder = None
        if record:
            fps, frame_width, frame_height = capture_properties(cap)
            recorder = stack.enter_context(
                open_recorder(output_path, fps, (frame_width, frame_height))
            )

        tracker_display = stack.enter_context(TrackerDisplay()) if display else None

        try:
            return pipeline.run(
                cap,
                display=tracker_display,
                recorder=recorder,
                stop_event=stop_event,
                fail_on_end=input_path is None,
            )
        except KeyboardInterrupt:
            stop_event.set()
            logger.info("Interrupted after %d frames", pipeline.frame_count)
            return pipeline.frame_count
        finally:
            if display:
                cv2.destroyAllWindows()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Contour-based Hand Tracker")
    parser.add_argument("-c", "--camera", type=int, default=0, help="Camera index")
    parser.add_argument("-i", "--input", default=None, help="Read frames from a video file instead of a camera")
    parser.add_argument("-o", "--output", default=VIDEO_FILE, help="Output video file")
    parser.add_argument("--no-record", action="store_true", help="Do not record the output video")
    parser.add_argument("--no-display", action="store_true", help="Run without windows")
    parser.add_argument("--show-contour", action="store_true", help="Draw the hand contour in the overlay")
    parser.add_argument("--width", type=int, default=None, help="Requested capture width")
    parser.add_argument("--height", type=int, default=None, help="Requested capture height")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        run_hand_tracker(
            camera_index=args.camera,
            input_path=args.input,
            output_path=args.output,
            record=not args.no_record,
            display=not args.no_display,
            show_contour=args.show_contour,
            width=args.width,
            height=args.height,
        )
    except RuntimeError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
