#!/usr/bin/env python3

import argparse
from pathlib import Path
import time
from typing import Optional

import hexapod.constants as constants
from hexapod import labels
from hexapod.configuration import HexapodParameters, ParametersProvider
from hexapod.controller import HexapodController
from hexapod.logger import Logger

log = Logger().setup_logger(enable_stream_handler=True)


def run(
    rate: float = constants.FRAME_RATE_HZ,
    duration: float = constants.DEFAULT_RUN_DURATION,
    config: Optional[Path] = None,
    intro: bool = True,
    realtime: bool = False,
) -> HexapodController:
    """
    Drive a controller on a fixed step clock for ``duration`` seconds.

    Without ``realtime`` the frames run back to back, so a run is
    deterministic and finishes as fast as the solver allows.
    """
    parameters = HexapodParameters.from_json(config) if config else ParametersProvider().parameters
    controller = HexapodController(parameters, intro=intro)

    frame_duration = 1.0 / rate
    frames = int(round(duration * rate))

    for frame in range(frames):
        frame_start = time.monotonic()

        controller.tick(frame_duration)

        if frame % constants.TELEMETRY_UPDATE_INTERVAL == 0:
            pose = controller.model.pose
            log.info(labels.MAIN_TELEMETRY.format(frame, pose.x, pose.y, pose.z, pose.roll, pose.pitch, pose.yaw))

        if realtime:
            remaining = frame_duration - (time.monotonic() - frame_start)
            if remaining > 0:
                time.sleep(remaining)

    return controller


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description='Hexapod kinematics simulation')
    parser.add_argument('--rate', type=float, default=constants.FRAME_RATE_HZ, help='Frames per second')
    parser.add_argument(
        '--duration', type=float, default=constants.DEFAULT_RUN_DURATION, help='Simulated run time in seconds'
    )
    parser.add_argument('--config', type=Path, default=None, help='Parameter file (JSON)')
    parser.add_argument('--no-intro', action='store_true', help='Do not play the stand and wiggle animations')
    parser.add_argument('--realtime', action='store_true', help='Pace the frames to the wall clock')
    args = parser.parse_args(argv)

    if args.rate <= 0:
        parser.error('--rate must be positive')

    log.info(labels.MAIN_STARTING)

    try:
        run(args.rate, args.duration, args.config, intro=not args.no_intro, realtime=args.realtime)

    except KeyboardInterrupt:
        log.info(labels.MAIN_TERMINATED_CTRL_C)

    else:
        log.info(labels.MAIN_TERMINATED_NORMAL)


if __name__ == '__main__':
    main()
