#!/usr/bin/env python3
"""
framestep - Command Line Interface

Entry point for the framestep console script.
"""

import argparse
import logging
import sys

from framestep.__version__ import __version__

log = logging.getLogger(__name__)


def _setup_logging(verbose=0):
    """Configure root logging from the -v count."""
    if verbose >= 2:
        logging.basicConfig(level=logging.DEBUG, format='[%(levelname)s] %(name)s: %(message)s')
    elif verbose == 1:
        logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')
    else:
        logging.basicConfig(level=logging.WARNING, format='[%(levelname)s] %(message)s')


def build_parser():
    parser = argparse.ArgumentParser(
        prog="framestep",
        description="Step through video files frame by frame",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    framestep clip.mp4            Open clip.mp4 paused on the first frame
    framestep --fps 10 clip.mp4   Play back at 10 frames per second
    framestep                     Ask for the video path
    framestep --init-config       Write default settings to the config file
        """
    )
    parser.add_argument("path", nargs="?", help="Video file to open")
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v, -vv)"
    )
    parser.add_argument("--fps", type=float, help="Override playback rate (frames per second)")
    parser.add_argument("--config", help="Settings file (default: ~/.config/framestep/config.json)")
    parser.add_argument("--init-config", action="store_true",
                        help="Write default settings to the config file and exit")
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    if args.fps is not None and args.fps <= 0:
        print("Error: --fps must be positive", file=sys.stderr)
        return 1

    if args.init_config:
        return init_config(args.config)

    try:
        settings = _load_settings(args.config)
    except ValueError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return 1

    path = args.path
    if path is None:
        try:
            path = input("Enter video file path: ").strip()
        except EOFError:
            path = ""

    return play(path, settings=settings, fps=args.fps)


def _load_settings(config_path=None):
    from framestep.conf import Settings, get_settings
    if config_path:
        return Settings.load(config_path)
    return get_settings()


def init_config(config_path=None):
    """Write default settings so they can be edited by hand."""
    from framestep.conf import CONFIG_PATH, Settings
    target = config_path or CONFIG_PATH
    try:
        Settings().save(target)
    except OSError as e:
        print(f"Error: cannot write {target}: {e}", file=sys.stderr)
        return 1
    print(f"Wrote default settings to {target}")
    return 0


def play(path, settings=None, fps=None):
    """Open a video and run the interactive viewer. Returns exit status."""
    from framestep.conf import Settings
    from framestep.display import FrameDisplay
    from framestep.errors import InitialReadFailure, OpenFailure
    from framestep.frame_source import VideoSource
    from framestep.services.playback import PlaybackSession

    print("=== Video Player ===")
    print("Built with OpenCV\n")

    settings = settings or Settings()
    source = VideoSource(default_fps=settings.default_fps)
    display = FrameDisplay(settings)
    session = PlaybackSession(source, display, settings=settings, fps=fps)
    with source:
        try:
            session.load(path)
        except (OpenFailure, InitialReadFailure) as e:
            log.debug("Load failed", exc_info=True)
            print(f"Error: {e}", file=sys.stderr)
            print(f"Failed to load video: {path}", file=sys.stderr)
            return 1
        return session.run()


if __name__ == "__main__":
    sys.exit(main())
