"""framestep version information."""

__version__ = "0.3.1"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.1.0 - Initial release: OpenCV window, play/pause, step, jump to start/end
# 0.2.0 - Go-to-frame prompt, console progress line, arrow/Home/End keys
# 0.3.0 - Split navigation state machine from decoding, JSON settings file,
#         --fps pacing override, resync after failed reads
# 0.3.1 - Quit when the viewer window is closed with the mouse
