"""Shared constants for framestep.

Key codes are the values returned by cv2.waitKeyEx(). Letters and ASCII
control keys are identical across HighGUI backends; navigation keys are not.
"""

# =========================================================================
# ASCII keys
# =========================================================================

KEY_ESCAPE = 27
KEY_SPACE = 32

# =========================================================================
# Navigation keys per HighGUI backend
# =========================================================================

# GTK (X11 keysyms)
GTK_KEY_HOME = 0xFF50
GTK_KEY_LEFT = 0xFF51
GTK_KEY_RIGHT = 0xFF53
GTK_KEY_END = 0xFF57

# Qt backend (Qt::Key values, 0x01000000 range)
QT_KEY_HOME = 0x01000010
QT_KEY_END = 0x01000011
QT_KEY_LEFT = 0x01000012
QT_KEY_RIGHT = 0x01000014

# Win32 (virtual key code << 16)
WIN_KEY_END = 0x230000
WIN_KEY_HOME = 0x240000
WIN_KEY_LEFT = 0x250000
WIN_KEY_RIGHT = 0x270000

# Cocoa (NSFunctionKey unicode points)
MAC_KEY_LEFT = 0xF702
MAC_KEY_RIGHT = 0xF703
MAC_KEY_HOME = 0xF729
MAC_KEY_END = 0xF72B

LEFT_ARROW_KEYS = (GTK_KEY_LEFT, QT_KEY_LEFT, WIN_KEY_LEFT, MAC_KEY_LEFT)
RIGHT_ARROW_KEYS = (GTK_KEY_RIGHT, QT_KEY_RIGHT, WIN_KEY_RIGHT, MAC_KEY_RIGHT)
HOME_KEYS = (GTK_KEY_HOME, QT_KEY_HOME, WIN_KEY_HOME, MAC_KEY_HOME)
END_KEYS = (GTK_KEY_END, QT_KEY_END, WIN_KEY_END, MAC_KEY_END)

# =========================================================================
# Playback / overlay defaults
# =========================================================================

DEFAULT_WINDOW_NAME = "Simple Video Player"
DEFAULT_FPS = 30.0

# BGR, cv2.FONT_HERSHEY_SIMPLEX
OVERLAY_COLOR = (0, 255, 0)
OVERLAY_SCALE = 1.0
OVERLAY_THICKNESS = 2
OVERLAY_ORIGIN = (10, 30)

CONTROLS_HELP = """\
=== Simple Video Player Controls ===
SPACE    : Play/Pause
→ or D   : Next frame
← or A   : Previous frame
HOME     : Go to first frame
END      : Go to last frame
G        : Go to specific frame
ESC or Q : Quit
===================================="""
