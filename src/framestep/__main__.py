"""Allow ``python -m framestep``."""
import sys

from framestep.cli import main

sys.exit(main())
