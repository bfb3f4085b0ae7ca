"""Allow ``python -m chess_interactor``."""

import sys

from chess_interactor.app import main

sys.exit(main())
