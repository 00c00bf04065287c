"""Allow running as: python -m worduel"""

import sys

from .cli import main

sys.exit(main())
