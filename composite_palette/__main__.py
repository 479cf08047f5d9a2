"""Allow ``python -m composite_palette``"""

import sys

from .cli import main

sys.exit(main())
