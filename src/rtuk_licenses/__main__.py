"""Allow ``python -m rtuk_licenses``."""

import sys

from rtuk_licenses.main import main

sys.exit(main())
