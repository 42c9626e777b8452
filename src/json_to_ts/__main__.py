"""Allow ``python -m json_to_ts``."""

import sys

from json_to_ts.cli import main


sys.exit(main())
