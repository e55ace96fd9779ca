"""Allow running the text processor with ``python -m text_processor``."""

import sys

from text_processor.cli import main

sys.exit(main())
