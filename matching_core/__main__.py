import sys

from matching_core.cli import main

sys.exit(main())
