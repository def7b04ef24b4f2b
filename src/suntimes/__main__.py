import sys

from suntimes.cli import main

sys.exit(main())
