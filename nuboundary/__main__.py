import sys

from nuboundary.cli import main

sys.exit(main())
