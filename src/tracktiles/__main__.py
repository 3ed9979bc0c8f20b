import sys

from tracktiles.cli import main

sys.exit(main())
