import sys

from splitfile.cli import main

sys.exit(main())
