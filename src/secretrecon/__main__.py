import sys

from secretrecon.cli import main

sys.exit(main())
