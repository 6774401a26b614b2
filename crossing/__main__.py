import sys

from crossing.cli import main

sys.exit(main())
