import sys

from visitorgen.cli import main

sys.exit(main())
