import sys

from namespace_demo.cli import main

sys.exit(main())
