import sys

from eulerian.main import main

sys.exit(main())
