import sys

from timeln.main import main

sys.exit(main())
