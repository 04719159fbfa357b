import sys

from hostvalidate.main import main

sys.exit(main())
