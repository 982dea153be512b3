import sys

from proptable.table import main

sys.exit(main())
