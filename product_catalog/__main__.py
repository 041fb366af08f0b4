import sys

from product_catalog.main import main

sys.exit(main())
