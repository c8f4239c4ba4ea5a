import sys

from shopcart.cli import main

sys.exit(main())
