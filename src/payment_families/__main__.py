import sys

from payment_families.entrypoints.cli import main

sys.exit(main())
