import sys

from account_contract.cli import main

sys.exit(main())
