import sys

from deskdrop.main import main

sys.exit(main())
