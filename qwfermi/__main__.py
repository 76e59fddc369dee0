import sys

from qwfermi.main import main

sys.exit(main())
