import sys

from payroll_desk.main import main

sys.exit(main())
