# init_db.py (run after `pip install -e .`)
import sys

from ascend_upsc.db.init_db import main

if __name__ == "__main__":
    sys.exit(main())
