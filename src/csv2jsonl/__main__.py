import sys

from csv2jsonl.main import main

sys.exit(main())
