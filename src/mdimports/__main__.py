from __future__ import annotations

import sys

from mdimports.main import main

sys.exit(main())
