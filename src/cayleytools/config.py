from __future__ import annotations

import os


# Soft limit on group order. Tables are O(n^2), so larger groups still work
# but are reported.
MAX_ORDER = int(os.environ.get("CAYLEYTOOLS_MAX_ORDER", "100"))
