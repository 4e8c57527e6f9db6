from __future__ import annotations

import os

# plot tests must not open windows; read by raykernel.viz.plot2d at import time
os.environ["RAYKERNEL_MPL_BACKEND"] = "Agg"
