from __future__ import annotations

from typing import Any, Dict

from ..config import RunConfig
from ..errors import AutofixError
from ..lib.pkg import apt_install


class KernelHeadersStep:
    step_id = "30_kernel_headers"
    # DKMS cannot build the module without headers for the *running* kernel.
    title = "3. Install kernel headers (CRITICAL)"

    def run(self, cfg: RunConfig, state: Dict[str, Any]) -> Dict[str, Any]:
        kernel = state.get("kernel")
        if not kernel:
            raise AutofixError("kernel release missing; run sanity checks first")

        apt_install([f"linux-headers-{kernel}"], dry_run=cfg.dry_run)
        return state
