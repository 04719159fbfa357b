"""
MU Toolchain probe: the MU library and the LLVM build it pins.
"""

import os

from hostvalidate.collectors.toolchain import source_env_script
from hostvalidate.config import MU_ENV_SCRIPT, MU_ENV_VARS, MU_LIB_PATH, MU_LLVM_ROOT
from hostvalidate.probes.base import Probe


class ToolchainProbe(Probe):
    name = "toolchain"
    title = "MU Toolchain"

    def run(self, ledger, host):
        if not host.is_dir(MU_LIB_PATH):
            ledger.warn(f"MU library not found ({MU_LIB_PATH})")
            return
        ledger.ok("MU library installed")

        if not host.is_file(MU_ENV_SCRIPT):
            ledger.warn("MU LLVM env script not found")
            return

        values = source_env_script(host, MU_ENV_SCRIPT, MU_ENV_VARS)
        llvm_version, revision = (values[name] for name in MU_ENV_VARS)
        if not (llvm_version and revision):
            ledger.warn(f"{' or '.join(MU_ENV_VARS)} not set")
            return

        llvm_dir = os.path.join(MU_LLVM_ROOT, llvm_version, revision)
        if host.is_dir(llvm_dir):
            ledger.ok(f"MU LLVM installed ({llvm_version}/{revision})")
        else:
            ledger.warn(f"MU LLVM directory not found: {llvm_dir}")
