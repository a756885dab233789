"""Toolchain resolution.

- Probe primitive (probe.py)
- Candidates, tables and validators (candidate.py)
- Resolution strategy (resolver.py)
"""

from tcr.toolchain.candidate import (
    Candidate,
    CommandValidator,
    LazyTable,
    StaticTable,
    ToolchainSource,
    ToolchainTable,
    Validator,
    run_validator,
)
from tcr.toolchain.probe import Prober, probe
from tcr.toolchain.resolver import ToolchainResolver, env_hint_name, toolchain_dir

__all__ = [
    # Candidates
    "Candidate",
    "CommandValidator",
    "LazyTable",
    "StaticTable",
    "ToolchainSource",
    "ToolchainTable",
    "Validator",
    "run_validator",
    # Probe
    "Prober",
    "probe",
    # Resolve
    "ToolchainResolver",
    "env_hint_name",
    "toolchain_dir",
]
