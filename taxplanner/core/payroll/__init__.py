from taxplanner.core.payroll.cpp_2025 import (
    CPP_2025,
    ContributionBreakdown,
    ContributionTierConfig,
    ContributionTreatment,
    CppTreatment,
    compute_contributions,
    cpp_treatment,
    split_contribution_bases,
)
from taxplanner.core.payroll.limits_2025 import rrsp_room_2025

__all__ = [
    "CPP_2025",
    "ContributionBreakdown",
    "ContributionTierConfig",
    "ContributionTreatment",
    "CppTreatment",
    "compute_contributions",
    "cpp_treatment",
    "rrsp_room_2025",
    "split_contribution_bases",
]
